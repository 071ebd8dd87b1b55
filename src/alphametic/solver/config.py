"""Alphametic solver configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the alphametic solver."""

    puzzle: str = "alas+lass+no+more=cash"
    """Puzzle to solve when no puzzle file is given, as `word+word+...=target`."""

    n_samples: int = Field(default=100, ge=1)
    """Number of races to run (one Sample per race). Default: 100."""

    n_contestants: int = Field(default=2, ge=1)
    """Number of concurrent search workers per race. Default: 2."""

    min_digits: int = Field(default=9, ge=1)
    """Minimum size of the digit range drawn from. Widened to the letter count if larger.

    Default: 9, i.e. digits 0-8 for puzzles with at most nine distinct letters.
    """

    skip_leading_zero_addends: bool = True
    """Whether an addend whose numeral starts with 0 is left out of the sum.

    If False, such a draw is rejected instead. Default: True.
    """

    check_interval: int = Field(default=256, ge=1)
    """Number of attempts between checks for cancellation by the race coordinator."""

    max_attempts: int | None = Field(default=None, ge=1)
    """Give up a search after this many attempts. If None (default), search forever."""

    log_dir: str = "logs"
    """Directory under which per-run log files are written."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="ALPHAMETIC_",
        extra="forbid",
    )


config = SolverConfig()
