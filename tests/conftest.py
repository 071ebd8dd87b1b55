import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import alphametic without installing it
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from alphametic.puzzle_config import PuzzleConfig, parse_equation  # noqa: E402
from alphametic.solver.config import SolverConfig  # noqa: E402


@pytest.fixture
def cash_puzzle() -> PuzzleConfig:
    """ALAS + LASS + NO + MORE = CASH (10 letters, 15 solutions)."""
    return parse_equation("alas+lass+no+more=cash")


@pytest.fixture
def easy_puzzle() -> PuzzleConfig:
    """A + B = C, solved by roughly one draw in fifteen."""
    return parse_equation("a+b=c")


@pytest.fixture
def small_puzzle() -> PuzzleConfig:
    """TO + GO = OUT (only solution: 21 + 81 = 102)."""
    return parse_equation("to+go=out")


@pytest.fixture
def impossible_puzzle() -> PuzzleConfig:
    """A single digit can never equal a three-digit number."""
    return parse_equation("a=bcd")


@pytest.fixture
def settings(tmp_path: Path) -> SolverConfig:
    """Solver settings writing logs to a temporary directory."""
    return SolverConfig(log_dir=str(tmp_path / "logs"), n_samples=3, n_contestants=2)
