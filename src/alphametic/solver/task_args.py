"""Task arguments shared by all contestants of a sampling run."""

from datetime import datetime
from time import time

from alphametic.puzzle_config import PuzzleConfig
from alphametic.solver.config import SolverConfig
from alphametic.solver.utils import TIMESTAMP_FMT


class TaskArgs:
    """Wrapper for task arguments for the solver.

    Pickleable, so that it can be used with multiprocessing (passed to worker processes).
    """

    def __init__(self, *, config: PuzzleConfig, settings: SolverConfig, n_contestants: int) -> None:
        """Initialize the task arguments for the given puzzle and settings.

        Args:
            config (PuzzleConfig): The puzzle to solve.
            settings (SolverConfig): Solver settings; the search options are copied from here.
            n_contestants (int): Number of contestants per race.
        """
        self.puzzle_config = config.to_dict()
        """dict representing the puzzle."""

        self.n_contestants = n_contestants
        """Number of contestants per race."""

        self.search_options: dict[str, object] = {
            "min_digits": settings.min_digits,
            "skip_leading_zero_addends": settings.skip_leading_zero_addends,
            "check_interval": settings.check_interval,
            "max_attempts": settings.max_attempts,
        }
        """Keyword arguments for `worker.search`.

        Passed explicitly rather than read from the settings in the worker, since worker
        processes may not share the parent's settings object.
        """

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        puzzle = PuzzleConfig.from_dict(self.puzzle_config)
        return {
            "puzzle": str(puzzle),
            "letters": "".join(puzzle.letters),
            "leading_letters": "".join(sorted(puzzle.leading_letters)),
            "n_contestants": self.n_contestants,
            "search_options": dict(self.search_options),
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
