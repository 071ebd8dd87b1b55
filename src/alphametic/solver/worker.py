"""Main module for worker tasks in the parallel solver."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized

import numpy as np

from alphametic.puzzle_config import PuzzleConfig
from alphametic.solver.assigner import assign_digits
from alphametic.solver.evaluator import evaluate
from alphametic.solver.utils import Mapping


@dataclass(frozen=True)
class Result:
    """A satisfying mapping and the seed of the random stream that found it."""

    mapping: Mapping
    """The letter to digit assignment."""

    seed: int
    """Seed of the random stream used by the search."""

    attempts: int
    """Number of mappings evaluated, including the satisfying one."""


def search(
    seed: int,
    puzzle: PuzzleConfig,
    *,
    min_digits: int = 9,
    skip_leading_zero_addends: bool = True,
    should_stop: Callable[[], bool] | None = None,
    check_interval: int = 256,
    max_attempts: int | None = None,
) -> Result | None:
    """Draw random mappings until one solves the puzzle.

    The search owns a random stream derived from `seed`; nothing is shared with other
    searches.  Without `should_stop` or `max_attempts` the loop only ends on success, so
    it never returns for an unsatisfiable puzzle.

    Args:
        seed (int): Seed for this search's random stream.
        puzzle (PuzzleConfig): The puzzle to solve.
        min_digits (int): Minimum size of the digit range.
        skip_leading_zero_addends (bool): See `evaluator.evaluate`.
        should_stop (Callable[[], bool] | None): Polled every `check_interval` attempts;
            the search gives up when it returns True.
        check_interval (int): Attempts between calls to `should_stop`.
        max_attempts (int | None): Give up after this many attempts.

    Returns:
        A Result, or None if the search was stopped or ran out of attempts.
    """
    rng = np.random.default_rng(seed)
    letters = puzzle.letters
    leading_letters = puzzle.leading_letters

    attempts = 0
    while True:
        if max_attempts is not None and attempts >= max_attempts:
            return None
        if should_stop is not None and attempts % check_interval == 0 and should_stop():
            return None

        mapping = assign_digits(letters, leading_letters, rng, min_digits=min_digits)
        attempts += 1
        if evaluate(
            mapping, puzzle, skip_leading_zero_addends=skip_leading_zero_addends
        ).satisfied:
            return Result(mapping=mapping, seed=seed, attempts=attempts)


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    race_ctr: Synchronized[int]
    """Shared race counter.  A contestant stops once this no longer equals its race ID."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: Synchronized[int],
    race_ctr: Synchronized[int],
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        race_ctr (Synchronized[int]): Shared race counter, advanced by the coordinator
            when a race is won.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    worker_state = WorkerState(
        worker_idx=worker_idx,
        race_ctr=race_ctr,
    )
    print(f"Worker {worker_state.worker_idx} initialized.", flush=True)


def worker_task(
    seed: int,
    race_id: int,
    puzzle_config: dict,
    search_options: dict,
) -> Result | None:
    """Worker task to search for a solution as one contestant of a race.

    Args:
        seed (int): Seed for the contestant's random stream.
        race_id (int): Value of the race counter when the race started.
        puzzle_config (dict): Dict representation of a PuzzleConfig.
        search_options (dict): Keyword arguments for `search`.

    Returns:
        A Result, or None if the race was already won by another contestant.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    race_ctr = worker_state.race_ctr

    def race_is_over() -> bool:
        return race_ctr.value != race_id

    return search(
        seed,
        PuzzleConfig.from_dict(puzzle_config),
        should_stop=race_is_over,
        **search_options,
    )
