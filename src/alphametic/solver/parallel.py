"""Implementation of the parallel race: contestant distribution and result collection."""

from __future__ import annotations

import traceback
from concurrent.futures import Executor, as_completed, wait
from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized
from time import time_ns
from typing import Literal, TextIO, TypedDict

from alphametic.solver.task_args import TaskArgs
from alphametic.solver.utils import int_comma
from alphametic.solver.worker import Result, worker_task


class ContestantPayload(TypedDict):
    """Payload submitted to worker processes."""

    contestant: int
    """Index of the contestant within the race."""
    seed: int
    """Seed for the contestant's random stream."""
    race_id: int
    """Value of the race counter when the race started."""
    puzzle_config: dict
    """Dict representation of a PuzzleConfig."""
    search_options: dict
    """Keyword arguments for `worker.search`."""


@dataclass
class ContestantResult:
    """Wrapper for contestant task results."""

    contestant: int
    status: Literal["success", "stopped", "error"]
    result: Result | None
    err_msg: str | None = None


def contestant_seeds(n_contestants: int) -> list[int]:
    """Generate a distinct, time-derived seed for each contestant."""
    now = time_ns()
    return [now * (i + 1) for i in range(n_contestants)]


def race(
    executor: Executor,
    task_args: TaskArgs,
    race_ctr: Synchronized[int],
    logf: TextIO,
) -> Result:
    """Race several independent searches and return the first solution found.

    All contestants are submitted before any result is awaited.  When the first one
    succeeds, the race counter is advanced, which tells the remaining contestants to stop;
    they are waited for before returning, so consecutive races never overlap.

    Args:
        executor (Executor): Executor for managing worker processes.  Its workers must have
            been initialized with `worker.init_worker_globals` using `race_ctr`.
        task_args (TaskArgs): Arguments shared by all contestants.
        race_ctr (Synchronized[int]): Shared race counter.
        logf: File object to log the race.

    Returns:
        The winning Result.

    Raises:
        RuntimeError: If no contestant found a solution.
    """
    race_id = race_ctr.value
    payloads: list[ContestantPayload] = [
        {
            "contestant": i,
            "seed": seed,
            "race_id": race_id,
            "puzzle_config": task_args.puzzle_config,
            "search_options": task_args.search_options,
        }
        for i, seed in enumerate(contestant_seeds(task_args.n_contestants))
    ]

    # We don't care which contestant wins, so just use a list instead of a map
    futures = [executor.submit(_contestant_task, payload) for payload in payloads]
    winner: ContestantResult | None = None
    try:
        for future in as_completed(futures):
            try:
                outcome = future.result()
            except Exception as e:
                print(f"Error retrieving contestant result: {str(e)}", flush=True)
                print(traceback.format_exc(), file=logf, flush=True)
                continue

            if outcome.status == "error":
                print(
                    f"Contestant {outcome.contestant} encountered an error:",
                    flush=True,
                )
                print(outcome.err_msg, file=logf, flush=True)
            elif outcome.status == "success" and outcome.result is not None:
                winner = outcome
                break
    finally:
        # Signal any remaining contestants to stop, then wait for them to wind down
        with race_ctr.get_lock():
            race_ctr.value += 1
        wait(futures)

    if winner is None or winner.result is None:
        print(f"Race {race_id}: no contestant found a solution.", file=logf, flush=True)
        raise RuntimeError(f"Race {race_id}: no contestant found a solution.")

    print(
        f"Race {race_id}: won by contestant {winner.contestant} "
        f"(seed {winner.result.seed}, {int_comma(winner.result.attempts)} attempts)",
        file=logf,
        flush=True,
    )
    return winner.result


def _contestant_task(args: ContestantPayload) -> ContestantResult:
    """Worker task to run one contestant of a race.

    Args:
        args (dict): Dictionary received from `executor.submit`.

    Returns:
        A ContestantResult wrapper.
    """
    contestant = args.get("contestant", -1)
    try:
        ret = worker_task(
            args["seed"],
            args["race_id"],
            args["puzzle_config"],
            args["search_options"],
        )
        return ContestantResult(
            contestant=contestant,
            status="success" if ret is not None else "stopped",
            result=ret,
        )
    except Exception as e:
        return ContestantResult(
            contestant=contestant,
            status="error",
            result=None,
            err_msg=f"Contestant encountered an error: {str(e)}\n{traceback.format_exc()}",
        )
