"""Main solver module: sampling races and reporting run-time statistics."""

from __future__ import annotations

import sys
from concurrent.futures import ProcessPoolExecutor
from datetime import datetime
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from pathlib import Path
from pprint import pprint
from time import perf_counter_ns
from typing import TextIO

from alphametic.puzzle_config import PuzzleConfig
from alphametic.solver.config import SolverConfig, config as solver_config
from alphametic.solver.parallel import race
from alphametic.solver.stats import Sample, Summary, format_report, summarize
from alphametic.solver.task_args import TaskArgs
from alphametic.solver.utils import TIMESTAMP_FMT, time_str
from alphametic.solver.worker import init_worker_globals


def get_executor(*, n_workers: int, race_ctr: Synchronized[int]) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor with one worker process per contestant.

    Args:
        n_workers (int): Number of worker processes to create.
        race_ctr (Synchronized[int]): Shared race counter to pass to workers.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized[int] = Value("i", 0)
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, race_ctr),
    )


def sample(
    puzzle_config: PuzzleConfig,
    *,
    n_contestants: int,
    n_samples: int,
    logf: TextIO,
    settings: SolverConfig | None = None,
) -> list[Sample]:
    """Run `n_samples` races one after another and time each of them.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        n_contestants (int): Number of contestants per race.
        n_samples (int): Number of races to run.
        logf: File object to log the sampling process.
        settings (SolverConfig | None): Search settings.  Defaults to the global settings.

    Returns:
        One Sample per race, in the order the races were run.
    """
    if n_contestants < 1 or n_samples < 1:
        raise ValueError("n_contestants and n_samples must both be at least 1.")

    task_args = TaskArgs(
        config=puzzle_config,
        settings=settings or solver_config,
        n_contestants=n_contestants,
    )
    print("Solver initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)

    race_ctr: Synchronized[int] = Value("i", 0)
    samples: list[Sample] = []

    with get_executor(n_workers=n_contestants, race_ctr=race_ctr) as executor:
        try:
            for i in range(n_samples):
                print(f"Race {i + 1}/{n_samples}", flush=True)
                start = perf_counter_ns()
                result = race(executor, task_args, race_ctr, logf)
                run_time = perf_counter_ns() - start
                samples.append(Sample(result=result, run_time=run_time))
                print(f"  Run time: {time_str(run_time)}", file=logf, flush=True)
        except KeyboardInterrupt as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e
        except Exception as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e

    return samples


def run(config: PuzzleConfig, settings: SolverConfig | None = None) -> Summary:
    """Run the solver on the given puzzle and print a report.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        settings (SolverConfig | None): Solver settings.  Defaults to the global settings.

    Returns:
        The summary of the collected samples.
    """
    settings = settings or solver_config
    print(f"puzzle: {config}")

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    logfile = Path(settings.log_dir) / config.slug / f"{timestamp}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            summary = solve_one(config, settings=settings, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)
    print()
    return summary


def solve_one(puzzle_config: PuzzleConfig, *, settings: SolverConfig, logf: TextIO) -> Summary:
    """Collect samples for a puzzle and report their statistics.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        settings (SolverConfig): Solver settings.
        logf: File object to log the solving process.
    """
    print(f"Selected puzzle: {puzzle_config}", file=logf, flush=True)
    print(f"Distinct letters: {len(puzzle_config.letters)}", file=logf, flush=True)
    print(
        f"Start time: {datetime.now().astimezone().strftime(TIMESTAMP_FMT)}",
        file=logf,
        flush=True,
    )
    print("Solver config:", file=logf, flush=True)
    pprint(settings.model_dump(), stream=logf, width=120)
    print("", file=logf, flush=True)

    samples = sample(
        puzzle_config,
        n_contestants=settings.n_contestants,
        n_samples=settings.n_samples,
        logf=logf,
        settings=settings,
    )

    summary = summarize(samples)
    report = format_report(
        summary,
        n_samples=settings.n_samples,
        n_contestants=settings.n_contestants,
    )
    print("", file=logf, flush=True)
    print(report, file=logf, flush=True)
    print(report)
    return summary
