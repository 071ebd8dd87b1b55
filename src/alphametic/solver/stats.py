"""Run-time statistics over the samples collected by the solver.

Durations are integer nanoseconds.  Sorting is stable, so ties between equal durations
are broken by sample order (the earliest sample comes first).
"""

from collections.abc import Sequence
from dataclasses import dataclass

from alphametic.solver.utils import format_mapping, int_comma, time_str
from alphametic.solver.worker import Result


@dataclass(frozen=True)
class Sample:
    """A race result and the wall-clock duration of the race."""

    result: Result
    run_time: int
    """Duration of the race, in nanoseconds."""

    def __str__(self) -> str:
        return (
            f"\n\tMapping: {format_mapping(self.result.mapping)}"
            f"\n\tSeed: {self.result.seed}"
            f"\n\tAttempts: {int_comma(self.result.attempts)}"
            f"\n\tRun Time: {time_str(self.run_time)}"
        )


@dataclass(frozen=True)
class Summary:
    """Aggregate run-time figures for a collection of samples."""

    count: int
    total: int
    mean: int
    median: int
    fastest: Sample
    slowest: Sample


def _require_nonempty(items: Sequence) -> None:
    if not items:
        raise ValueError("Statistics require at least one value.")


def total_duration(durations: Sequence[int]) -> int:
    """Sum of the durations."""
    _require_nonempty(durations)
    return sum(durations)


def mean_duration(durations: Sequence[int]) -> int:
    """Mean of the durations, truncated to a whole nanosecond."""
    return total_duration(durations) // len(durations)


def sort_durations(durations: Sequence[int], *, ascending: bool = True) -> list[int]:
    return sorted(durations, reverse=not ascending)


def median_duration(durations: Sequence[int]) -> int:
    """Median of the durations.

    For an even count, this is the mean of the two middle values, rounded down.
    """
    _require_nonempty(durations)
    ordered = sort_durations(durations)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) // 2
    return ordered[mid]


def fastest_duration(durations: Sequence[int]) -> int:
    _require_nonempty(durations)
    return sort_durations(durations)[0]


def slowest_duration(durations: Sequence[int]) -> int:
    _require_nonempty(durations)
    return sort_durations(durations, ascending=False)[0]


def sort_samples(samples: Sequence[Sample], *, ascending: bool = True) -> list[Sample]:
    """Sort samples by run time.  `sorted` is stable even with `reverse=True`."""
    return sorted(samples, key=lambda s: s.run_time, reverse=not ascending)


def fastest_sample(samples: Sequence[Sample]) -> Sample:
    _require_nonempty(samples)
    return sort_samples(samples)[0]


def slowest_sample(samples: Sequence[Sample]) -> Sample:
    _require_nonempty(samples)
    return sort_samples(samples, ascending=False)[0]


def summarize(samples: Sequence[Sample]) -> Summary:
    """Compute all aggregate figures for `samples`.

    Raises:
        ValueError: If `samples` is empty.
    """
    _require_nonempty(samples)
    run_times = [s.run_time for s in samples]
    return Summary(
        count=len(samples),
        total=total_duration(run_times),
        mean=mean_duration(run_times),
        median=median_duration(run_times),
        fastest=fastest_sample(samples),
        slowest=slowest_sample(samples),
    )


def format_report(summary: Summary, *, n_samples: int, n_contestants: int) -> str:
    """Render the configuration and results as a human-readable report."""
    rule = "=" * 25
    lines = [
        "Configuration",
        rule,
        f"Number of Samples: {n_samples}",
        f"Parallelism: {n_contestants}",
        "",
        "Results",
        rule,
        f"Total Run Time: {time_str(summary.total)}",
        f"Mean Run Time: {time_str(summary.mean)}",
        f"Median Run Time: {time_str(summary.median)}",
        f"Fastest Sample: {summary.fastest}",
        f"Slowest Sample: {summary.slowest}",
    ]
    return "\n".join(lines)
