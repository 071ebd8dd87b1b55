"""Evaluation of a candidate mapping against a puzzle."""

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass

from alphametic.puzzle_config import PuzzleConfig


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating a mapping against a puzzle."""

    satisfied: bool
    """Whether the addends sum to the target."""

    addends: tuple[int | None, ...]
    """Value of each addend, or None if the addend was left out of the sum."""

    total: int
    """Sum of the included addends."""

    target: int | None
    """Value of the target, or None if its numeral could not be parsed."""


def word_numeral(word: str, mapping: MappingABC[str, int]) -> str:
    """Concatenate the digits mapped to each letter of `word` into a numeral string."""
    return "".join(str(mapping[ch]) for ch in word)


def evaluate(
    mapping: MappingABC[str, int],
    puzzle: PuzzleConfig,
    *,
    skip_leading_zero_addends: bool = True,
) -> Evaluation:
    """Check whether `mapping` solves `puzzle`.

    An addend whose numeral starts with "0" is left out of the sum when
    `skip_leading_zero_addends` is set; otherwise the mapping is not a solution.

    Args:
        mapping: Letter to digit assignment covering all letters of the puzzle.
        puzzle: The puzzle to check.
        skip_leading_zero_addends: Leave leading-zero addends out instead of rejecting.
    """
    addends: list[int | None] = []
    rejected = False
    for word in puzzle.words:
        numeral = word_numeral(word, mapping)
        if numeral.startswith("0"):
            addends.append(None)
            if not skip_leading_zero_addends:
                rejected = True
            continue
        addends.append(int(numeral))
    total = sum(v for v in addends if v is not None)

    try:
        target = int(word_numeral(puzzle.target, mapping))
    except ValueError:
        target = None

    satisfied = not rejected and target is not None and total == target
    return Evaluation(satisfied=satisfied, addends=tuple(addends), total=total, target=target)


def is_solution(
    mapping: MappingABC[str, int],
    puzzle: PuzzleConfig,
    *,
    skip_leading_zero_addends: bool = True,
) -> bool:
    """Shorthand for `evaluate(...).satisfied`."""
    return evaluate(
        mapping, puzzle, skip_leading_zero_addends=skip_leading_zero_addends
    ).satisfied
