"""Random letter-to-digit assignment."""

from collections.abc import Sequence

import numpy as np

from alphametic.solver.utils import Mapping, is_valid_mapping


def n_digits_for(n_letters: int, min_digits: int = 9) -> int:
    """Size of the digit range to draw from: at least one digit per letter."""
    return max(min_digits, n_letters)


def draw_mapping(
    letters: Sequence[str],
    no_leading_zero: frozenset[str],
    rng: np.random.Generator,
    n_digits: int,
) -> Mapping | None:
    """Draw a single random mapping of letters to digits `0..n_digits-1`.

    Letters are shuffled and paired with a random permutation of the digits.  A letter in
    `no_leading_zero` that would receive 0 swaps its slot in the permutation with the next
    slot (or the previous one, at the end of the permutation).  The repair is best-effort:
    swapping backwards hands out a digit that is already in use.

    Returns:
        The mapping, or None if the draw is degenerate (duplicate digits or a leading zero).
    """
    nums = rng.permutation(n_digits).tolist()
    shuffled = list(letters)
    rng.shuffle(shuffled)

    mapping: Mapping = {}
    for i, ch in enumerate(shuffled):
        if ch in no_leading_zero and nums[i] == 0:
            j = i + 1 if i + 1 < len(nums) else i - 1
            nums[i], nums[j] = nums[j], nums[i]
        mapping[ch] = nums[i]

    if not is_valid_mapping(mapping, tuple(letters), no_leading_zero):
        return None
    return mapping


def assign_digits(
    letters: Sequence[str],
    no_leading_zero: frozenset[str],
    rng: np.random.Generator,
    *,
    min_digits: int = 9,
) -> Mapping:
    """Return a random valid mapping of `letters` to distinct digits.

    Degenerate draws are discarded and redrawn.

    Args:
        letters (Sequence[str]): The distinct letters to assign.
        no_leading_zero (frozenset[str]): Letters that must not be assigned 0.
        rng (np.random.Generator): Random stream owned by the caller.
        min_digits (int): Minimum size of the digit range.
    """
    if not letters:
        raise ValueError("Cannot assign digits to an empty set of letters.")

    n_digits = n_digits_for(len(letters), min_digits)
    while True:
        mapping = draw_mapping(letters, no_leading_zero, rng, n_digits)
        if mapping is not None:
            return mapping
