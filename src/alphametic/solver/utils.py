"""Utility functions for the alphametic solver."""

from collections.abc import Mapping as MappingABC
from typing import TypeAlias

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"

Mapping: TypeAlias = dict[str, int]
"""Letter to digit assignment."""


def is_valid_mapping(
    mapping: MappingABC[str, int],
    letters: tuple[str, ...],
    no_leading_zero: frozenset[str],
) -> bool:
    """Returns whether `mapping` is a valid digit assignment for `letters`.

    Valid means: every letter is mapped, no two letters share a digit, and no letter in
    `no_leading_zero` is mapped to 0.
    """
    if len(mapping) != len(letters) or any(ch not in mapping for ch in letters):
        return False
    if len(set(mapping.values())) != len(mapping):
        return False
    return all(mapping[ch] != 0 for ch in no_leading_zero)


def format_mapping(mapping: MappingABC[str, int]) -> str:
    """Format a mapping as `a=1 b=2 ...`, ordered by letter."""
    return " ".join(f"{ch}={mapping[ch]}" for ch in sorted(mapping))


def time_str(nanoseconds: int) -> str:
    """Convert a duration in nanoseconds to a human-readable string.

    Args:
        nanoseconds: Duration in nanoseconds.

    Returns:
        A string formatted as "HH:MM:SS.ssssss".
    """
    hours, rem = divmod(nanoseconds / 1e9, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:09.6f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators.

    Args:
        n: The integer to format.

    Returns:
        A string representation of the integer with commas.
    """
    return f"{n:,}"
