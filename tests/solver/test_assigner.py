"""Tests for random digit assignment."""

import numpy as np
import pytest

from alphametic.solver.assigner import assign_digits, draw_mapping, n_digits_for
from alphametic.solver.utils import is_valid_mapping


def test_n_digits_for():
    assert n_digits_for(3) == 9
    assert n_digits_for(10) == 10
    assert n_digits_for(12) == 12
    assert n_digits_for(3, min_digits=10) == 10


def test_mappings_are_valid(cash_puzzle):
    """Every mapping is injective and keeps leading letters nonzero."""
    rng = np.random.default_rng(1234)
    for _ in range(500):
        mapping = assign_digits(cash_puzzle.letters, cash_puzzle.leading_letters, rng)
        assert set(mapping) == set(cash_puzzle.letters)
        assert len(set(mapping.values())) == len(mapping)
        assert all(mapping[ch] != 0 for ch in cash_puzzle.leading_letters)
        assert all(0 <= d < 10 for d in mapping.values())


def test_small_letter_set_uses_nine_digits(easy_puzzle):
    rng = np.random.default_rng(7)
    seen: set[int] = set()
    for _ in range(300):
        mapping = assign_digits(easy_puzzle.letters, easy_puzzle.leading_letters, rng)
        seen.update(mapping.values())
    # All leading letters, so 0 is never used; 1-8 all turn up eventually
    assert seen == set(range(1, 9))


def test_digit_range_widens_for_many_letters():
    letters = tuple("abcdefghijkl")
    rng = np.random.default_rng(99)
    for _ in range(100):
        mapping = assign_digits(letters, frozenset("a"), rng)
        assert sorted(mapping.values()) == list(range(12))
        assert mapping["a"] != 0


def test_same_seed_same_mappings(cash_puzzle):
    args = (cash_puzzle.letters, cash_puzzle.leading_letters)
    rng1 = np.random.default_rng(42)
    rng2 = np.random.default_rng(42)
    assert [assign_digits(*args, rng1) for _ in range(5)] == [
        assign_digits(*args, rng2) for _ in range(5)
    ]


def test_draw_degenerate_when_zero_cannot_be_avoided():
    """Nine leading letters over nine digits: someone must get 0, so every draw fails."""
    letters = tuple("abcdefghi")
    rng = np.random.default_rng(0)
    for _ in range(50):
        assert draw_mapping(letters, frozenset(letters), rng, n_digits=9) is None


def test_draw_succeeds_with_a_spare_digit():
    letters = tuple("abcdefghi")
    rng = np.random.default_rng(0)
    mapping = assign_digits(letters, frozenset(letters), rng, min_digits=10)
    assert is_valid_mapping(mapping, letters, frozenset(letters))
    assert 0 not in mapping.values()


def test_draws_are_valid_or_none(cash_puzzle):
    rng = np.random.default_rng(5)
    n_valid = 0
    for _ in range(500):
        mapping = draw_mapping(cash_puzzle.letters, cash_puzzle.leading_letters, rng, n_digits=10)
        if mapping is not None:
            n_valid += 1
            assert is_valid_mapping(mapping, cash_puzzle.letters, cash_puzzle.leading_letters)
    assert n_valid > 0


def test_empty_letters_rejected():
    with pytest.raises(ValueError):
        assign_digits((), frozenset(), np.random.default_rng(0))
