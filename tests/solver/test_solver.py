"""Tests for sampling races and running the solver end to end."""

import io

import pytest

from alphametic.solver.evaluator import evaluate
from alphametic.solver.solver import run, sample
from alphametic.solver.utils import is_valid_mapping


def test_sample_count_and_validity(easy_puzzle, settings):
    logf = io.StringIO()
    samples = sample(easy_puzzle, n_contestants=3, n_samples=5, logf=logf, settings=settings)
    assert len(samples) == 5
    for s in samples:
        assert s.run_time >= 0
        assert evaluate(s.result.mapping, easy_puzzle).satisfied
        assert is_valid_mapping(s.result.mapping, easy_puzzle.letters, easy_puzzle.leading_letters)
    assert "Solver initialized with:" in logf.getvalue()


def test_sample_rejects_bad_counts(easy_puzzle, settings):
    with pytest.raises(ValueError):
        sample(easy_puzzle, n_contestants=0, n_samples=5, logf=io.StringIO(), settings=settings)
    with pytest.raises(ValueError):
        sample(easy_puzzle, n_contestants=2, n_samples=0, logf=io.StringIO(), settings=settings)


def test_sample_propagates_race_failure(impossible_puzzle, settings):
    settings = settings.model_copy(update={"max_attempts": 100})
    with pytest.raises(RuntimeError):
        sample(impossible_puzzle, n_contestants=2, n_samples=2, logf=io.StringIO(), settings=settings)


def test_run_writes_report_and_log(small_puzzle, settings, tmp_path, capsys):
    summary = run(small_puzzle, settings=settings)

    assert summary.count == settings.n_samples
    assert summary.fastest.run_time <= summary.median <= summary.slowest.run_time
    assert summary.fastest.result.mapping == {"t": 2, "o": 1, "g": 8, "u": 0}

    out = capsys.readouterr().out
    assert "Number of Samples: 3" in out
    assert "Parallelism: 2" in out
    assert "Median Run Time:" in out

    log_files = list((tmp_path / "logs" / "to-go-out").glob("*.log"))
    assert len(log_files) == 1
    log = log_files[0].read_text(encoding="utf-8")
    assert "Selected puzzle: TO + GO = OUT" in log
    assert "Slowest Sample:" in log
