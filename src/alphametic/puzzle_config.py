"""Loader for puzzle files and the puzzle representation."""

from dataclasses import dataclass
from functools import cached_property
from os import PathLike
from pathlib import Path

VALID_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz")


@dataclass(frozen=True)
class PuzzleConfig:
    """An alphametic puzzle: the addend words must sum to the target word."""

    words: tuple[str, ...]
    """The addend words, in order."""

    target: str
    """The word the addends must sum to."""

    def __post_init__(self) -> None:
        """Validate the puzzle."""
        if not self.words:
            raise ValueError("Puzzle must have at least one addend word.")

        for word in (*self.words, self.target):
            if not word:
                raise ValueError("Puzzle words must not be empty.")
            # Only lowercase letters are allowed (use `parse_equation` to normalize input)
            invalid = set(word) - VALID_CHARS
            if invalid:
                raise ValueError(
                    f"Word '{word}' contains invalid characters: {''.join(sorted(invalid))}"
                )

    def __str__(self) -> str:
        """Return a string representation of the puzzle, e.g. `SEND + MORE = MONEY`."""
        return f"{' + '.join(w.upper() for w in self.words)} = {self.target.upper()}"

    @cached_property
    def letters(self) -> tuple[str, ...]:
        """Distinct letters in order of first appearance (addends first, then the target).

        The order is fixed so that a given random seed always produces the same search.
        """
        return tuple(dict.fromkeys("".join(self.words) + self.target))

    @cached_property
    def leading_letters(self) -> frozenset[str]:
        """Letters that start a word (including the target), which must not map to 0."""
        return frozenset(w[0] for w in (*self.words, self.target))

    @property
    def slug(self) -> str:
        """Filesystem-friendly name for the puzzle, e.g. `send-more-money`."""
        return "-".join((*self.words, self.target))

    def to_dict(self) -> dict:
        """Return a dictionary representation of the puzzle for serialization.

        This is useful for supplying the puzzle to child processes via
        `multiprocessing`, which requires arguments to be pickleable.
        """
        return {"words": list(self.words), "target": self.target}

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a PuzzleConfig instance from a dictionary representation."""
        return cls(words=tuple(data["words"]), target=data["target"])


def clean(equation: str) -> str:
    """Clean an equation string by removing whitespace and converting all letters to lowercase."""
    return "".join(equation.split()).lower()


def parse_equation(equation: str) -> PuzzleConfig:
    """Parse an equation of the form `word+word+...=target`.

    Whitespace and letter case are ignored.

    Raises:
        ValueError: If the equation is malformed.
    """
    cleaned = clean(equation)
    if cleaned.count("=") != 1:
        raise ValueError(f"Equation must contain exactly one '=': '{equation}'")

    lhs, target = cleaned.split("=")
    return PuzzleConfig(words=tuple(lhs.split("+")), target=target)


def load_configs(configs_path: PathLike | str) -> list[PuzzleConfig]:
    """Load puzzles from the given path.

    The file contains one equation per line.  Blank lines and lines starting with `#`
    are skipped.

    Args:
        configs_path (PathLike): Path to the puzzle file.
    """
    configs = []

    path = Path(configs_path).resolve()
    print()
    print(f"Loading puzzles from {path}")
    print()

    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                configs.append(parse_equation(line))
            except ValueError as e:
                raise ValueError(f"{path}:{line_no}: {e}") from None

    return configs
