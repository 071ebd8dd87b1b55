"""Alphametic Race Solver.

Finds digits for the letters of an alphametic puzzle (e.g. ALAS + LASS + NO + MORE = CASH)
so that the addends sum to the target, by drawing random assignments until one works.
Several independent searches are raced in parallel and the first to finish wins; the race
is repeated many times to report run-time statistics.
"""

from sys import argv, exit

from .puzzle_config import load_configs, parse_equation
from .solver import solver
from .solver.config import config as solver_config


def main() -> None:
    """Main entry point for the alphametic solver."""
    # Expect an optional single argument: path to a puzzle file
    if len(argv) > 2:
        print("Usage: python -m alphametic [<path_to_puzzle_file>]")
        exit(1)
    if len(argv) == 2:
        configs = load_configs(argv[1])
    else:
        configs = [parse_equation(solver_config.puzzle)]

    for config in configs:
        solver.run(config)
