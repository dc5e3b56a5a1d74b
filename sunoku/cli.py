"""Command line entry point for the Sudoku solver."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sunoku.board import Board, BoardError
from sunoku.solver import SolvingMethod, solve

_UNITS = (("s", 1_000_000_000), ("ms", 1_000_000), ("µs", 1_000), ("ns", 1))


def _format_duration(seconds: float) -> str:
    nanos = max(0, round(seconds * 1_000_000_000))
    for unit, divisor in _UNITS:
        if nanos >= divisor or divisor == 1:
            whole, frac = divmod(nanos, divisor)
            digits = len(str(divisor)) - 1
            frac_text = str(frac).zfill(digits).rstrip("0") if digits else ""
            return f"{whole}.{frac_text}{unit}" if frac_text else f"{whole}{unit}"
    return f"{nanos}ns"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sunoku", description="A Sudoku Puzzle Solver")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-n", "--naive", action="store_true", help="Naive method of solving")
    parser.add_argument(
        "-b", "--bax-strat", action="store_true", help="Bax's strategy of solving"
    )
    parser.add_argument(
        "-f", "--file-inputs", required=True, help="The Input values for the board"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load a board from a file and solve it with the selected method."""
    args = _build_parser().parse_args(argv)

    path = Path(args.file_inputs)
    if not path.exists():
        print(f"Given file `{args.file_inputs}`, does not exist.")
        return 0

    try:
        board = Board.load(path)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.naive:
        method = SolvingMethod.NAIVE
    elif args.bax_strat:
        method = SolvingMethod.BAXSTRAT
    else:
        print("No algorithm selected, Naive [-n, --naive] or BaxStrat [-b, --bax-strat]")
        return 0

    solved, elapsed = solve(board, method)
    if solved:
        print(f"A solution was found in {_format_duration(elapsed)}!")
        print()
        print(board.render())
    else:
        print("No solution could be found with the given board")
    return 0


if __name__ == "__main__":
    sys.exit(main())