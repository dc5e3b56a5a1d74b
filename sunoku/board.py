"""Sudoku board state: cells, candidate memory, loading and rendering."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from pathlib import Path

_UINT = re.compile(r"\+?[0-9]+")
_MAX_CELL_VALUE = 255


class BoardError(ValueError):
    """Raised when board data cannot be read or does not describe a board."""


def _parse_uint(token: str, limit: int | None, what: str) -> int:
    if not _UINT.fullmatch(token):
        raise BoardError(what)
    value = int(token)
    if limit is not None and value > limit:
        raise BoardError(what)
    return value


class Board:
    """An N x N Sudoku board with square blocks and per-cell candidate sets."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise BoardError("Board size must be a positive number")
        self.size = size
        self.cells: list[list[int]] = [[0] * size for _ in range(size)]
        self.memory: list[list[set[int]]] = [[set() for _ in range(size)] for _ in range(size)]
        self.max_val = size + 1
        self.segment_size = math.isqrt(size)

    @classmethod
    def load(cls, path: str | Path) -> Board:
        """Read a board from a file: its size, then size*size cell values."""
        path = Path(path)
        if not path.exists():
            raise BoardError(f"Given file `{path}`, does not exist.")
        try:
            text = path.read_text()
        except OSError as exc:
            raise BoardError(f"Cannot read from {path}, ({exc})") from exc
        return cls.parse(text)

    @classmethod
    def parse(cls, text: str) -> Board:
        """Build a board from whitespace-separated text."""
        tokens = text.split()
        if not tokens:
            raise BoardError("Cannot read board size from file.")
        size = _parse_uint(tokens[0], None, "Board size is not a number")
        values = [
            _parse_uint(token, _MAX_CELL_VALUE, f"Cannot parse value `{token}` into an integer")
            for token in tokens[1:]
        ]
        board = cls(size)
        board.loads(values)
        return board

    def loads(self, values: Iterable[int]) -> None:
        """Assign cell values in row-major order."""
        values = list(values)
        expected = self.size * self.size
        if len(values) != expected:
            raise BoardError(
                f"Loaded data did not match the expected value count of `{expected}`."
            )
        self.cells = [values[start:start + self.size] for start in range(0, expected, self.size)]

    def block_bounds(self, row: int, col: int) -> tuple[int, int, int, int]:
        """Return (row_start, row_end, col_start, col_end) of the block holding a cell."""
        seg = self.segment_size
        row_start = (row // seg) * seg
        col_start = (col // seg) * seg
        return row_start, row_start + seg, col_start, col_start + seg

    def is_allowed(self, val: int, row: int, col: int) -> bool:
        """True if val appears in neither the row, the column nor the block (other cells)."""
        if val in self.cells[row]:
            return False
        if any(line[col] == val for line in self.cells):
            return False
        row_start, row_end, col_start, col_end = self.block_bounds(row, col)
        return not any(
            self.cells[r][c] == val
            for r in range(row_start, row_end)
            for c in range(col_start, col_end)
            if (r, c) != (row, col)
        )

    def is_complete(self) -> bool:
        """True when every cell holds a value."""
        return all(all(line) for line in self.cells)

    def render(self) -> str:
        """Return the board drawn with block separators, one line per text row."""
        width = len(str(self.size))
        seg = self.segment_size
        overall_length = self.size * width + 2 * seg + 3 + (self.size - 1)
        border = " " + "-" * (overall_length - 1)

        lines = []
        for ind, line in enumerate(self.cells):
            if ind % seg == 0:
                lines.append(border)
            parts = []
            for col_ind, val in enumerate(line):
                if col_ind % seg == 0:
                    parts.append(" |")
                digits = len(str(val)) if val else 1
                parts.append(" " * max(0, width - digits) + f" {val}")
            parts.append(" |")
            lines.append("".join(parts))
        lines.append(border)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()