"""Solving strategies for a :class:`~sunoku.board.Board`."""

from __future__ import annotations

import enum
import time

from sunoku.board import Board

_Bounds = tuple[int, int, int, int]


class SolvingMethod(enum.Enum):
    """The algorithm used to solve a board."""

    NAIVE = "naive"
    BAXSTRAT = "baxstrat"


def solve_naive(board: Board) -> bool:
    """Fill the empty cells by backtracking in row-major order.

    Candidate values are tried in ascending order. Given cells are left as
    they are. On failure every originally empty cell is reset to 0.
    """
    empties = [
        (row, col)
        for row, line in enumerate(board.cells)
        for col, value in enumerate(line)
        if value == 0
    ]
    pos = 0
    while 0 <= pos < len(empties):
        row, col = empties[pos]
        start = board.cells[row][col] + 1
        board.cells[row][col] = 0
        for val in range(start, board.max_val):
            if board.is_allowed(val, row, col):
                board.cells[row][col] = val
                pos += 1
                break
        else:
            pos -= 1
    return pos == len(empties)


def _mem_remove(board: Board, val: int, row: int, col: int, bounds: _Bounds) -> None:
    """Drop val from the candidates of the row, the column and the block."""
    memory = board.memory
    for candidates in memory[row]:
        candidates.discard(val)
    for line in memory:
        line[col].discard(val)
    row_start, row_end, col_start, col_end = bounds
    for r in range(row_start, row_end):
        for c in range(col_start, col_end):
            memory[r][c].discard(val)


def _only_val_in_block(board: Board, val: int, row: int, col: int, bounds: _Bounds) -> bool:
    """Assign val to the cell if no other cell in its block may hold it."""
    memory = board.memory
    if val not in memory[row][col]:
        return False
    row_start, row_end, col_start, col_end = bounds
    for r in range(row_start, row_end):
        for c in range(col_start, col_end):
            if (r, c) != (row, col) and val in memory[r][c]:
                return False
    board.cells[row][col] = val
    memory[row][col].clear()
    _mem_remove(board, val, row, col, bounds)
    return True


def _check_mem(board: Board, val: int, row: int, col: int, bounds: _Bounds) -> bool:
    """Eliminate val outside the block when, inside it, val is confined to one line."""
    memory = board.memory
    if val not in memory[row][col]:
        return False

    row_start, row_end, col_start, col_end = bounds
    in_same_row = in_same_col = elsewhere = False
    for r in range(row_start, row_end):
        for c in range(col_start, col_end):
            if (r, c) == (row, col) or val not in memory[r][c]:
                continue
            if r == row:
                in_same_row = True
            elif c == col:
                in_same_col = True
            else:
                elsewhere = True

    if elsewhere or (in_same_row and in_same_col):
        return False

    changed = False
    if in_same_col:
        for r, line in enumerate(memory):
            if row_start <= r < row_end:
                continue
            if val in line[col]:
                line[col].discard(val)
                changed = True
    elif in_same_row:
        for c, candidates in enumerate(memory[row]):
            if col_start <= c < col_end:
                continue
            if val in candidates:
                candidates.discard(val)
                changed = True
    return changed


def solve_baxstrat(board: Board) -> bool:
    """Eliminate candidates until nothing changes, then finish by backtracking."""
    size = board.size
    for row in range(size):
        for col in range(size):
            if board.cells[row][col]:
                continue
            board.memory[row][col].update(
                val for val in range(1, board.max_val) if board.is_allowed(val, row, col)
            )

    updated = True
    while updated:
        updated = False
        for val in range(1, board.max_val):
            for row in range(size):
                for col in range(size):
                    if board.cells[row][col]:
                        continue
                    bounds = board.block_bounds(row, col)
                    candidates = board.memory[row][col]
                    if len(candidates) == 1:
                        only = candidates.pop()
                        board.cells[row][col] = only
                        _mem_remove(board, only, row, col, bounds)
                        updated = True
                        continue
                    if _only_val_in_block(board, val, row, col, bounds):
                        updated = True
                        continue
                    if _check_mem(board, val, row, col, bounds):
                        updated = True

    return solve_naive(board)


def solve(board: Board, method: SolvingMethod) -> tuple[bool, float]:
    """Solve the board in place; return whether it was solved and the seconds taken."""
    method = SolvingMethod(method)
    start = time.perf_counter()
    if method is SolvingMethod.NAIVE:
        solved = solve_naive(board)
    else:
        solved = solve_baxstrat(board)
    return solved, time.perf_counter() - start