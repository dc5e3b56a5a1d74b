"""Sudoku boards and solvers: backtracking and candidate elimination, with a command line."""

__version__ = "0.1.0"