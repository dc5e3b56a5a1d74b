# sunoku

A Sudoku solver for square boards whose side is a perfect square
(4×4, 9×9, 16×16, ...). Two solving methods are available:

- **naive** – backtracking over the empty cells in row-major order, trying
  values in ascending order.
- **bax-strat** – first narrows down the candidates of every empty cell
  (cells with a single candidate, values that fit only one cell of a block,
  and values confined to one row or column of a block), then hands whatever
  is left to the backtracking solver.

## Installation

```
pip install .
```

## Board files

A board file is plain whitespace-separated text. The first number is the
side length of the board; it is followed by exactly `size × size` values,
row by row, with `0` marking an empty cell:

```
4
1 0 0 0
0 0 3 0
0 4 0 0
0 0 0 2
```

The size must be a positive whole number and every value a whole number
from 0 to 255. A file whose value count does not match the declared size,
or that holds anything other than such numbers, is rejected.

## Command line

```
sunoku --naive --file-inputs board.txt
sunoku --bax-strat --file-inputs board.txt
sunoku --version
```

Short forms are `-n`, `-b`, `-f` and `-V`; `--file-inputs` is required.
If both methods are given, `--naive` is used.

- If the file does not exist, a message is printed and the command exits
  with status 0.
- If the file cannot be read or is malformed, the error goes to standard
  error and the exit status is 1.
- If no method is selected, it says so and exits without solving.
- On success it prints how long solving took (for example
  `A solution was found in 1.52ms!`) followed by the solved board in a
  framed grid with lines between the blocks; otherwise it prints
  `No solution could be found with the given board`.

## Library use

```python
from sunoku.board import Board
from sunoku.solver import SolvingMethod, solve, solve_baxstrat

board = Board.load("board.txt")
if solve_baxstrat(board):
    print(board)

board = Board.parse("4\n1 0 0 0\n0 0 3 0\n0 4 0 0\n0 0 0 2")
solved, seconds = solve(board, SolvingMethod.NAIVE)
```

In `sunoku.board`:

- `Board(size)` makes an empty board; `Board.load(path)` reads a board file
  and `Board.parse(text)` reads the same format from a string.
- `board.loads(values)` sets all cells from `size × size` values in
  row-major order.
- `board.is_allowed(val, row, col)` tells whether a value is absent from the
  cell's row, column and block; `board.block_bounds(row, col)` gives the
  block's `(row_start, row_end, col_start, col_end)`.
- `board.is_complete()` tells whether every cell is filled.
- `board.render()` (and `str(board)`) draws the board as text.
- Malformed input raises `BoardError`, a subclass of `ValueError`.

In `sunoku.solver`:

- `solve_naive(board)` and `solve_baxstrat(board)` fill the board in place
  and return whether a solution was found. When `solve_naive` fails, the
  cells that were empty are left at 0.
- `solve(board, method)` runs the chosen `SolvingMethod` (`NAIVE` or
  `BAXSTRAT`) and returns `(solved, seconds_taken)`.

## Tests

```
pip install .[test]
pytest
```