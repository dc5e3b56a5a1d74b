import re

import pytest

from sunoku.board import Board
from sunoku.cli import _format_duration, main
from sunoku.solver import solve_naive

PUZZLE_4 = "4\n1 0 0 0\n0 0 3 0\n0 4 0 0\n0 0 0 2\n"
UNSOLVABLE_4 = "4\n0 2 3 4\n0 0 0 0\n1 0 0 0\n0 0 0 0\n"


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text(PUZZLE_4)
    return path


def _expected_render():
    board = Board.parse(PUZZLE_4)
    assert solve_naive(board)
    return board.render()


@pytest.mark.parametrize("flag", ["-n", "--naive", "-b", "--bax-strat"])
def test_solves_and_prints_board(flag, puzzle_file, capsys):
    assert main([flag, "-f", str(puzzle_file)]) == 0
    out = capsys.readouterr().out
    assert re.search(r"A solution was found in \d+(\.\d+)?(s|ms|µs|ns)!", out)
    assert _expected_render() in out


def test_no_algorithm_selected(puzzle_file, capsys):
    assert main(["--file-inputs", str(puzzle_file)]) == 0
    out = capsys.readouterr().out
    assert "No algorithm selected, Naive [-n, --naive] or BaxStrat [-b, --bax-strat]" in out


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["-n", "-f", str(missing)]) == 0
    assert f"Given file `{missing}`, does not exist." in capsys.readouterr().out


def test_bad_size_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("x 1 2 3")
    assert main(["-n", "-f", str(path)]) == 1
    assert "Board size is not a number" in capsys.readouterr().err


def test_wrong_value_count_reports_error(tmp_path, capsys):
    path = tmp_path / "short.txt"
    path.write_text("4 1 2 3")
    assert main(["-b", "-f", str(path)]) == 1
    assert "expected value count of `16`" in capsys.readouterr().err


def test_unsolvable_board(tmp_path, capsys):
    path = tmp_path / "unsolvable.txt"
    path.write_text(UNSOLVABLE_4)
    assert main(["-n", "-f", str(path)]) == 0
    assert "No solution could be found with the given board" in capsys.readouterr().out


def test_file_argument_is_required():
    with pytest.raises(SystemExit) as info:
        main(["-n"])
    assert info.value.code == 2


@pytest.mark.parametrize(
    "seconds, unit",
    [(2.5, "s"), (0.0025, "ms"), (0.0000025, "µs"), (0.0000000025, "ns")],
)
def test_format_duration_picks_unit(seconds, unit):
    text = _format_duration(seconds)
    assert re.fullmatch(r"\d+(\.\d+)?" + re.escape(unit), text)
    assert float(text[: -len(unit)]) > 0


def test_format_duration_whole_second():
    assert _format_duration(1.0) == "1s"