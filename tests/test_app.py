import io

import pytest

from coinflip.app import (
    GOLD,
    SILVER,
    level_button_position,
    main,
    parse_coordinates,
    render_board,
    render_level_menu,
)
from coinflip.board import Board
from coinflip.levels import level_grid, level_numbers


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_first_button_position():
    assert level_button_position(0) == (25, 130)


@pytest.mark.parametrize("index", range(16))
def test_buttons_in_same_column_are_one_step_apart(index):
    x1, y1 = level_button_position(index)
    x2, y2 = level_button_position(index + 4)
    assert x1 == x2
    assert y2 - y1 == 70


@pytest.mark.parametrize("index", [0, 4, 8])
def test_buttons_in_same_row_are_one_step_apart(index):
    x1, y1 = level_button_position(index)
    x2, y2 = level_button_position(index + 1)
    assert y1 == y2
    assert x2 - x1 == 70


@pytest.mark.parametrize("index", [-1, 20])
def test_button_index_out_of_range(index):
    with pytest.raises(IndexError):
        level_button_position(index)


def test_level_menu_lists_every_level_in_rows_of_four():
    lines = render_level_menu().splitlines()
    number_rows = [[int(n) for n in line.split()] for line in lines[1:]]
    assert [n for row in number_rows for n in row] == level_numbers()
    assert all(len(row) == 4 for row in number_rows)


def test_render_board_places_coin_by_column_and_row():
    board = Board(1)
    rows = render_board(board).splitlines()[2:]
    for y, row in enumerate(rows):
        symbols = row.split()[1:]
        for x, symbol in enumerate(symbols):
            expected = GOLD if level_grid(1)[x][y] else SILVER
            assert symbol == expected


@pytest.mark.parametrize("text", ["2 3", "2,3", " 2 , 3 "])
def test_parse_coordinates(text):
    assert parse_coordinates(text) == (2, 3)


@pytest.mark.parametrize("text", ["", "2", "a b", "1 2 3", "4 0", "0 -1"])
def test_parse_coordinates_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_coordinates(text)


def test_main_winning_level_one_from_title(monkeypatch, capsys):
    _feed(monkeypatch, "s\n1\n2 2\nq\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Level complete!" in out
    assert "Level:1" in out


def test_main_direct_level_then_quit(monkeypatch, capsys):
    _feed(monkeypatch, "q\n")
    assert main(["--level", "3"]) == 0
    out = capsys.readouterr().out
    assert "Level:3" in out
    assert "Level complete!" not in out


def test_main_reports_bad_input_and_continues(monkeypatch, capsys):
    _feed(monkeypatch, "x\ns\n99\nb\nq\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "unknown command" in out
    assert "no such level" in out


def test_main_bad_coordinates_in_play(monkeypatch, capsys):
    _feed(monkeypatch, "9 9\nq\n")
    assert main(["--level", "1"]) == 0
    assert "off the board" in capsys.readouterr().out


def test_main_end_of_input_exits_cleanly(monkeypatch):
    _feed(monkeypatch, "")
    assert main([]) == 0


def test_main_rejects_unknown_level_argument():
    with pytest.raises(SystemExit):
        main(["--level", "21"])