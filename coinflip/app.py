"""Terminal front end: title screen, level menu and play field."""

from __future__ import annotations

import argparse
import enum
import re

from coinflip.board import SIZE, Board
from coinflip.levels import level_numbers

TITLE = "Coin Flip"
GOLD = "G"
SILVER = "S"

_MENU_COLUMNS = 4
_MENU_LEFT = 25
_MENU_TOP = 130
_MENU_STEP = 70

_COORDINATES = re.compile(r"^\s*(-?\d+)\s*[,\s]\s*(-?\d+)\s*$")


class _Outcome(enum.Enum):
    BACK = "back"
    QUIT = "quit"


def level_button_position(index: int) -> tuple[int, int]:
    """Pixel position of the level button at zero-based ``index``."""
    count = len(level_numbers())
    if not 0 <= index < count:
        raise IndexError(f"level button index {index} out of range 0..{count - 1}")
    row, column = divmod(index, _MENU_COLUMNS)
    return _MENU_LEFT + column * _MENU_STEP, _MENU_TOP + row * _MENU_STEP


def render_board(board: Board) -> str:
    """Draw the board as text: columns are x, rows are y."""
    header = "   " + " ".join(str(x) for x in range(SIZE))
    rows = [
        f"{y}  " + " ".join(
            GOLD if board.coin_at(x, y).flag else SILVER for x in range(SIZE)
        )
        for y in range(SIZE)
    ]
    return "\n".join([f"Level:{board.level}", header, *rows])


def render_level_menu() -> str:
    """Draw the level buttons in rows of four, as on the menu screen."""
    numbers = level_numbers()
    rows = [
        " ".join(f"{n:>3}" for n in numbers[start:start + _MENU_COLUMNS])
        for start in range(0, len(numbers), _MENU_COLUMNS)
    ]
    return "\n".join(["Choose a level", *rows])


def parse_coordinates(text: str) -> tuple[int, int]:
    """Parse ``"x y"`` or ``"x,y"`` into a position on the board."""
    match = _COORDINATES.match(text)
    if match is None:
        raise ValueError(f"expected two numbers 'x y', got {text!r}")
    x, y = int(match.group(1)), int(match.group(2))
    if not (0 <= x < SIZE and 0 <= y < SIZE):
        raise ValueError(f"position ({x}, {y}) is off the board")
    return x, y


def _ask(prompt: str) -> str:
    return input(prompt).strip().lower()


def _play(level: int) -> _Outcome:
    board = Board(level)
    while True:
        print(render_board(board))
        if board.is_win:
            print("Level complete!")
            return _Outcome.BACK
        answer = _ask("x y to flip, [b]ack, [q]uit > ")
        if answer == "b":
            return _Outcome.BACK
        if answer == "q":
            return _Outcome.QUIT
        try:
            x, y = parse_coordinates(answer)
        except ValueError as error:
            print(error)
            continue
        board.click(x, y)
        board.settle()


def _choose_level() -> _Outcome:
    while True:
        print(render_level_menu())
        answer = _ask("level number, [b]ack, [q]uit > ")
        if answer == "b":
            return _Outcome.BACK
        if answer == "q":
            return _Outcome.QUIT
        if not answer.isdigit() or int(answer) not in level_numbers():
            print(f"no such level: {answer!r}")
            continue
        if _play(int(answer)) is _Outcome.QUIT:
            return _Outcome.QUIT


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="coinflip", description="Flip every coin to gold.")
    parser.add_argument(
        "--level", type=int, choices=level_numbers(), help="start straight at this level"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game in the terminal."""
    args = _parse_args(argv)
    try:
        if args.level is not None and _play(args.level) is _Outcome.QUIT:
            return 0
        while True:
            print(TITLE)
            answer = _ask("[s]tart, [q]uit > ")
            if answer == "q":
                return 0
            if answer == "s":
                if _choose_level() is _Outcome.QUIT:
                    return 0
            else:
                print(f"unknown command: {answer!r}")
    except EOFError:
        print()
        return 0