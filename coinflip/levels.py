"""Starting layouts for the twenty levels of the coin-flip puzzle.

A layout is a 4x4 grid indexed as ``grid[x][y]``. A value of 1 is a gold
coin, face up, and 0 is a silver coin, face down.
"""

from __future__ import annotations

Grid = tuple[tuple[int, ...], ...]

_LEVELS: dict[int, Grid] = {
    1: ((1, 1, 1, 1), (1, 1, 0, 1), (1, 0, 0, 0), (1, 1, 0, 1)),
    2: ((1, 0, 1, 1), (0, 0, 1, 1), (1, 1, 0, 0), (1, 1, 0, 1)),
    3: ((0, 0, 0, 0), (0, 1, 1, 0), (0, 1, 1, 0), (0, 0, 0, 0)),
    4: ((0, 1, 1, 1), (1, 0, 0, 1), (1, 0, 1, 1), (1, 1, 1, 1)),
    5: ((1, 0, 0, 1), (0, 0, 0, 0), (0, 0, 0, 0), (1, 0, 0, 1)),
    6: ((1, 0, 0, 1), (0, 1, 1, 0), (0, 1, 1, 0), (1, 0, 0, 1)),
    7: ((0, 1, 1, 1), (1, 0, 1, 1), (1, 1, 0, 1), (1, 1, 1, 0)),
    8: ((0, 1, 0, 1), (1, 0, 0, 0), (0, 0, 0, 1), (1, 0, 1, 0)),
    9: ((1, 0, 1, 0), (1, 0, 1, 0), (0, 0, 1, 0), (1, 0, 0, 1)),
    10: ((1, 0, 1, 1), (1, 1, 0, 0), (0, 0, 1, 1), (1, 1, 0, 1)),
    11: ((0, 1, 1, 0), (1, 0, 0, 1), (1, 0, 0, 1), (0, 1, 1, 0)),
    12: ((0, 1, 1, 0), (0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0)),
    13: ((0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 1, 1, 0)),
    14: ((1, 0, 1, 1), (0, 1, 0, 1), (1, 0, 1, 0), (1, 1, 0, 1)),
    15: ((0, 1, 0, 1), (1, 0, 0, 0), (1, 0, 0, 0), (0, 1, 0, 1)),
    16: ((0, 1, 1, 0), (1, 1, 1, 1), (1, 1, 1, 1), (0, 1, 1, 0)),
    17: ((0, 1, 1, 1), (0, 1, 0, 0), (0, 0, 1, 0), (1, 1, 1, 0)),
    18: ((0, 0, 0, 1), (0, 0, 1, 0), (0, 1, 0, 0), (1, 0, 0, 0)),
    19: ((0, 1, 0, 0), (0, 1, 1, 0), (0, 0, 1, 1), (0, 0, 0, 0)),
    20: ((0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
}


def level_grid(level: int) -> Grid:
    """Return the starting grid of ``level``; raise KeyError if there is none."""
    try:
        return _LEVELS[level]
    except KeyError:
        raise KeyError(f"no such level: {level!r}") from None


def level_numbers() -> list[int]:
    """Return the numbers of all levels in ascending order."""
    return sorted(_LEVELS)