"""The play field of one level: a 4x4 grid of coins and the flip rules."""

from __future__ import annotations

from collections import deque

from coinflip.coin import Coin
from coinflip.levels import level_grid

SIZE = 4

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Board:
    """A level in play.

    Clicking a coin flips it at once; its four neighbours flip a moment
    later, which :meth:`settle` carries out along with the animations.
    The level is won when every coin shows gold.
    """

    def __init__(self, level: int) -> None:
        grid = level_grid(level)
        self.level = level
        self.is_win = False
        self._coins = [
            [Coin(x, y, bool(grid[x][y])) for y in range(SIZE)] for x in range(SIZE)
        ]
        self._pending: deque[tuple[int, int]] = deque()

    @property
    def grid(self) -> tuple[tuple[int, ...], ...]:
        """Current faces as ``grid[x][y]``, 1 for gold and 0 for silver."""
        return tuple(tuple(int(coin.flag) for coin in column) for column in self._coins)

    @property
    def coins(self):
        """Iterate over every coin, column by column."""
        return (coin for column in self._coins for coin in column)

    @property
    def pending(self) -> tuple[tuple[int, int], ...]:
        """Clicked positions whose neighbours have not flipped yet."""
        return tuple(self._pending)

    def coin_at(self, x: int, y: int) -> Coin:
        """Return the coin at ``(x, y)``; raise IndexError if off the board."""
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise IndexError(f"position ({x}, {y}) is off the board")
        return self._coins[x][y]

    def click(self, x: int, y: int) -> bool:
        """Click the coin at ``(x, y)``; return whether the click was taken."""
        coin = self.coin_at(x, y)
        if not coin.accepts_press():
            return False
        coin.change_flag()
        self._pending.append((x, y))
        return True

    def flip_neighbours(self, x: int, y: int) -> bool:
        """Flip the coins beside ``(x, y)`` and return whether the level is won."""
        self.coin_at(x, y)
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < SIZE and 0 <= ny < SIZE:
                self._coins[nx][ny].change_flag()
        return self.check_win()

    def check_win(self) -> bool:
        """Record and return whether every coin is gold; a win locks all coins."""
        self.is_win = all(coin.flag for coin in self.coins)
        if self.is_win:
            for coin in self.coins:
                coin.is_win = True
        return self.is_win

    def settle(self) -> bool:
        """Carry out pending neighbour flips, finish all animations, report a win."""
        while self._pending:
            self.flip_neighbours(*self._pending.popleft())
        while any([coin.tick() is not None for coin in self.coins]):
            pass
        return self.is_win