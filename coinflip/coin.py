"""A single coin on the board and its flip animation."""

from __future__ import annotations

from dataclasses import dataclass, field

FIRST_FRAME = 1
LAST_FRAME = 8


@dataclass
class Coin:
    """A coin at ``(x, y)``; ``flag`` is True for gold (face up).

    Flipping runs an eight-frame animation advanced by :meth:`tick`:
    gold to silver shows frames 1..8, silver to gold shows frames 8..1.
    """

    x: int
    y: int
    flag: bool
    frame: int = field(init=False)
    min_frame: int = field(default=FIRST_FRAME, init=False)
    max_frame: int = field(default=LAST_FRAME, init=False)
    is_animation: bool = field(default=False, init=False)
    is_win: bool = field(default=False, init=False)
    _to_silver: bool = field(default=False, init=False, repr=False)
    _to_gold: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.frame = FIRST_FRAME if self.flag else LAST_FRAME

    @property
    def image(self) -> str:
        """Resource name of the frame currently shown."""
        return f"Coin000{self.frame}.png"

    def change_flag(self) -> None:
        """Turn the coin over and start the matching animation."""
        if self.flag:
            self._to_silver = True
            self.flag = False
        else:
            self._to_gold = True
            self.flag = True
        self.is_animation = True

    def tick(self) -> int | None:
        """Advance running animations by one frame.

        Returns the frame now shown, or None if nothing was animating.
        """
        shown = None
        if self._to_silver:
            shown = self.frame = self.min_frame
            self.min_frame += 1
            if self.min_frame > self.max_frame:
                self.min_frame = FIRST_FRAME
                self.is_animation = False
                self._to_silver = False
        if self._to_gold:
            shown = self.frame = self.max_frame
            self.max_frame -= 1
            if self.max_frame < self.min_frame:
                self.max_frame = LAST_FRAME
                self.is_animation = False
                self._to_gold = False
        return shown

    def accepts_press(self) -> bool:
        """Whether a click on this coin is taken: not while flipping or won."""
        return not (self.is_animation or self.is_win)