"""Coin-flipping puzzle: level layouts, coins, the board rules and a terminal front end."""

__version__ = "1.0.0"
__all__ = ["levels", "coin", "board", "app"]