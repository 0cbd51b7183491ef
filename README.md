# coinflip

A small puzzle game for the terminal. There are twenty levels. Each level
is a 4 x 4 board of coins, and every coin shows either its gold side or
its silver side. When you click a coin, that coin turns over, and so do
the coins next to it (above, below, left and right). A level is finished
when every coin shows gold.

## Installing

```
pip install .
```

## Playing

```
coinflip
```

The game opens on a title screen. Type `s` to start or `q` to quit. After
you start, a menu lists levels 1 to 20 in rows of four. Type a level
number to open that level, `b` to go back to the title screen, or `q` to
quit.

On a board, gold coins are shown as `G` and silver coins as `S`. Columns
are `x` and rows are `y`, both numbered 0 to 3. To click a coin, type its
position as `x y` or `x,y` (for example `1 2`). Type `b` to go back to the
level menu, or `q` to quit. Once every coin is gold, the game prints
`Level complete!` and takes you back to the level menu. End of input
(Ctrl-D) also exits.

To skip the menus and open one level straight away:

```
coinflip --level 7
```

## Using it as a library

```python
from coinflip.levels import level_grid, level_numbers
from coinflip.board import Board

print(level_numbers())         # [1, 2, ..., 20]
grid = level_grid(1)           # grid[x][y]: 1 for gold, 0 for silver

board = Board(1)
board.click(1, 2)              # turns the coin at (1, 2) and queues its neighbours
board.settle()                 # turns the neighbours, runs the animations to the end, returns is_win
print(board.check_win())
print(board.coin_at(1, 2).flag)
print(board.grid)
```

- `coinflip.levels`: `level_grid(level)` returns the starting grid of a
  level and raises `KeyError` for a level that does not exist.
  `level_numbers()` returns the level numbers in ascending order.
- `coinflip.board.Board(level)`: one level in play.
  - `click(x, y)` turns the coin over and returns `True`, or returns
    `False` if the coin does not take clicks right now.
  - `flip_neighbours(x, y)` turns the neighbouring coins over and
    checks for a win.
  - `settle()` runs every queued neighbour flip and every animation.
  - `check_win()` records whether all coins are gold. After a win, no
    coin takes any more clicks.
  - `coin_at(x, y)` raises `IndexError` for a position that is off the
    board.
- `coinflip.coin.Coin`: a single coin and its eight-frame flip animation.
  `change_flag()` turns the coin over and starts the animation. `tick()`
  moves the animation on by one frame and returns that frame, or `None`
  if no animation is running. `accepts_press()` tells you whether the
  coin takes a click: it does not while it is turning or after the level
  is won. `image` gives the file name of the frame that is showing.
- `coinflip.app`: the terminal front end. `render_board(board)`,
  `render_level_menu()`, `parse_coordinates(text)`,
  `level_button_position(index)` and `main(argv=None)` live here.

## What it does not do

The game runs as text only. It has no window, no pictures and no sound.
The coin flip animation is tracked as frame numbers and file names, but
it is never drawn. Nothing is saved between sessions.

## Running the tests

```
pip install .[test]
pytest
```