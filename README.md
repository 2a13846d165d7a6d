# cellconnect

A small timed puzzle game on a 6 × 6 grid.

You start in the top-left cell, drawn in green. The goal cell, drawn in yellow, is placed at random anywhere else on the board. Use the arrow keys to draw a path from the start to the goal. You win only if the path covers **every** cell of the board. If you reach the goal while some cells are still empty, the path is cleared and you start again from the top-left corner.

Stepping back onto a cell that is already on your path cuts the path back to that cell, so you can undo a wrong turn.

You have 25 seconds. The clock is checked each time you make a move: a move made with no time left ends the round as lost. Your score on a win is the number of whole seconds left, times ten.

## Installing

```
pip install .
```

This needs Python 3.10 or newer and installs `pygame`.

## Playing

```
cellconnect
```

- A title screen (`bg1.jpg`) appears first. Press any key to begin.
- **Arrow keys**: extend the path, or cut it back to an earlier cell.
- When the round ends, a "GAME OVER!" or "WIN - Score: …" message is shown; press any key to continue.
- Then press **1** to play again with a new goal cell and a fresh clock, or **0** to quit.
- Closing the window quits at any time.

The game looks for its images (`bg.jpg`, `bg1.jpg`, `bg2.jpg`) and its music (`musicc.mp3`) in the current directory. If an image or the music cannot be loaded, the error is logged and the game runs without it. Text uses the Arial and Bauhaus 93 font files from `C:/Windows/Fonts`; where they are missing, pygame's default font is used instead.

## Using the game logic

The rules in `cellconnect.game` do not depend on the display:

```python
import random
from cellconnect.game import Game, Direction, Outcome

game = Game(random.Random(1))
outcome = game.move(Direction.RIGHT, time_left=20)
if outcome is Outcome.WON:
    print(game.score(20))
```

- `Game.board` is a list of rows of `Cell` values (`EMPTY`, `PATH`, `END`, `START`); `Game.path` is the list of `(x, y)` positions visited, and `Game.target` is the goal.
- `Game.move(direction, time_left)` returns `Outcome.PLAYING`, `Outcome.LOST` (when `time_left` is zero or less) or `Outcome.WON`. Moves off the board are ignored.
- `Game.reset()` starts a new round with a new goal cell.
- `is_filled(board)` tells whether a board has no empty cells.

`cellconnect.timer.Countdown(limit, clock)` gives the whole seconds left out of `limit`, measured on any clock function you pass (by default `time.monotonic`); `label()` gives the text shown on screen, such as `TIME: 25S`.

## Running the tests

```
pip install .[test]
pytest
```