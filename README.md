# flapbird

A small side-scrolling arcade game in the style of Flappy Bird, built on
pygame, together with a handful of short interactive drawing and input
demos.

## Installing

```
pip install .
```

## Playing

```
flapbird
flapbird --sprites path/to/textures.png
```

The game loads its sprite sheet from `assets/textures.png`, relative to
the directory you start it from, unless `--sprites` names another file.

Click the play button on the title screen to start. Each click makes the
bird flap upwards; between clicks it falls. Fly through the gaps between
the pipes: every pipe you pass adds one to your score. Hitting a pipe ends
the round, and the game-over screen offers a retry button and a button
back to the title screen. The final score is printed when the window is
closed.

## Demos

Each demo opens its own window and runs until the window is closed. Most
take an optional mode as their only argument.

| Command | Modes | What it shows |
| --- | --- | --- |
| `flapbird-drawings` | `shapes` (default), `gfx` | A rectangle, a line and a block of points; or a filled pie, an ellipse and a thick line |
| `flapbird-letters` | `fade` (default), `clicks`, `keys` | Coloured blocks that fade in and then scatter; in `clicks` a left click adds a random square (up to ten); in `keys` one block follows the mouse and another moves with W/A/S/D, Escape quits |
| `flapbird-movers` | `time` (default), `budget`, `race` | A block moved by a timer, one by W/A/S/D and one following the mouse; `race` sends three blocks towards a finish line and prints the winner |
| `flapbird-drag` | none | A block you can drag with the mouse; Escape during a drag puts it back |

## Using the pieces

The game logic does not need a window and can be driven directly:

```python
import random

from flapbird.game import FlappyGame, State

game = FlappyGame(sprites_height=173, rng=random.Random(1))
game.handle_click(*game.layout.play_button[:2])  # start a round
game.tick()
game.handle_click(0, 0)                          # flap
print(game.score, game.state)
```

`FlappyGame` keeps its `state` (a `State`: `MENU`, `FALLING`, `FLAPPING`,
`GAME_OVER`), the bird's `bird` rectangle, the `pipes` and the `score`.
`tick()` advances one frame, `handle_click(x, y)` reacts to a mouse button
release, `update_score()` counts passed pipes and `reset()` starts a new
round.

Other building blocks:

- `flapbird.geometry.Rect` — an immutable integer rectangle with
  `contains`, `overlaps` and `moved`.
- `flapbird.pipes.PipeQueue` — the pipes in order, with `append`,
  `popleft`, `clear` and `describe`.
- `flapbird.timing.WaitBudget` — the time left to wait for an event before
  the next frame, with `spend` and `expire`.
- `flapbird.game.check_collision`, `make_pipe_pair`, `score_digits` and
  `build_layout`.
- `flapbird.drawings.thick_line_polygon` and `pie_polygon`,
  `flapbird.letters.FadeIn` and `RectStack`, `flapbird.movers.steer`,
  `bounce_vertical`, `center_on` and `Race`, and
  `flapbird.drag.Draggable`.

## What it does not do

The game has no sound, does not keep high scores between runs, and does not
ship its sprite sheet: you supply the image yourself.

## Running the tests

```
pip install ".[test]"
pytest
```