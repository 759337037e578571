# galtonboard

A Galton board simulation drawn on a 128x64 monochrome framebuffer laid out
like the memory of an SSD1306 OLED display.

Balls drop from the top centre of the board. At each of 15 peg rows a ball is
deflected 4 pixels to the left or to the right. When it reaches the bottom it
lands in one of 16 channels and the histogram grows. Each time the number of
landed balls reaches a multiple of 100, summary statistics are produced: the
count in every bin, the mean bin (bins numbered from 1) and the standard
deviation.

The chance of going left starts at 50%. Two buttons change it in steps of 10,
staying between 10% and 90%.

## Installation

```
pip install .
```

There are no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
galtonboard
```

runs 1000 ticks of the simulation and prints the statistics report every 100
landed balls. Options:

- `--steps N`: number of ticks to simulate (default 1000).
- `--left-probability P`: chance of going left, in percent, 0 to 100
  (default 50).
- `--seed N`: seed for the random number generator, for repeatable runs.
- `--delay-ms N`: pause between ticks, in milliseconds (default 0).
- `--show`: after the last tick, print the final screen as text, `#` for a lit
  pixel and `.` for a dark one.
- `--test-randomness TRIALS`: instead of simulating, draw TRIALS left/right
  decisions and print how many went each way, with percentages.

Ticks are 50 ms apart in simulated time. The command presses no buttons, so
the left probability stays at the value given.

## Library use

- `galtonboard.galton.GaltonBoard(left_probability=50.0, rng=None)`: the
  board. `random_direction()` returns True for left; `update_ball(ball)` moves
  a ball down one row; `register_landing(ball)` counts it in its channel;
  `statistics()` returns a `Statistics` (or None before any ball has landed)
  whose `format()` gives the text report; `increase_left()`,
  `decrease_left()`, `test_randomness(trials)` and `reset()` do what their
  names say.
- `galtonboard.galton.Ball`: one ball. `Ball.launch(width)` places a new ball
  at the top centre.
- `galtonboard.framebuffer.Framebuffer(width, height)`: a page-organised 1-bit
  framebuffer with `set_pixel`, `get_pixel`, `draw_line` (Bresenham),
  `draw_char`, `draw_string`, `clear`, `to_bytes` and `render_text`. Its font
  (`galtonboard.font`) has glyphs for A-Z and 0-9 only; lower-case letters are
  drawn as capitals and any other character is blank.
  `galtonboard.framebuffer.RenderArea` describes a window of columns and pages.
- `galtonboard.ssd1306`: command sequences for the display controller
  (`init_commands`, `scroll_commands`, `render_commands`) and two senders,
  `Controller` and `BitmapDisplay`, that write to any object with a
  `write(address, data)` method. `RecordingBus` keeps every write in its
  `writes` list.
- `galtonboard.display.GaltonDisplay(bus)`: draws balls, the histogram (one
  pixel of height per two balls), the ball count and the left/right
  percentages, then sends the frame to the bus.
- `galtonboard.simulation.Simulation(board, display=None)`: the main loop.
  `step(now_ms, button_a=True, button_b=True)` takes the button levels (False
  while held down), applies debounced presses (A raises the left probability,
  B lowers it), launches a ball every fifth tick, moves the balls, redraws the
  display if there is one, and returns the statistics reports that fell due.
  `Button` does the edge detection and 200 ms debouncing.

Example:

```python
import random
from galtonboard.galton import GaltonBoard, Ball

board = GaltonBoard(50.0, random.Random(1))
ball = Ball.launch(128)
while ball.active:
    board.update_ball(ball)
board.register_landing(ball)
print(board.statistics().format())
```

## What it does not do

The package does not talk to a real display or read real buttons. Display
output goes to whatever bus object you pass in; the `galtonboard` command
sends its frames to a bus that discards them and only prints the screen as
text when asked with `--show`. There is no interactive or animated view.