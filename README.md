# fractview

An interactive fractal explorer. It draws the Mandelbrot set, a Julia set
whose constant can follow the mouse, and a "leaf" fractal (iterating
`z = cos(z / c)` from zero), and lets you pan and zoom through them.

## Installing

```
pip install .
```

This installs `numpy` and `pygame` along with the package. The tests need
`pytest`, available through the `test` extra (`pip install .[test]`).

## Running

```
fractview mandel
fractview julia
fractview leaf
fractview all
```

The single argument picks the fractal. `all` starts on the Julia set in a
wider window with a column of three small previews on the right (Mandelbrot,
Julia, leaf from top to bottom); left-click a preview to switch to that
fractal, which also resets zoom, position and iteration count. A missing,
extra or unknown argument prints the usage line and exits:

```
usage: fractview [fractal] (mandel, julia, leaf, all)
```

If the window cannot be opened, `Display failed` is printed.

## Controls

| Input                      | Effect                                          |
|----------------------------|-------------------------------------------------|
| Arrow keys                 | Pan the view                                    |
| `+` (main or keypad)       | Add one iteration                               |
| Space                      | Lock or unlock the Julia constant to the mouse  |
| Ctrl                       | Show or hide the preview column                 |
| Left click / wheel up      | Zoom in by two, shifting toward the pointer     |
| Right click / wheel down   | Zoom out by half                                |
| Escape, or closing the window | Quit                                         |

The Julia constant starts at `0.285 + 0.013i` and is locked; press Space and
move the mouse to change it. Rendering starts at 50 iterations.

## Using it as a library

The computation is available without a window:

```python
from fractview.fractals import Fractal, mandelbrot, escape_counts, colorize

mandelbrot(0j, 50)          # 50: the origin never escapes
mandelbrot(3 + 0j, 50)      # 1: escapes after the first step
```

- `fractview.fractals` — `Fractal` (MANDELBROT, JULIA, LEAF), the per-point
  functions `mandelbrot`, `julia` and `leaf`, the array function
  `escape_counts(kind, grid, iterations, julia_constant)` and
  `colorize(counts, iterations)`, which turns counts into packed RGB integers.
- `fractview.view` — `parse_fractal(name)`, `UsageError`, `Key`, and
  `ViewState`, which holds zoom, position, iteration count and mode and turns
  `press_key`, `move_mouse` and `click` into new renders (`render`,
  `render_previews`, `toggle_menu`, `reset`, `origin`).
- `fractview.app` — `run(state)` drives a `ViewState` with a pygame window;
  `main(argv)` is the `fractview` command.

The `fractview.libkit` sub-package carries small helpers:

- `chars` — ASCII classification and case conversion.
- `cstring` — string length, search, comparison and bounded copying with
  C-string semantics (searches return an index or None).
- `transform` — substrings, joining, trimming, splitting, reversing,
  capitalising, mapping and sorting lists of strings.
- `numbers` — `atoi`, `itoa`, factorials, powers, integer square roots and
  primality, with 32-bit wrap-around where noted.
- `output` — writing characters, strings and numbers to a stream.
- `buffers` — filling, copying, moving, searching and comparing `bytearray`s.
- `linked` — a singly linked `Node` list with push, delete, iterate and map.
- `reader` — `LineReader`, which reads a text or binary stream line by line.

## What it does not do

fractview only displays fractals on screen: it does not save images to
files, and it has no zoom-out-by-keyboard or iteration-decrease control (the
minus key re-renders without changing anything).