"""Viewer state: fractal choice, camera, input handling and rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from .fractals import DEFAULT_JULIA, Fractal, colorize, escape_counts

SCREEN_X = 750
SCREEN_Y = 750
MENU_WIDTH = 250
PREVIEW_SIZE = 250
PREVIEW_ITERATIONS = 100
PREVIEW_SCALE = 62.5
PREVIEW_OFFSET = 2.0
DEFAULT_ZOOM = float((SCREEN_X + SCREEN_Y) // 8)
DEFAULT_ITERATIONS = 50
PAN_STEP = 20.0
MOUSE_SCALE = 200.0
MOUSE_OFFSET = 2.5

LEFT_BUTTON = 1
RIGHT_BUTTON = 2
SCROLL_UP = 4
SCROLL_DOWN = 5

USAGE = "usage: fractview [fractal] (mandel, julia, leaf, all)"


class Key(enum.IntEnum):
    """Key codes understood by the viewer."""

    SPACE = 49
    ESC = 53
    PLUS = 69
    LESS = 78
    NUM3 = 85
    NUM6 = 88
    LEFT = 123
    RIGHT = 124
    UP = 125
    DOWN = 126
    CTRL = 256


class UsageError(ValueError):
    """Raised when the fractal name on the command line is not known."""

    def __init__(self, message=USAGE):
        super().__init__(message)


_NAMES = {
    "mandel": (Fractal.MANDELBROT, False),
    "julia": (Fractal.JULIA, False),
    "leaf": (Fractal.LEAF, False),
    "all": (Fractal.JULIA, True),
}


def parse_fractal(name):
    """Return ``(fractal, show_menu)`` for a command-line fractal name."""
    try:
        return _NAMES[name]
    except KeyError:
        raise UsageError() from None


@dataclass
class ViewState:
    """Everything the viewer knows about what is on screen."""

    fractal: Fractal = Fractal.JULIA
    menu: bool = False
    julia_constant: complex = DEFAULT_JULIA
    zoom: float = DEFAULT_ZOOM
    position_x: float = 0.0
    position_y: float = 0.0
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    iterations: int = DEFAULT_ITERATIONS
    locked: bool = True
    menu_seen: bool = False
    quit_requested: bool = False
    image: np.ndarray | None = field(default=None, repr=False)
    previews: list | None = field(default=None, repr=False)

    def __post_init__(self):
        self.fractal = Fractal(self.fractal)
        self.menu_seen = self.menu_seen or self.menu

    @property
    def width(self):
        """Width of the window, including the menu strip when it is shown."""
        return SCREEN_X + (MENU_WIDTH if self.menu else 0)

    def reset(self):
        """Put the camera, iteration count and mouse lock back to defaults."""
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.zoom = DEFAULT_ZOOM
        self.position_x = 0.0
        self.position_y = 0.0
        self.iterations = DEFAULT_ITERATIONS
        self.locked = True

    def origin(self):
        """Complex-plane coordinates ``(x, y)`` of the top-left pixel."""
        screen_x = -(SCREEN_X / (self.zoom * 2) + self.position_x) + self.mouse_x / 2
        screen_y = -(SCREEN_Y / (self.zoom * 2) + self.position_y) + self.mouse_y / 2
        return screen_x, screen_y

    def render(self):
        """Draw the selected fractal into ``image`` and return it."""
        origin_x, origin_y = self.origin()
        xs = np.arange(SCREEN_X) / self.zoom + origin_x
        ys = np.arange(SCREEN_Y) / self.zoom + origin_y
        grid = xs[None, :] + 1j * ys[:, None]
        counts = escape_counts(self.fractal, grid, self.iterations, self.julia_constant)
        self.image = colorize(counts, self.iterations)
        return self.image

    def render_previews(self):
        """Draw the small menu images, one per fractal, and return them."""
        coords = np.arange(PREVIEW_SIZE) / PREVIEW_SCALE - PREVIEW_OFFSET
        grid = coords[None, :] + 1j * coords[:, None]
        self.previews = [
            colorize(
                escape_counts(kind, grid, PREVIEW_ITERATIONS, self.julia_constant),
                PREVIEW_ITERATIONS,
            )
            for kind in Fractal
        ]
        return self.previews

    def toggle_menu(self):
        """Show or hide the fractal selection strip."""
        if self.menu:
            self.menu = False
        else:
            self.menu = True
            self.menu_seen = True
            self.render_previews()

    def press_key(self, key):
        """Handle a key press; return the new image, or None when quitting."""
        if key == Key.CTRL:
            self.toggle_menu()
        if key == Key.PLUS:
            self.iterations += 1
        if key == Key.SPACE:
            self.locked = not self.locked
        if key == Key.UP:
            self.position_y += PAN_STEP / self.zoom
        if key == Key.DOWN:
            self.position_y -= PAN_STEP / self.zoom
        if key == Key.RIGHT:
            self.position_x += PAN_STEP / self.zoom
        if key == Key.LEFT:
            self.position_x -= PAN_STEP / self.zoom
        if key == Key.ESC:
            self.quit_requested = True
            return None
        return self.render()

    def move_mouse(self, x, y):
        """Follow the pointer with the Julia constant unless it is locked."""
        if self.locked:
            return None
        self.julia_constant = complex(
            x / MOUSE_SCALE - MOUSE_OFFSET, y / MOUSE_SCALE - MOUSE_OFFSET
        )
        return self.render()

    def click(self, button, x, y):
        """Handle a mouse button at window position ``(x, y)``."""
        if button == RIGHT_BUTTON:
            self.zoom *= 0.5
        if self.menu_seen and button == LEFT_BUTTON and x > SCREEN_X:
            self.render_previews()
            if y < PREVIEW_SIZE:
                self.fractal = Fractal.MANDELBROT
            elif y > SCREEN_Y - 200:
                self.fractal = Fractal.LEAF
            elif y > PREVIEW_SIZE:
                self.fractal = Fractal.JULIA
            self.reset()
        if button in (LEFT_BUTTON, SCROLL_UP) and x < SCREEN_X:
            self._zoom_at(x, y)
        if button == SCROLL_DOWN:
            self.zoom *= 0.5
        return self.render()

    def _zoom_at(self, x, y):
        self.mouse_x = x / self.zoom - (SCREEN_X / (self.zoom * 2) + self.position_x) + self.mouse_x
        self.mouse_y = y / self.zoom - (SCREEN_Y / (self.zoom * 2) + self.position_y) + self.mouse_y
        self.position_x = 0.0
        self.position_y = 0.0
        self.zoom *= 2