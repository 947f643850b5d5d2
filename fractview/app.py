"""Command-line entry point and interactive window for the fractal viewer."""

from __future__ import annotations

import sys

import numpy as np
import pygame

from .view import (
    LEFT_BUTTON,
    PREVIEW_SIZE,
    RIGHT_BUTTON,
    SCREEN_X,
    SCREEN_Y,
    SCROLL_DOWN,
    SCROLL_UP,
    Key,
    UsageError,
    ViewState,
    parse_fractal,
)

WINDOW_TITLE = "fractview"
DISPLAY_FAILED = "Display failed"

# The viewer's UP/DOWN codes follow the original keyboard layout, where the
# "up" code is produced by the down arrow and vice versa.
_KEYS = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_KP_PLUS: Key.PLUS,
    pygame.K_PLUS: Key.PLUS,
    pygame.K_KP_MINUS: Key.LESS,
    pygame.K_MINUS: Key.LESS,
    pygame.K_KP3: Key.NUM3,
    pygame.K_KP6: Key.NUM6,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.UP,
    pygame.K_UP: Key.DOWN,
    pygame.K_LCTRL: Key.CTRL,
    pygame.K_RCTRL: Key.CTRL,
}

_BUTTONS = {
    1: LEFT_BUTTON,
    3: RIGHT_BUTTON,
    4: SCROLL_UP,
    5: SCROLL_DOWN,
}


def key_from_pygame(key):
    """Return the viewer key for a pygame key constant, or None."""
    return _KEYS.get(key)


def button_from_pygame(button):
    """Return the viewer mouse button for a pygame button number, or None."""
    return _BUTTONS.get(button)


def _to_surface(image):
    pixels = np.asarray(image, dtype=np.int64) & 0xFFFFFF
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    return pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))


def _open_window(state):
    return pygame.display.set_mode((state.width, SCREEN_Y))


def _draw(screen, state):
    if state.image is None:
        state.render()
    screen.blit(_to_surface(state.image), (0, 0))
    if state.menu:
        if state.previews is None:
            state.render_previews()
        for index, preview in enumerate(state.previews):
            screen.blit(_to_surface(preview), (SCREEN_X, PREVIEW_SIZE * index))
    pygame.display.flip()


def _handle(event, state):
    """Apply one event to the state; return False when the viewer should stop."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        key = key_from_pygame(event.key)
        if key is None:
            state.render()
            return True
        state.press_key(key)
        return not state.quit_requested
    if event.type == pygame.MOUSEMOTION:
        state.move_mouse(*event.pos)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        button = button_from_pygame(event.button)
        if button is not None:
            state.click(button, *event.pos)
    return True


def run(state):
    """Open a window for ``state`` and process input until it is closed."""
    pygame.init()
    try:
        pygame.display.set_caption(WINDOW_TITLE)
        screen = _open_window(state)
        _draw(screen, state)
        while True:
            event = pygame.event.wait()
            menu_before = state.menu
            if not _handle(event, state):
                break
            if state.menu != menu_before:
                screen = _open_window(state)
            _draw(screen, state)
    finally:
        pygame.quit()


def main(argv=None):
    """Start the viewer with the fractal named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(UsageError())
        return 0
    try:
        fractal, menu = parse_fractal(args[0])
    except UsageError as error:
        print(error)
        return 0
    state = ViewState(fractal=fractal, menu=menu)
    state.reset()
    if state.menu:
        state.render_previews()
    state.render()
    try:
        run(state)
    except pygame.error:
        print(DISPLAY_FAILED)
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())