"""Escape-time fractals: Mandelbrot, Julia and the cosine "leaf" set."""

from __future__ import annotations

import enum

import numpy as np

ESCAPE_RADIUS = 2.0
PALETTE_BASE = 0xCCEBFF
DEFAULT_JULIA = complex(0.285, 0.013)


class Fractal(enum.IntEnum):
    """The fractals that can be drawn."""

    MANDELBROT = 1
    JULIA = 2
    LEAF = 3


def escape_counts(kind, grid, iterations, julia_constant=DEFAULT_JULIA):
    """Return, for every point of ``grid``, the steps taken before escape.

    A point stops iterating once its value leaves the disc of radius 2 or
    after ``iterations`` steps, whichever comes first.
    """
    kind = Fractal(kind)
    points = np.asarray(grid, dtype=complex)
    flat = points.ravel()
    counts = np.zeros(flat.shape, dtype=np.int64)

    if kind is Fractal.JULIA:
        z = flat.copy()
        c = np.full(flat.shape, complex(julia_constant), dtype=complex)
    else:
        z = np.zeros(flat.shape, dtype=complex)
        c = flat

    active = np.flatnonzero(np.abs(z) <= ESCAPE_RADIUS)
    with np.errstate(all="ignore"):
        for _ in range(iterations):
            if active.size == 0:
                break
            current = z[active]
            if kind is Fractal.LEAF:
                current = np.cos(current / c[active])
            else:
                current = current * current + c[active]
            z[active] = current
            counts[active] += 1
            active = active[np.abs(current) <= ESCAPE_RADIUS]
    return counts.reshape(points.shape)


def _single(kind, point, iterations, julia_constant=DEFAULT_JULIA):
    counts = escape_counts(kind, np.array([point], dtype=complex), iterations, julia_constant)
    return int(counts[0])


def mandelbrot(c, iterations):
    """Escape count of ``z -> z*z + c`` starting from zero."""
    return _single(Fractal.MANDELBROT, c, iterations)


def julia(z, iterations, c):
    """Escape count of ``z -> z*z + c`` starting from ``z``."""
    return _single(Fractal.JULIA, z, iterations, c)


def leaf(c, iterations):
    """Escape count of ``z -> cos(z / c)`` starting from zero."""
    return _single(Fractal.LEAF, c, iterations)


def colorize(counts, iterations):
    """Map escape counts to packed RGB integers."""
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    shade = 1.5 * np.asarray(counts, dtype=float) * PALETTE_BASE / iterations
    return np.trunc(shade).astype(np.int64)