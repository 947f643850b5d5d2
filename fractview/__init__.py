"""Interactive fractal explorer with a small text and number toolkit."""

__version__ = "0.1.0"