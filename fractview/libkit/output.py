"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys


def _target(stream):
    return sys.stdout if stream is None else stream


def put_char(c, stream=None):
    """Write one character, given as a string or a code point."""
    if isinstance(c, int):
        c = chr(c)
    elif len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s, stream=None):
    """Write ``s``; nothing is written when ``s`` is None."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s, stream=None):
    """Write ``s`` followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n, stream=None):
    """Write the decimal form of the integer ``n``."""
    _target(stream).write(str(int(n)))