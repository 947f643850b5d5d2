"""Byte-buffer filling, copying, searching and comparison.

Buffers are ``bytearray`` objects changed in place; sources may be any
bytes-like object. Positions are returned as indexes, or None when a search
finds nothing. A count that runs past the end of a buffer raises IndexError.
"""

from __future__ import annotations


def _check_count(n, *buffers):
    if n < 0:
        raise ValueError("count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError("count runs past the end of the buffer")


def memset(buf, c, n):
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256); return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n):
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dst, src, n):
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``; return ``dst``."""
    _check_count(n, dst, src)
    if n:
        dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst, src, c, n):
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past the
    copied ``c``, or None when ``c`` was not among them. When ``dst`` and
    ``src`` are the same object nothing is copied and 0 is returned.
    """
    if dst is src:
        return 0
    _check_count(n, dst, src)
    stop = bytes(src[:n]).find(bytes([c & 0xFF]))
    if stop < 0:
        dst[:n] = bytes(src[:n])
        return None
    dst[:stop + 1] = bytes(src[:stop + 1])
    return stop + 1


def memmove(buf, dst, src, n):
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The ranges may overlap; the bytes land as they were before the move.
    Returns ``buf``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("count must not be negative")
    if max(dst, src) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data, c, n):
    """Index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a, b, n):
    """Difference of the first differing unsigned bytes within ``n``; 0 when equal."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memalloc(size):
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size)