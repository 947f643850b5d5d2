"""Building, cutting, reshaping and walking strings and lists of strings."""

from __future__ import annotations

from itertools import takewhile

from .cstring import TERMINATOR, strcmp

_BLANKS = " \n\t"


def _is_lower(ch):
    return "a" <= ch <= "z"


def _is_digit(ch):
    return "0" <= ch <= "9"


def _ascii_lower(s):
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in s)


def strsub(s, start, length):
    """Return ``length`` characters of ``s`` beginning at index ``start``.

    Raises ValueError for an empty string or a negative bound, and IndexError
    when the range runs past the end of ``s``.
    """
    if s is None:
        raise TypeError("expected a string")
    if not s:
        raise ValueError("cannot take a substring of an empty string")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(s):
        raise IndexError("substring runs past the end of the string")
    return s[start:start + length]


def strjoin(a, b):
    """Return ``a`` followed by ``b``."""
    if a is None or b is None:
        raise TypeError("both strings are required")
    return a + b


def strtrim(s):
    """Remove spaces, newlines and tabs from both ends of ``s``."""
    if s is None:
        raise TypeError("expected a string")
    return s.strip(_BLANKS)


def strsplit(s, c):
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    if s is None:
        raise TypeError("expected a string")
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError("expected a single separator character")
    return [word for word in s.split(c) if word]


def strrev(s):
    """Return ``s`` reversed."""
    return s[::-1]


def strcapitalize(s):
    """Lower-case ``s``, then capitalise the first letter of every word.

    A letter starts a word unless it follows a lower-case letter or a digit,
    so ``"42mots"`` stays as it is while ``"quarante-deux"`` gets two capitals.
    """
    lowered = _ascii_lower(s)
    previous = TERMINATOR + lowered[:-1] if lowered else ""
    return "".join(
        chr(ord(ch) - 32)
        if _is_lower(ch) and not (_is_lower(before) or _is_digit(before))
        else ch
        for ch, before in zip(lowered, previous)
    )


def strmap(s, f):
    """Return a new string made of ``f(ch)`` for every character of ``s``."""
    if s is None or f is None:
        raise TypeError("a string and a function are required")
    return "".join(f(ch) for ch in s)


def strmapi(s, f):
    """Return a new string made of ``f(index, ch)`` for every character of ``s``."""
    if s is None or f is None:
        raise TypeError("a string and a function are required")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striter(s, f):
    """Call ``f(ch)`` for every character of ``s``."""
    if s is None or f is None:
        return
    for ch in s:
        f(ch)


def striteri(s, f):
    """Call ``f(index, ch)`` for every character of ``s``."""
    if s is None or f is None:
        return
    for index, ch in enumerate(s):
        f(index, ch)


def strnew(size):
    """Return a string of ``size`` terminator characters."""
    if size < 0:
        raise ValueError("size must not be negative")
    return TERMINATOR * size


def sort_params(args, start=0):
    """Return a copy of ``args`` with the part from ``start`` reordered.

    Neighbours out of order are swapped and the scan restarts just after
    ``start``; the element at ``start`` is compared only on the first pass.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    items = list(args)
    i = start
    while i + 1 < len(items):
        if strcmp(items[i], items[i + 1]) > 0:
            items[i], items[i + 1] = items[i + 1], items[i]
            i = start
        i += 1
    return items


def count_lines(lines):
    """Number of entries before the first None (or in all of ``lines``)."""
    return sum(1 for _ in takewhile(lambda line: line is not None, lines))