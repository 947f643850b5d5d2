"""Text searching, comparison and bounded copying with C-string semantics.

Strings are ordinary Python strings. A search returns the index of the match,
or None when there is none. Searching for the terminator ``"\\0"`` finds the
position just past the last character, as it does for a NUL-terminated string.
"""

from __future__ import annotations

TERMINATOR = "\0"


def _char(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c)


def _code_at(s, index):
    return ord(s[index]) if index < len(s) else 0


def strlen(s):
    """Number of characters before the first terminator."""
    end = s.find(TERMINATOR)
    return len(s) if end < 0 else end


def strncpy(src, n):
    """Return exactly ``n`` characters: ``src`` cut to ``n``, padded with terminators."""
    if n < 0:
        raise ValueError("n must not be negative")
    head = src[:n]
    return head + TERMINATOR * (n - len(head))


def strncat(dst, src, n):
    """Append at most ``n`` characters of ``src`` to ``dst``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return dst + src[:n]


def strlcat(dst, src, size):
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns ``(text, wanted)`` where ``text`` is what fits, leaving room for
    the terminator, and ``wanted`` is the length the full result would need.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    room = max(0, size - 1 - len(dst))
    text = dst + src[:room]
    if len(dst) > size:
        return text, size + len(src)
    return text, len(src) + len(dst)


def strchr(s, c):
    """Index of the first ``c`` in ``s``, or None."""
    ch = _char(c)
    if ch == TERMINATOR:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s, c):
    """Index of the last ``c`` in ``s``, or None."""
    ch = _char(c)
    if ch == TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strstr(haystack, needle):
    """Index of the first occurrence of ``needle``; 0 for an empty needle."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def strnstr(haystack, needle, length):
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strcmp(a, b):
    """Difference of the first differing character codes; 0 when equal."""
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    shorter = min(len(a), len(b))
    return _code_at(a, shorter) - _code_at(b, shorter)


def strncmp(a, b, n):
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return strcmp(a[:n], b[:n])


def strequ(a, b):
    """True when both strings are given and equal."""
    if a is None or b is None:
        return False
    return strcmp(a, b) == 0


def strnequ(a, b, n):
    """True when both strings are given and agree on their first ``n`` characters."""
    if a is None or b is None:
        return False
    return strncmp(a, b, n) == 0