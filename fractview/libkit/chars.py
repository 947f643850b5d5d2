"""ASCII character classification and case conversion."""

from __future__ import annotations


def _code(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def _same_kind(original, code):
    return chr(code) if isinstance(original, str) else code


def is_alpha(c):
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c):
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c):
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c):
    """True for a code point from 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def is_upper(c):
    """True for an ASCII capital letter."""
    return ord("A") <= _code(c) <= ord("Z")


def to_upper(c):
    """Capitalise an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c):
    """Lower an ASCII capital letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def str_is_alpha(s):
    """True when every character is an ASCII letter; True for ''."""
    return all(is_alpha(ch) for ch in s)


def str_is_lowercase(s):
    """True when every character is an ASCII lower-case letter; True for ''."""
    return all("a" <= ch <= "z" for ch in s)


def str_is_numeric(s):
    """True when every character is an ASCII digit; True for ''."""
    return all(is_digit(ch) for ch in s)


def str_is_uppercase(s):
    """True when every character is an ASCII capital letter; True for ''."""
    return all(is_upper(ch) for ch in s)