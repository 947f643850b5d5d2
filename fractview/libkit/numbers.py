"""Integer parsing, formatting and small arithmetic helpers.

Results that the 32-bit ``int`` of the original routines could not hold wrap
around the same way, so callers see identical values.
"""

from __future__ import annotations

import math

_INT_BITS = 32
_INT_SPAN = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_FACTORIAL_LIMIT = 12
_SPACES = frozenset(" \a\b\t\n\v\f\r")


def _wrap_int(value):
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    value %= _INT_SPAN
    return value - _INT_SPAN if value > _INT_MAX else value


def atoi(s):
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading blanks are skipped, one sign is accepted and digits are read until
    the first other character. Text without digits gives 0.
    """
    index = 0
    while index < len(s) and s[index] in _SPACES:
        index += 1
    sign = 1
    if index < len(s) and s[index] in "+-":
        if s[index] == "-":
            sign = -1
        index += 1
    start = index
    while index < len(s) and "0" <= s[index] <= "9":
        index += 1
    digits = s[start:index]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n):
    """Decimal text of the integer ``n``."""
    return str(int(n))


def len_nbr(n):
    """Width reserved for a number; the routine always reports one character."""
    int(n)
    return 1


def factorial(n):
    """``n!`` for 0 to 12; 0 for anything that would not fit or is negative."""
    if n == 0:
        return 1
    if n < 0 or n > _FACTORIAL_LIMIT:
        return 0
    return math.factorial(n)


def iterative_factorial(n):
    """``n!`` wrapped to 32 bits; 0 for a negative ``n``."""
    if n < 0:
        return 0
    return _wrap_int(math.factorial(n))


def power(nb, exponent):
    """``nb`` raised to ``exponent``, wrapped to 32 bits; 0 for a negative exponent."""
    if exponent < 0:
        return 0
    return _wrap_int(nb ** exponent)


def int_sqrt(n):
    """Exact integer square root of ``n``, or 0 when ``n`` is not a perfect square."""
    if n <= 0:
        return 0
    root = math.isqrt(n)
    return root if root * root == n else 0


def is_prime(n):
    """True when ``n`` is a prime number."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    limit = math.isqrt(n - 1) + 1
    return all(n % divisor for divisor in range(3, limit + 1, 2))