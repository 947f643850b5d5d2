import math

import pytest

from fractview.libkit.numbers import (
    atoi,
    factorial,
    int_sqrt,
    is_prime,
    iterative_factorial,
    itoa,
    len_nbr,
    power,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -17abc", -17),
        ("\t\n+8", 8),
        ("", 0),
        ("abc", 0),
        ("--5", 0),
        ("-0", 0),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_sign():
    assert itoa(-305).startswith("-")
    assert itoa(-305)[1:] == itoa(305)


@pytest.mark.parametrize("n", [0, 5, -123456, 10**9])
def test_len_nbr_always_one(n):
    assert len_nbr(n) == 1


@pytest.mark.parametrize("n", range(1, 13))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_limits():
    assert factorial(0) == 1
    assert factorial(-1) == 0
    assert factorial(13) == 0


@pytest.mark.parametrize("n", range(0, 13))
def test_iterative_factorial_agrees_with_factorial(n):
    assert iterative_factorial(n) == factorial(n)


def test_iterative_factorial_negative_and_overflow():
    assert iterative_factorial(-3) == 0
    value = iterative_factorial(13)
    assert -(2**31) <= value < 2**31
    assert (value - math.factorial(13)) % 2**32 == 0


@pytest.mark.parametrize("nb, exponent", [(2, 0), (2, 1), (3, 4), (-2, 5), (7, 3)])
def test_power_matches_small_exponents(nb, exponent):
    assert power(nb, exponent) == nb ** exponent


def test_power_negative_exponent_and_wrap():
    assert power(5, -1) == 0
    assert power(2, 31) == -(2**31)


@pytest.mark.parametrize("root", [1, 2, 9, 46340])
def test_int_sqrt_perfect_squares(root):
    assert int_sqrt(root * root) == root


@pytest.mark.parametrize("n", [0, -4, 2, 15, 17])
def test_int_sqrt_non_squares_give_zero(n):
    assert int_sqrt(n) == 0


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 97, 7919])
def test_is_prime_true_for_primes(p):
    assert is_prime(p) is True


@pytest.mark.parametrize("a, b", [(2, 2), (3, 3), (5, 7), (97, 89), (11, 11)])
def test_is_prime_false_for_products(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("n", [-7, 0, 1])
def test_is_prime_false_below_two(n):
    assert is_prime(n) is False