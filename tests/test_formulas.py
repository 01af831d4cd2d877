import pytest

from coursework.formulas import (
    celsius_to_fahrenheit,
    fourteen_x_minus_fifteen,
    square,
    triple_plus_five,
    twice_minus_one,
)

_SAMPLES = [-8, -1, 0, 2, 3, 8, 100]


def test_fourteen_x_minus_fifteen_at_zero():
    assert fourteen_x_minus_fifteen(0) == -15


@pytest.mark.parametrize("x", _SAMPLES)
def test_fourteen_x_minus_fifteen_slope(x):
    assert fourteen_x_minus_fifteen(x + 1) - fourteen_x_minus_fifteen(x) == 14


@pytest.mark.parametrize("n", _SAMPLES)
def test_twice_minus_one_is_odd_with_slope_two(n):
    assert twice_minus_one(n) % 2 == 1
    assert twice_minus_one(n + 1) - twice_minus_one(n) == 2


@pytest.mark.parametrize("n", _SAMPLES)
def test_square_is_even_function_and_non_negative(n):
    assert square(n) == square(-n)
    assert square(n) >= 0


def test_square_of_one_and_zero():
    assert square(1) == 1
    assert square(0) == 0


@pytest.mark.parametrize("n", _SAMPLES)
def test_triple_plus_five_slope(n):
    assert triple_plus_five(n + 1) - triple_plus_five(n) == 3
    assert (triple_plus_five(n) - 5) % 3 == 0


def test_celsius_fixed_points():
    assert celsius_to_fahrenheit(0) == 32
    assert celsius_to_fahrenheit(100) == 212
    assert celsius_to_fahrenheit(-40) == -40


def test_celsius_is_increasing():
    assert celsius_to_fahrenheit(23.56) < celsius_to_fahrenheit(23.57)