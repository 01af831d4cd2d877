"""A few small arithmetic formulas."""

from __future__ import annotations


def fourteen_x_minus_fifteen(x: int) -> int:
    """Return 14x - 15."""
    return 14 * x - 15


def twice_minus_one(num: int) -> int:
    """Return 2n - 1."""
    return 2 * num - 1


def square(num: int) -> int:
    """Return n squared."""
    return num * num


def triple_plus_five(num: int) -> int:
    """Return 3n + 5."""
    return 3 * num + 5


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return celsius * 9 / 5 + 32