from __future__ import annotations

import math
from fractions import Fraction

import pytest

from scaled_decimal.core import RoundingMode, ScaledDecimal


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

def exact_value(coef: int, exp: int) -> Fraction:
    """coef * 10^exp as an exact Fraction."""
    return coef * Fraction(10) ** exp


def oracle_round(q: Fraction, mode: RoundingMode) -> int:
    """Reference rounding of an exact rational to an integer."""
    lo, hi = math.floor(q), math.ceil(q)
    if lo == hi:
        return lo
    away = hi if q > 0 else lo
    if mode is RoundingMode.DOWN:
        return int(q)
    if mode is RoundingMode.UP:
        return away
    if mode is RoundingMode.TOWARD_POSITIVE_INFINITY:
        return hi
    if mode is RoundingMode.TOWARD_NEGATIVE_INFINITY:
        return lo
    diff = q - lo
    if diff != Fraction(1, 2):
        return hi if diff > Fraction(1, 2) else lo
    if mode is RoundingMode.HALF_TO_EVEN:
        return lo if lo % 2 == 0 else hi
    return away


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(scope="session")
def as_fraction():
    def _conv(d: ScaledDecimal) -> Fraction:
        return exact_value(d.coef, d.exp)
    return _conv


@pytest.fixture(scope="session")
def round_oracle():
    return oracle_round


@pytest.fixture(scope="session")
def sample_values():
    """(coef, exp) pairs covering every sign and both exponent directions."""
    return [
        ScaledDecimal(12345, -2),
        ScaledDecimal(-12345, -2),
        ScaledDecimal(6789, -3),
        ScaledDecimal(-6789, -3),
        ScaledDecimal(42, 3),
        ScaledDecimal(-42, 3),
        ScaledDecimal(0, -4),
        ScaledDecimal(0, 2),
    ]
