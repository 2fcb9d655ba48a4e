"""
Rescaling of coefficients between decimal exponents.

- Refining (moving to a smaller exponent) multiplies by a power of ten and is
  always exact.
- Coarsening (moving to a larger exponent) divides by a power of ten and goes
  through the rounding engine, or fails in the exact-only variant.
"""

from __future__ import annotations

from .constants import EXP_MIN, EXP_MAX
from .exc import DecimalRangeError, DecimalTypeError, InexactRescaleError
from .rounding import RoundingMode, check_mode, round_div


def check_exp(exp: int) -> int:
    """Validate an exponent argument and return it unchanged."""
    if isinstance(exp, bool) or not isinstance(exp, int):
        raise DecimalTypeError(f"exponent should be an integer, got {exp!r}")
    if exp < EXP_MIN or exp > EXP_MAX:
        raise DecimalRangeError(f"exponent out of bounds (exp={exp})")
    return exp


def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def is_integer(coef: int, exp: int) -> bool:
    """True when coef * 10^exp has no fractional part."""
    return exp >= 0 or coef % _ten_pow(-exp) == 0


def scale_coef_exact(coef: int, from_exp: int, to_exp: int) -> int:
    """Rescale without rounding; raise InexactRescaleError if digits would be lost."""
    if to_exp == from_exp:
        return coef
    if to_exp < from_exp:
        return coef * _ten_pow(from_exp - to_exp)
    q, r = divmod(coef, _ten_pow(to_exp - from_exp))
    if r != 0:
        raise InexactRescaleError(coef, from_exp, to_exp)
    return q


def scale_coef(coef: int, from_exp: int, to_exp: int, mode: RoundingMode) -> int:
    """Rescale, rounding with `mode` when moving to a coarser exponent."""
    check_mode(mode)
    if to_exp > from_exp:
        return round_div(coef, _ten_pow(to_exp - from_exp), mode)
    return scale_coef_exact(coef, from_exp, to_exp)


__all__ = [
    "check_exp",
    "is_integer",
    "scale_coef",
    "scale_coef_exact",
]
