"""
Rounding engine: integer division with a named rounding mode.

`round_div(n, div, mode)` returns the integer quotient of `n / div` chosen by
`mode`. Both operands may carry either sign; the result is the same as rounding
the exact rational quotient.

Python's `//` floors, so the half/away modes are built on a truncated
quotient/remainder pair (`_trunc_divmod`) and the directed modes use floor
division directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .exc import DecimalTypeError, DivisionByZero

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


class RoundingMode(Enum):
    """Rounding modes understood by `round_div`."""
    HALF_UP = "half_up"
    HALF_TO_EVEN = "half_to_even"
    UP = "up"
    DOWN = "down"
    TOWARD_POSITIVE_INFINITY = "toward_positive_infinity"
    TOWARD_NEGATIVE_INFINITY = "toward_negative_infinity"


def check_mode(mode: RoundingMode) -> RoundingMode:
    """Validate a rounding mode argument and return it unchanged."""
    if not isinstance(mode, RoundingMode):
        raise DecimalTypeError(f"unsupported rounding mode: {mode!r}")
    return mode


# ----------------------------
# Integer helpers
# ----------------------------

def _trunc_divmod(n: int, div: int) -> Tuple[int, int]:
    """Quotient truncated toward zero and the remainder carrying the sign of `n`."""
    q = abs(n) // abs(div)
    if (n < 0) != (div < 0):
        q = -q
    return q, n - q * div


def _away_step(n: int, div: int) -> int:
    # +1 when the true quotient is positive, -1 when negative
    return 1 if (n < 0) == (div < 0) else -1


def round_div(n: int, div: int, mode: RoundingMode) -> int:
    """Divide `n` by `div`, returning the quotient rounded according to `mode`."""
    if div == 0:
        raise DivisionByZero("round_div: division by zero")
    check_mode(mode)

    if mode is RoundingMode.TOWARD_NEGATIVE_INFINITY:
        return n // div
    if mode is RoundingMode.TOWARD_POSITIVE_INFINITY:
        return -(-n // div)

    q, r = _trunc_divmod(n, div)
    _dbg(f"round_div: n={n}, div={div}, q={q}, r={r}, mode={mode.name}")
    if r == 0 or mode is RoundingMode.DOWN:
        return q
    if mode is RoundingMode.UP:
        return q + _away_step(n, div)

    r2 = abs(2 * r)
    if mode is RoundingMode.HALF_TO_EVEN and r2 == abs(div) and q % 2 == 0:
        return q
    if r2 >= abs(div):
        return q + _away_step(n, div)
    return q


__all__ = [
    "RoundingMode",
    "check_mode",
    "round_div",
]
