"""
Top-level API for scaled_decimal.

Exact decimal arithmetic on `coef * 10^exp` pairs:
  - ScaledDecimal: immutable value type with exact add/subtract/multiply,
    rounding divide/set_exp and exact plain and locale-aware rendering
  - RoundingMode: rounding modes for the lossy operations
  - parse / create: fallible and throwing construction from text and numbers

Lower-level pieces (rescaling helpers, the Babel host formatter adapter) live
under `scaled_decimal.core`.
"""

from __future__ import annotations

from .core import (
    ScaledDecimal,
    RoundingMode,
    NumberFormatOptions,
    DEFAULT_ROUNDING,
    compare,
    add,
    subtract,
    multiply,
    divide,
    parse,
    create,
    stringify,
    stringify_locale,
    ScaledDecimalError,
    DecimalSyntaxError,
    DecimalTypeError,
    DecimalRangeError,
    DivisionByZero,
    DoubleRoundingError,
)

__version__ = "0.3.0"

__all__ = [
    # value type
    "ScaledDecimal",
    "RoundingMode",
    "NumberFormatOptions",
    "DEFAULT_ROUNDING",
    # pair-level operations
    "compare",
    "add",
    "subtract",
    "multiply",
    "divide",
    # construction
    "parse",
    "create",
    # rendering
    "stringify",
    "stringify_locale",
    # exceptions
    "ScaledDecimalError",
    "DecimalSyntaxError",
    "DecimalTypeError",
    "DecimalRangeError",
    "DivisionByZero",
    "DoubleRoundingError",
]
