"""
Scaled Decimal Core
===================

Unified exports for the exact decimal engine: values are `coef * 10^exp`
pairs over Python ints, rounding happens only where a caller asks for a
coarser exponent, and rendering never drops digits.
"""

# NOTE:
#   Arithmetic is integer-only. The stdlib Decimal appears only at the I/O
#   bridges (to_decimal / from_decimal) and inside the Babel formatting layer.

# Configuration constants
from .constants import (
    EXP_MIN,
    EXP_MAX,
    DEFAULT_ROUNDING,
    DEFAULT_LOCALE,
    DEFAULT_DECIMAL_PRECISION,
)

# Rounding engine
from .rounding import (
    RoundingMode,
    check_mode,
    round_div,
)

# Rescaling
from .scaling import (
    check_exp,
    is_integer,
    scale_coef,
    scale_coef_exact,
)

# Plain formatting
from .fmt import (
    stringify,
    to_decimal,
    coef_digits,
)

# Locale formatting
from .host import (
    HostNumberFormatter,
    NumberFormatOptions,
    NumberPart,
)
from .localefmt import stringify_locale

# Value type, pair-level arithmetic and construction
from .scaled import (
    ScaledDecimal,
    compare,
    add,
    subtract,
    multiply,
    divide,
    parse,
    create,
)

# Core exceptions
from .exc import (
    ScaledDecimalError,
    DecimalSyntaxError,
    DecimalTypeError,
    DecimalRangeError,
    DivisionByZero,
    DoubleRoundingError,
    InexactRescaleError,
)

__all__ = [
    # constants
    "EXP_MIN",
    "EXP_MAX",
    "DEFAULT_ROUNDING",
    "DEFAULT_LOCALE",
    "DEFAULT_DECIMAL_PRECISION",
    # rounding
    "RoundingMode",
    "check_mode",
    "round_div",
    # scaling
    "check_exp",
    "is_integer",
    "scale_coef",
    "scale_coef_exact",
    # fmt
    "stringify",
    "to_decimal",
    "coef_digits",
    # locale
    "HostNumberFormatter",
    "NumberFormatOptions",
    "NumberPart",
    "stringify_locale",
    # values
    "ScaledDecimal",
    "compare",
    "add",
    "subtract",
    "multiply",
    "divide",
    "parse",
    "create",
    # exceptions
    "ScaledDecimalError",
    "DecimalSyntaxError",
    "DecimalTypeError",
    "DecimalRangeError",
    "DivisionByZero",
    "DoubleRoundingError",
    "InexactRescaleError",
]
