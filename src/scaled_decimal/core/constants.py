"""
Scaled Decimal Core Constants
=============================

Exponent bounds, the default rounding mode and the tuning constants used by
the locale formatting layer. Nothing here is mutated at runtime; callers that
want another rounding mode pass it explicitly.
"""

# NOTE: EXP_MIN/EXP_MAX bound every exponent a ScaledDecimal may carry, including
#       the sum produced by multiply(). Coefficients are unbounded Python ints.

from .rounding import RoundingMode

# ---------------------------------------------------------------------------
# Exponent range
# ---------------------------------------------------------------------------

#: Largest exponent magnitude (2**53 - 1, the "safe integer" range).
EXP_MAX: int = (1 << 53) - 1
EXP_MIN: int = -EXP_MAX


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

#: Mode bound as the default of every `mode=` parameter.
DEFAULT_ROUNDING: RoundingMode = RoundingMode.HALF_UP


# ---------------------------------------------------------------------------
# Locale formatting
# ---------------------------------------------------------------------------

#: Locale used when neither the caller nor the environment names one.
DEFAULT_LOCALE: str = "en_US"

#: Floor for the Decimal context precision used while formatting through Babel.
DEFAULT_DECIMAL_PRECISION: int = 28

# Template condensation (see localefmt.stringify_locale). The integer fragment
# keeps seven low-order digits and never drops below seven digits once the
# real integer part has them; the fraction fragment keeps three digits and
# never drops below three significant ones once the real fraction has them.
TEMPLATE_INT_MODULUS: int = 10_000_000
TEMPLATE_INT_BUMP: int = 1_000_000
TEMPLATE_FRAC_MODULUS: int = 1_000
TEMPLATE_FRAC_BUMP: int = 100
TEMPLATE_FRAC_DIGITS: int = 3


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "EXP_MIN",
    "EXP_MAX",
    "DEFAULT_ROUNDING",
    "DEFAULT_LOCALE",
    "DEFAULT_DECIMAL_PRECISION",
    "TEMPLATE_INT_MODULUS",
    "TEMPLATE_INT_BUMP",
    "TEMPLATE_FRAC_MODULUS",
    "TEMPLATE_FRAC_BUMP",
    "TEMPLATE_FRAC_DIGITS",
]
