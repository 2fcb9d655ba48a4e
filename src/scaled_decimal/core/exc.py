"""
Core exception types for scaled_decimal.core.

These are dependency-free and may be imported by all core modules. Each kind
also derives from the matching builtin so callers can catch either.
"""

__all__ = [
    "ScaledDecimalError",
    "DecimalSyntaxError",
    "DecimalTypeError",
    "DecimalRangeError",
    "DivisionByZero",
    "DoubleRoundingError",
    "InexactRescaleError",
]


class ScaledDecimalError(Exception):
    """Base class for every error raised by the decimal engine."""
    pass


class DecimalSyntaxError(ScaledDecimalError, ValueError):
    """Raised when text cannot be parsed as a decimal number."""
    pass


class DecimalTypeError(ScaledDecimalError, TypeError):
    """Raised on a non-integer exponent, an unsupported operand type, or a
    value that is not an exact multiple of the requested power of ten."""
    pass


class DecimalRangeError(ScaledDecimalError, ValueError):
    """Raised when an argument is of the right type but outside the supported range."""
    pass


class DivisionByZero(DecimalRangeError, ZeroDivisionError):
    """Raised when a divisor coefficient is zero."""
    pass


class DoubleRoundingError(DecimalRangeError):
    """Raised when a division would have to round the dividend before the quotient.

    Attributes
    ----------
    exp_out : int
        Requested exponent of the quotient.
    dividend_exp : int
        Exponent of the dividend.
    divisor_exp : int
        Exponent of the divisor after refining it to at most zero.
    """

    def __init__(self, exp_out, dividend_exp, divisor_exp):
        super().__init__(
            f"exp_out={exp_out} should be <= {dividend_exp - divisor_exp} "
            f"(dividend exp {dividend_exp} - divisor exp {divisor_exp}), "
            "or the result will be rounded twice"
        )
        self.exp_out = exp_out
        self.dividend_exp = dividend_exp
        self.divisor_exp = divisor_exp


class InexactRescaleError(DecimalRangeError):
    """Raised when an exact-only rescale would have to drop nonzero digits."""

    def __init__(self, coef, from_exp, to_exp):
        super().__init__(
            f"cannot move coefficient from exp={from_exp} to exp={to_exp} without rounding"
        )
        self.coef = coef
        self.from_exp = from_exp
        self.to_exp = to_exp
