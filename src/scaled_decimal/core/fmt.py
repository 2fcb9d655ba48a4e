"""
Plain formatting helpers.

`stringify` renders a (coef, exp) pair exactly: no scientific notation, no
grouping, no digit loss. `to_decimal` bridges to the standard library.

Digit strings are taken from `Decimal(int)`, which is not subject to the
interpreter's int/str conversion limit (`sys.get_int_max_str_digits`).
"""

from decimal import Decimal


def coef_digits(coef: int) -> str:
    """Decimal digits of |coef|, without the interpreter's length limit."""
    return format(Decimal(abs(coef)), "f")


def stringify(coef: int, exp: int) -> str:
    """Exact plain rendering of coef * 10^exp.

      (0, -3)      -> '0'
      (1234, -6)   -> '0.001234'
      (-1234, -3)  -> '-1.234'
      (-7890, 3)   -> '-7890000'
    """
    if coef == 0:
        return "0"
    sign = "-" if coef < 0 else ""
    digits = coef_digits(coef)
    if exp >= 0:
        return f"{sign}{digits}{'0' * exp}"
    width = -exp
    integer = digits[:-width].rjust(1, "0")
    fraction = digits[-width:].rjust(width, "0")
    return f"{sign}{integer}.{fraction}"


def to_decimal(coef: int, exp: int) -> Decimal:
    """Exact stdlib Decimal for coef * 10^exp (independent of the context precision)."""
    sign, digits, _ = Decimal(coef).as_tuple()
    return Decimal((sign, digits, exp))


__all__ = [
    "coef_digits",
    "stringify",
    "to_decimal",
]
