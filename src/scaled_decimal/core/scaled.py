"""
ScaledDecimal: an exact decimal value `coef * 10^exp`.

- coef is an arbitrary-precision Python int; exp is bounded by EXP_MIN/EXP_MAX.
- No normalisation: (12, 0) and (120, -1) are distinct objects that compare
  equal under `compare`. `==` and `hash` are structural.
- add / subtract / multiply are exact. divide and set_exp take an explicit
  rounding mode (DEFAULT_ROUNDING when omitted).

Pair-level functions (`compare`, `add`, `subtract`, `multiply`, `divide`) work
on raw (coef, exp) integers and return new ScaledDecimal values; the methods on
ScaledDecimal delegate to them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from .constants import DEFAULT_ROUNDING
from .exc import DecimalSyntaxError, DecimalTypeError, DivisionByZero, DoubleRoundingError, InexactRescaleError
from .fmt import stringify, to_decimal
from .host import LocaleArg, NumberFormatOptions
from .localefmt import stringify_locale
from .parsing import parse_parts
from .rounding import RoundingMode, check_mode, round_div
from .scaling import check_exp, is_integer, scale_coef, scale_coef_exact

# Debug printing control
DEBUG_NUMBERS = False

def _dbg(msg: str) -> None:
    if DEBUG_NUMBERS:
        print(msg)


# ----------------------------
# Pair-level arithmetic
# ----------------------------

def compare(xc: int, xe: int, yc: int, ye: int) -> int:
    """Return -1, 0 or 1 as x is less than, equal to or greater than y."""
    e = min(xe, ye)
    m1 = scale_coef_exact(xc, xe, e)
    m2 = scale_coef_exact(yc, ye, e)
    return (m1 > m2) - (m1 < m2)


def add(xc: int, xe: int, yc: int, ye: int) -> "ScaledDecimal":
    """Exact sum; the result carries the smaller exponent."""
    e = min(xe, ye)
    return ScaledDecimal(scale_coef_exact(xc, xe, e) + scale_coef_exact(yc, ye, e), e)


def subtract(xc: int, xe: int, yc: int, ye: int) -> "ScaledDecimal":
    """Exact difference; the result carries the smaller exponent."""
    e = min(xe, ye)
    return ScaledDecimal(scale_coef_exact(xc, xe, e) - scale_coef_exact(yc, ye, e), e)


def multiply(xc: int, xe: int, yc: int, ye: int) -> "ScaledDecimal":
    """Exact product; the exponents add."""
    return ScaledDecimal(xc * yc, xe + ye)


def divide(
    xc: int,
    xe: int,
    yc: int,
    ye: int,
    exp_out: Optional[int] = None,
    mode: RoundingMode = DEFAULT_ROUNDING,
) -> "ScaledDecimal":
    """Quotient x / y tagged with `exp_out` (default: the dividend's exponent).

    The dividend is refined to exponent `exp_out + ye` so that a single
    rounding division yields the result. Because that refinement must not
    round, `exp_out + ye` may not exceed `xe`; a positive divisor exponent is
    first folded into the divisor coefficient to widen the allowed range.
    """
    exp_out = xe if exp_out is None else check_exp(exp_out)
    check_mode(mode)
    if yc == 0:
        raise DivisionByZero("divide: divisor is zero")
    if ye > 0:
        yc = scale_coef_exact(yc, ye, 0)
        ye = 0
    if exp_out + ye - xe > 0:
        raise DoubleRoundingError(exp_out, xe, ye)
    m = scale_coef_exact(xc, xe, exp_out + ye)
    _dbg(f"divide: m={m}, yc={yc}, exp_out={exp_out}, mode={mode}")
    return ScaledDecimal(round_div(m, yc, mode), exp_out)


# ----------------------------
# ScaledDecimal
# ----------------------------

Operand = Union["ScaledDecimal", int]


@dataclass(frozen=True)
class ScaledDecimal:
    """Exact decimal value coef * 10^exp (immutable, not normalised)."""
    coef: int
    exp: int

    def __post_init__(self):
        if isinstance(self.coef, bool) or not isinstance(self.coef, int):
            raise DecimalTypeError(f"coefficient should be an integer, got {self.coef!r}")
        check_exp(self.exp)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "ScaledDecimal":
        return ScaledDecimal(0, 0)

    @classmethod
    def from_parts(cls, coef: int, exp: int) -> "ScaledDecimal":
        return cls(coef, exp)

    @classmethod
    def _retag(cls, coef: int, exp: int, target: Optional[int]) -> "ScaledDecimal":
        """Keep the value, move it to `target` exactly (no rounding path)."""
        if target is None:
            return cls(coef, exp)
        check_exp(target)
        try:
            return cls(scale_coef_exact(coef, exp, target), target)
        except InexactRescaleError as exc:
            raise DecimalTypeError(
                f"value {stringify(coef, exp)} is not an integer multiple of 10^{target}"
            ) from exc

    @classmethod
    def from_int(cls, value: int, exp: Optional[int] = None) -> "ScaledDecimal":
        """Integer value; with `exp`, retagged to that exponent."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecimalTypeError(f"from_int expects an int, got {type(value).__name__}")
        return cls._retag(value, 0, exp)

    @classmethod
    def from_string(cls, text: str, exp: Optional[int] = None) -> "ScaledDecimal":
        """Parse numeric text; raise DecimalSyntaxError when it does not match."""
        parsed = parse(text, exp)
        if parsed is None:
            raise DecimalSyntaxError(f"Cannot convert {text!r} to a ScaledDecimal")
        return parsed

    @classmethod
    def from_decimal(cls, value: Decimal, exp: Optional[int] = None) -> "ScaledDecimal":
        """Bridge from a finite stdlib Decimal, keeping its exponent."""
        if not isinstance(value, Decimal):
            raise DecimalTypeError(f"from_decimal expects a Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise DecimalSyntaxError(f"Cannot convert {value!r} to a ScaledDecimal")
        sign, digits, e = value.as_tuple()
        coef = int(Decimal((0, digits, 0)))
        return cls._retag(-coef if sign else coef, e, exp)

    @classmethod
    def from_float(cls, value: float, exp: Optional[int] = None) -> "ScaledDecimal":
        """Float via its shortest repr, so 0.1 becomes (1, -1) rather than the binary expansion.

        Integral floats land on exponent 0 when no `exp` is given (1e23 -> (10**23, 0)).
        """
        if not isinstance(value, float):
            raise DecimalTypeError(f"from_float expects a float, got {type(value).__name__}")
        if not math.isfinite(value):
            raise DecimalSyntaxError(f"Cannot convert {value!r} to a ScaledDecimal")
        if exp is None and value.is_integer():
            exp = 0
        return cls.from_string(repr(value), exp)

    # ------------- conversions -------------

    def to_string(self) -> str:
        return stringify(self.coef, self.exp)

    def __str__(self) -> str:
        return self.to_string()

    def to_locale_string(
        self,
        locales: LocaleArg = None,
        options: Optional[NumberFormatOptions] = None,
        **kwargs,
    ) -> str:
        """Locale-decorated rendering; keyword arguments build NumberFormatOptions."""
        if options is None:
            options = NumberFormatOptions(**kwargs)
        elif kwargs:
            raise DecimalTypeError("pass either options or keyword options, not both")
        return stringify_locale(self.coef, self.exp, locales, options)

    def to_decimal(self) -> Decimal:
        return to_decimal(self.coef, self.exp)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.coef == 0

    def is_integer(self) -> bool:
        return is_integer(self.coef, self.exp)

    def sign(self) -> int:
        return (self.coef > 0) - (self.coef < 0)

    # ------------- rescaling -------------

    def set_exp(self, exp: int, mode: RoundingMode = DEFAULT_ROUNDING) -> "ScaledDecimal":
        """Same value at exponent `exp`, rounded with `mode` when coarsening."""
        check_exp(exp)
        return ScaledDecimal(scale_coef(self.coef, self.exp, exp, mode), exp)

    # ------------- arithmetic -------------

    def compare_to(self, other: Operand) -> int:
        y = _operand(other)
        return compare(self.coef, self.exp, y.coef, y.exp)

    def add(self, other: Operand) -> "ScaledDecimal":
        y = _operand(other)
        return add(self.coef, self.exp, y.coef, y.exp)

    def subtract(self, other: Operand) -> "ScaledDecimal":
        y = _operand(other)
        return subtract(self.coef, self.exp, y.coef, y.exp)

    def multiply(self, other: Operand) -> "ScaledDecimal":
        y = _operand(other)
        return multiply(self.coef, self.exp, y.coef, y.exp)

    def divide(
        self,
        other: Operand,
        exp_out: Optional[int] = None,
        mode: RoundingMode = DEFAULT_ROUNDING,
    ) -> "ScaledDecimal":
        y = _operand(other)
        return divide(self.coef, self.exp, y.coef, y.exp, exp_out, mode)

    def negate(self) -> "ScaledDecimal":
        return ScaledDecimal(-self.coef, self.exp)

    def abs(self) -> "ScaledDecimal":
        return ScaledDecimal(abs(self.coef), self.exp)

    # ------------- operators -------------

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self) -> "ScaledDecimal":
        return self.negate()

    def __abs__(self) -> "ScaledDecimal":
        return self.abs()

    # Ordering is numeric (via compare); equality stays structural.
    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) >= 0


def _is_operand(value: object) -> bool:
    return isinstance(value, ScaledDecimal) or (isinstance(value, int) and not isinstance(value, bool))


def _operand(value: Operand) -> ScaledDecimal:
    if isinstance(value, ScaledDecimal):
        return value
    if _is_operand(value):
        return ScaledDecimal(value, 0)
    raise DecimalTypeError(f"unsupported operand type: {type(value).__name__}")


# ----------------------------
# Parsing and generic construction
# ----------------------------

def parse(text: str, exp: Optional[int] = None) -> Optional[ScaledDecimal]:
    """Fallible parse: a ScaledDecimal, or None when `text` is not numeric.

    With `exp`, the parsed value must be an exact multiple of 10^exp
    (DecimalTypeError otherwise).
    """
    if exp is not None:
        check_exp(exp)
    if not isinstance(text, str):
        raise DecimalTypeError(f"parse expects a str, got {type(text).__name__}")
    parts = parse_parts(text)
    if parts is None:
        _dbg(f"parse: no match for {text!r}")
        return None
    coef, e = parts
    return ScaledDecimal._retag(coef, e, exp)


def create(
    value: Union[ScaledDecimal, int, float, Decimal, str],
    exp: Optional[int] = None,
) -> ScaledDecimal:
    """Build a ScaledDecimal from any supported source via the named constructors."""
    if isinstance(value, ScaledDecimal):
        return ScaledDecimal._retag(value.coef, value.exp, exp)
    if isinstance(value, bool):
        raise DecimalTypeError("bool is not a numeric source")
    if isinstance(value, int):
        return ScaledDecimal.from_int(value, exp)
    if isinstance(value, float):
        return ScaledDecimal.from_float(value, exp)
    if isinstance(value, Decimal):
        return ScaledDecimal.from_decimal(value, exp)
    if isinstance(value, str):
        return ScaledDecimal.from_string(value, exp)
    raise DecimalTypeError(f"cannot create a ScaledDecimal from {type(value).__name__}")


__all__ = [
    "ScaledDecimal",
    "compare",
    "add",
    "subtract",
    "multiply",
    "divide",
    "parse",
    "create",
]
