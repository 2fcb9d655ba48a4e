"""
Host locale number formatter (Babel adapter).

The locale layer needs two things from the host: a formatted string for an
exact integer, and a typed parts sequence for a small float template. Babel
provides the decoration (symbols, grouping, currency and unit patterns, plural
rules); this module pins the fraction digits, turns grouping on or off and
splits the output into parts.

Notes:
- Fraction digits are fixed: the host shows exactly `minimum_fraction_digits`.
- Integer inputs are formatted exactly. Babel works on stdlib Decimals, so the
  formatting runs in a local context whose precision covers every digit.
- Parts are recovered from the rendered text: the first `digits (sep digits)*`
  run is the number, everything around it is a literal.
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import List, Optional, Sequence, Union

from babel import Locale, UnknownLocaleError
from babel.core import default_locale
from babel.numbers import NumberPattern, format_currency, format_decimal
from babel.units import UnknownUnitError, format_unit

from .constants import DEFAULT_DECIMAL_PRECISION, DEFAULT_LOCALE
from .exc import DecimalRangeError, DecimalTypeError

# Debug printing control (host formatting layer)
DEBUG_HOST = False

def _dbg(msg: str) -> None:
    if DEBUG_HOST:
        print(msg)


SUPPORTED_STYLES = ("decimal", "currency", "unit")
CURRENCY_SIGNS = ("standard", "accounting")
UNIT_DISPLAYS = ("short", "long", "narrow")

# Babel's "no grouping" sentinel (what parse_pattern yields for a pattern without ',')
_NO_GROUPING = (1000, 1000)

_CURRENCY_CODE_RE = re.compile(r"[A-Za-z]{3}")
_NUMBER_RUN_RE = re.compile(r"[0-9]+(?:[^0-9][0-9]+)*")
_SEPARATOR_RE = re.compile(r"([^0-9])")

LocaleArg = Union[None, str, Locale, Sequence[str]]


# ---------------------------------------------------------------------------
# Options and parts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFormatOptions:
    """Locale formatting options (a subset of the usual NumberFormat option bag).

    Fields:
    - notation: only "standard" is supported.
    - style: "decimal", "currency" or "unit" ("percent" is rejected).
    - currency: ISO 4217 code, required for the currency style.
    - currency_sign: "standard" or "accounting" (parenthesised negatives).
    - unit: Babel/CLDR unit id ("meter" or "length-meter"), required for the unit style.
    - unit_display: "short", "long" or "narrow".
    - use_grouping: insert locale group separators into the integer part.
    - minimum_integer_digits: left-pad the integer part with zeros.
    - minimum_fraction_digits: fraction digits to show.
    """

    notation: str = "standard"
    style: str = "decimal"
    currency: Optional[str] = None
    currency_sign: str = "standard"
    unit: Optional[str] = None
    unit_display: str = "short"
    use_grouping: bool = True
    minimum_integer_digits: int = 1
    minimum_fraction_digits: int = 0


@dataclass(frozen=True)
class NumberPart:
    """Typed segment of a formatted number.

    `type` is one of "integer", "group", "decimal", "fraction" or "literal".
    """

    type: str
    value: str


def _check_count(name: str, value: int, lowest: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecimalTypeError(f"options.{name} should be an integer, got {value!r}")
    if value < lowest:
        raise DecimalRangeError(f"options.{name} should be >= {lowest}, got {value}")


def check_options(options: NumberFormatOptions) -> None:
    """Reject option combinations the formatter cannot honour exactly."""
    if options.notation != "standard":
        raise DecimalRangeError(f"options.notation {options.notation!r} is not supported")
    if options.style == "percent":
        raise DecimalRangeError("options.style 'percent' is not supported")
    if options.style not in SUPPORTED_STYLES:
        raise DecimalRangeError(f"options.style {options.style!r} is not supported")
    if options.style == "currency":
        if options.currency is None:
            raise DecimalTypeError("options.currency is required with style 'currency'")
        if not _CURRENCY_CODE_RE.fullmatch(options.currency):
            raise DecimalRangeError(f"invalid currency code {options.currency!r}")
        if options.currency_sign not in CURRENCY_SIGNS:
            raise DecimalRangeError(f"options.currency_sign {options.currency_sign!r} is not supported")
    if options.style == "unit":
        if options.unit is None:
            raise DecimalTypeError("options.unit is required with style 'unit'")
        if options.unit_display not in UNIT_DISPLAYS:
            raise DecimalRangeError(f"options.unit_display {options.unit_display!r} is not supported")
    _check_count("minimum_integer_digits", options.minimum_integer_digits, 1)
    _check_count("minimum_fraction_digits", options.minimum_fraction_digits, 0)


# ---------------------------------------------------------------------------
# Locale resolution
# ---------------------------------------------------------------------------

def resolve_locale(locales: LocaleArg = None) -> Locale:
    """Return the Babel Locale for a tag, a list of tags (first usable wins) or None."""
    if isinstance(locales, Locale):
        return locales
    if locales is None:
        candidates = [default_locale("LC_NUMERIC") or DEFAULT_LOCALE]
    elif isinstance(locales, str):
        candidates = [locales]
    else:
        candidates = list(locales) or [default_locale("LC_NUMERIC") or DEFAULT_LOCALE]

    for tag in candidates:
        try:
            return Locale.parse(str(tag).replace("-", "_"))
        except (UnknownLocaleError, ValueError) as exc:
            _dbg(f"resolve_locale: skip {tag!r} ({exc})")
    raise DecimalRangeError(f"unsupported locale {locales!r}")


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

class HostNumberFormatter:
    """Locale-aware number formatting backed by Babel."""

    def __init__(self, locales: LocaleArg = None, options: Optional[NumberFormatOptions] = None):
        self.options = options if options is not None else NumberFormatOptions()
        check_options(self.options)
        self.locale = resolve_locale(locales)
        self.pattern = self._build_pattern()

    def _build_pattern(self) -> NumberPattern:
        opts = self.options
        if opts.style == "currency":
            base = self.locale.currency_formats[opts.currency_sign]
        else:
            base = self.locale.decimal_formats[None]
        pattern = copy.copy(base)
        n = opts.minimum_fraction_digits
        pattern.frac_prec = (n, n)
        pattern.int_prec = (opts.minimum_integer_digits, max(opts.minimum_integer_digits, base.int_prec[1]))
        if not opts.use_grouping:
            pattern.grouping = _NO_GROUPING
        return pattern

    def _render(self, number: Union[Decimal, float]) -> str:
        opts = self.options
        if opts.style == "currency":
            return format_currency(
                number,
                opts.currency.upper(),
                format=self.pattern,
                locale=self.locale,
                currency_digits=False,
            )
        if opts.style == "unit":
            try:
                return format_unit(
                    number,
                    opts.unit,
                    length=opts.unit_display,
                    format=self.pattern,
                    locale=self.locale,
                )
            except UnknownUnitError as exc:
                raise DecimalRangeError(f"unsupported unit {opts.unit!r}") from exc
        return format_decimal(number, format=self.pattern, locale=self.locale)

    def format(self, value: Union[int, float]) -> str:
        """Format an integer exactly, or a float through Babel's own conversion."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecimalTypeError(f"host formatter expects int or float, got {type(value).__name__}")
        if isinstance(value, int):
            number = Decimal(value)
            digits = number.adjusted() + 1
        else:
            number = value
            digits = 0
        prec = max(DEFAULT_DECIMAL_PRECISION, digits + self.options.minimum_fraction_digits + 2)
        with localcontext() as ctx:
            ctx.prec = prec
            text = self._render(number)
        _dbg(f"host.format: value={value!r}, locale={self.locale}, style={self.options.style} -> {text!r}")
        return text

    def format_to_parts(self, value: Union[int, float]) -> List[NumberPart]:
        """Format `value` and split the result into typed parts."""
        return split_parts(self.format(value), self.options.minimum_fraction_digits)


def split_parts(text: str, fraction_digits: int) -> List[NumberPart]:
    """Split formatted text into literal / integer / group / decimal / fraction parts.

    With `fraction_digits > 0` the last separator of the number is the decimal
    point and the last digit run the fraction; all other separators are groups.
    """
    m = _NUMBER_RUN_RE.search(text)
    if m is None:
        return [NumberPart("literal", text)]

    parts: List[NumberPart] = []
    if m.start() > 0:
        parts.append(NumberPart("literal", text[:m.start()]))

    pieces = _SEPARATOR_RE.split(m.group())
    runs, seps = pieces[0::2], pieces[1::2]
    last = len(runs) - 1
    for i, run in enumerate(runs):
        is_fraction = fraction_digits > 0 and i == last and i > 0
        if i > 0:
            parts.append(NumberPart("decimal" if is_fraction else "group", seps[i - 1]))
        parts.append(NumberPart("fraction" if is_fraction else "integer", run))

    if m.end() < len(text):
        parts.append(NumberPart("literal", text[m.end():]))
    return parts


__all__ = [
    "NumberFormatOptions",
    "NumberPart",
    "HostNumberFormatter",
    "check_options",
    "resolve_locale",
    "split_parts",
]
