"""
Locale-decorated rendering with exact digits.

Babel decorates (signs, symbols, grouping, currency/unit patterns, plural
forms) but a value handed to it as a float loses digits beyond double
precision. The decimal is therefore split into its integer and fraction
coefficients; a small float template carrying the same sign and a condensed
copy of both parts is formatted to parts, and its digit runs are replaced by
the exact digits of the two coefficients.

    -1234567890123456789.0123 (en_US, USD)
      template  -3456789.123  -> ['-$', '3456789', '.', '123']
      integer   1234567890123456789 -> '1,234,567,890,123,456,789'
      fraction  0123 (4 digits)     -> '0123'
      result    '-$1,234,567,890,123,456,789.0123'
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .constants import (
    TEMPLATE_FRAC_BUMP,
    TEMPLATE_FRAC_DIGITS,
    TEMPLATE_FRAC_MODULUS,
    TEMPLATE_INT_BUMP,
    TEMPLATE_INT_MODULUS,
)
from .host import HostNumberFormatter, LocaleArg, NumberFormatOptions, NumberPart, check_options
from .scaling import scale_coef_exact

# Debug printing control (locale formatting layer)
DEBUG_LOCALE = False

def _dbg(msg: str) -> None:
    if DEBUG_LOCALE:
        print(msg)


def _template_value(neg: bool, ui: int, uf: int, width: int) -> float:
    """Condense |integer| and |fraction| into a float the host can hold exactly.

    The low-order digits are kept; a fragment that would shrink to fewer
    digits than the real part has is bumped so the template stays in the same
    plural/grouping bucket.
    """
    con_i = ui % TEMPLATE_INT_MODULUS
    if con_i < TEMPLATE_INT_BUMP and ui >= TEMPLATE_INT_MODULUS:
        con_i += TEMPLATE_INT_BUMP
    con_f = uf % TEMPLATE_FRAC_MODULUS
    if con_f < TEMPLATE_FRAC_BUMP and uf >= TEMPLATE_FRAC_MODULUS:
        con_f += TEMPLATE_FRAC_BUMP
    return float(f"{'-' if neg else ''}{con_i}.{con_f:0{width}d}")


def _joined(parts: List[NumberPart], *types: str) -> str:
    return "".join(p.value for p in parts if p.type in types)


def stringify_locale(
    coef: int,
    exp: int,
    locales: LocaleArg = None,
    options: Optional[NumberFormatOptions] = None,
) -> str:
    """Locale-aware rendering of coef * 10^exp without digit loss."""
    opts = options if options is not None else NumberFormatOptions()
    check_options(opts)

    digits = max(opts.minimum_fraction_digits, -min(0, exp))
    if coef != 0 and exp < 0 and -exp < digits:
        coef = scale_coef_exact(coef, exp, -digits)
        exp = -digits
    opts = replace(opts, minimum_fraction_digits=digits)

    # Plain integers: the host formats arbitrary-precision ints exactly.
    if coef == 0 or exp >= 0:
        return HostNumberFormatter(locales, opts).format(scale_coef_exact(coef, exp, 0))

    neg = coef < 0
    ui, uf = divmod(abs(coef), 10 ** -exp)
    width = min(TEMPLATE_FRAC_DIGITS, -exp)
    num = _template_value(neg, ui, uf, width)
    _dbg(f"stringify_locale: coef={coef}, exp={exp}, template={num!r}")

    template = HostNumberFormatter(
        locales,
        replace(opts, minimum_fraction_digits=width, use_grouping=False),
    ).format_to_parts(num)

    int_parts = HostNumberFormatter(
        locales,
        replace(opts, style="decimal", minimum_fraction_digits=0),
    ).format_to_parts(ui)
    buffer_i = _joined(int_parts, "integer", "group")

    frac_parts = HostNumberFormatter(
        locales,
        replace(
            opts,
            style="decimal",
            minimum_integer_digits=-exp,
            minimum_fraction_digits=0,
            use_grouping=False,
        ),
    ).format_to_parts(uf)
    buffer_f = _joined(frac_parts, "integer")
    _dbg(f"stringify_locale: template={template}, integer={buffer_i!r}, fraction={buffer_f!r}")

    out = []
    for part in template:
        if part.type == "integer":
            out.append(buffer_i)
        elif part.type == "fraction":
            out.append(buffer_f)
        else:
            out.append(part.value)
    return "".join(out)


__all__ = ["stringify_locale"]
