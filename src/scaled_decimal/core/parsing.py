"""
Numeric string grammar.

    [+-]? ( digits | digits? "." digits ) ( [eE] [+-]? digits )?

Surrounding whitespace is ignored. A match yields the integer coefficient
(all digits with the point removed) and the exponent
`suffix_exponent - len(fraction_digits)`. Digit runs are converted through
Decimal, so inputs longer than the int/str conversion limit still parse.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Tuple

_NUMBER_RE = re.compile(
    r"([+-]?)([0-9]+|[0-9]*\.([0-9]+))(?:e([+-]?[0-9]+))?",
    re.IGNORECASE,
)


def parse_parts(text: str) -> Optional[Tuple[int, int]]:
    """Return `(coef, exp)` for `text`, or None when it does not match the grammar."""
    m = _NUMBER_RE.fullmatch(text.strip())
    if m is None:
        return None
    sign, body, frac, suffix = m.groups()
    coef = int(Decimal(body.replace(".", "")))
    if sign == "-":
        coef = -coef
    exp = (int(Decimal(suffix)) if suffix is not None else 0) - (len(frac) if frac is not None else 0)
    return coef, exp


__all__ = ["parse_parts"]
