"""Display formatting for projection amounts.

Kept apart from the engine: the engine returns raw floats and everything
currency- or locale-shaped lives here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Literal

Grouping = Literal["indian", "western"]

NOT_AVAILABLE = "—"


class UnknownCurrencyError(ValueError):
    def __init__(self, code: str):
        super().__init__(f"unsupported currency {code!r}; expected one of {sorted(CURRENCY_FORMATS)}")
        self.code = code


@dataclass(frozen=True)
class CurrencyFormat:
    code: str
    symbol: str
    grouping: Grouping = "western"
    fraction_digits: int = 0


CURRENCY_FORMATS: Dict[str, CurrencyFormat] = {
    "INR": CurrencyFormat(code="INR", symbol="₹", grouping="indian", fraction_digits=0),
    "USD": CurrencyFormat(code="USD", symbol="$", grouping="western", fraction_digits=0),
}


def get_currency_format(code: str) -> CurrencyFormat:
    try:
        return CURRENCY_FORMATS[code.upper()]
    except KeyError:
        raise UnknownCurrencyError(code) from None


def _group_digits(digits: str, grouping: Grouping) -> str:
    if grouping == "western" or len(digits) <= 3:
        return f"{int(digits):,}"

    # Indian: last three digits, then pairs (12,34,567)
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_number(amount: float, grouping: Grouping = "western", fraction_digits: int = 0) -> str:
    """Round half-up and group the integer part; no currency symbol."""
    if not math.isfinite(amount):
        return NOT_AVAILABLE

    quantum = Decimal(1).scaleb(-fraction_digits)
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, value.adjusted() + fraction_digits + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""

    whole, _, fraction = f"{rounded.copy_abs():f}".partition(".")
    text = _group_digits(whole, grouping)
    if fraction_digits > 0:
        text = f"{text}.{fraction}"
    return f"{sign}{text}"


def format_currency(amount: float, fmt: CurrencyFormat) -> str:
    """Render ``amount`` like ``₹12,34,568`` / ``-$1,235``."""
    number = format_number(amount, fmt.grouping, fmt.fraction_digits)
    if number == NOT_AVAILABLE:
        return number
    if number.startswith("-"):
        return f"-{fmt.symbol}{number[1:]}"
    return f"{fmt.symbol}{number}"


def format_percentage(value: float, digits: int = 2) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{digits}f}%"
