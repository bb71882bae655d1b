"""Indian Rupee currency formatting.

Amounts are rendered with the rupee symbol, two fraction digits and the Indian
digit grouping: the last three integer digits form one group and every group
before it holds two digits (``12,34,567.50``). Rounding happens here and only
here, half away from zero at the second decimal.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Final

from .utils import ensure_real

CURRENCY_CODE: Final = "INR"
CURRENCY_SYMBOL: Final = "₹"
_CENTS = Decimal("0.01")
# Wide enough to quantise any finite float to cents.
_CONTEXT = Context(prec=400)


def group_indian_digits(digits: str) -> str:
    """Insert lakh/crore separators into a string of integer digits."""

    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def format_currency(amount: Any) -> str:
    """Render ``amount`` as INR text, e.g. ``₹1,180.00``."""

    number = ensure_real(amount, "amount")

    # ``str`` gives the shortest repr so 1.005 rounds as written, not as stored.
    quantised = Decimal(str(number)).quantize(
        _CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    sign = "-" if quantised < 0 else ""
    whole, _, fraction = f"{quantised.copy_abs():f}".partition(".")

    return f"{sign}{CURRENCY_SYMBOL}{group_indian_digits(whole)}.{fraction:0<2}"


__all__ = ["CURRENCY_CODE", "CURRENCY_SYMBOL", "format_currency", "group_indian_digits"]
