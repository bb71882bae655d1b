"""Forward and reverse GST arithmetic.

``GSTCalculator`` is stateless apart from its rate table, which is validated
once on construction and never mutated. Every operation is a pure function of
its arguments: inputs are checked up front, the closed-form formula is applied
in plain float arithmetic, and rounding is left to :func:`format_currency`.
Violations raise :class:`~gstcalc.backend.app.errors.InvalidType` or
:class:`~gstcalc.backend.app.errors.OutOfRange` without logging.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from gstcalc.backend.app.errors import InvalidArgument, OutOfRange
from gstcalc.backend.app.models import (
    ForwardFormatted,
    ForwardResult,
    ReverseFormatted,
    ReverseResult,
)
from gstcalc.backend.config.rate_config import RateTable, build_rate_table, load_rate_table

from .formatting import format_currency as _format_currency
from .utils import ensure_non_negative, ensure_rate


class GSTCalculator:
    """Compute GST on top of, or out of, Indian Rupee amounts."""

    def __init__(self, rates: Mapping[str, Any] | RateTable | None = None) -> None:
        if rates is None:
            self._table = load_rate_table()
        elif isinstance(rates, RateTable):
            self._table = rates
        else:
            self._table = build_rate_table(rates)

    def calculate_forward(self, base_price: Any, gst_rate: Any) -> ForwardResult:
        """Add ``gst_rate`` percent of tax on top of ``base_price``."""

        base = ensure_non_negative(base_price, "basePrice")
        rate = ensure_rate(gst_rate)

        gst_amount = base * (rate / 100)
        total_price = base + gst_amount
        if not math.isfinite(total_price):
            raise OutOfRange("basePrice", "is too large to compute a finite total")

        return ForwardResult(
            base_price=base,
            gst_rate=rate,
            gst_amount=gst_amount,
            total_price=total_price,
            formatted=ForwardFormatted(
                gst_amount=self.format_currency(gst_amount),
                total_price=self.format_currency(total_price),
            ),
        )

    def calculate_reverse(self, total_price: Any, gst_rate: Any) -> ReverseResult:
        """Split a tax-inclusive ``total_price`` into base price and GST."""

        total = ensure_non_negative(total_price, "totalPrice")
        rate = ensure_rate(gst_rate)

        # The divisor is at least 1, so a zero rate returns the total unchanged.
        base_price = total / (1 + rate / 100)
        gst_amount = total - base_price

        return ReverseResult(
            total_price=total,
            gst_rate=rate,
            base_price=base_price,
            gst_amount=gst_amount,
            formatted=ReverseFormatted(
                base_price=self.format_currency(base_price),
                gst_amount=self.format_currency(gst_amount),
            ),
        )

    def format_currency(self, amount: Any) -> str:
        return _format_currency(amount)

    def get_gst_rates(self) -> dict[str, float]:
        """Return a copy of the rate table keyed by category name."""

        return self._table.as_dict()

    def rate_for(self, category: Any) -> float:
        """Resolve a category name such as ``"standard"`` to its percentage."""

        if not isinstance(category, str):
            raise InvalidArgument("category", "must be a category name")
        try:
            return self._table.get_rate(category)
        except KeyError:
            known = ", ".join(self._table.categories)
            raise InvalidArgument(
                "category", f"must be one of: {known}"
            ) from None


@lru_cache(maxsize=1)
def get_default_calculator() -> GSTCalculator:
    """Return the shared calculator backed by the configured rate table."""

    return GSTCalculator()


def calculate_forward(base_price: Any, gst_rate: Any) -> ForwardResult:
    return get_default_calculator().calculate_forward(base_price, gst_rate)


def calculate_reverse(total_price: Any, gst_rate: Any) -> ReverseResult:
    return get_default_calculator().calculate_reverse(total_price, gst_rate)


def get_gst_rates() -> dict[str, float]:
    return get_default_calculator().get_gst_rates()


__all__ = [
    "GSTCalculator",
    "calculate_forward",
    "calculate_reverse",
    "get_default_calculator",
    "get_gst_rates",
]
