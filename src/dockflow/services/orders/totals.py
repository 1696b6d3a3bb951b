"""Order total and discount computation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import OrderItem
from ...models.results import OrderTotals, Rejection, TotalsOutcome


def quantize_money(value: Decimal, places: Optional[int] = None) -> Decimal:
    digits = settings.currency_places if places is None else places
    return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def compute_totals(items: Sequence[OrderItem], *, places: Optional[int] = None) -> TotalsOutcome:
    """Sum line gross and line discount amounts across ``items``.

    Lines are accumulated unrounded; the two totals are rounded once to the
    configured currency precision.
    """

    if not items:
        return TotalsOutcome.rejected(Rejection.validation("Order must have at least one item"))

    total_amount = Decimal("0")
    total_discount = Decimal("0")
    for item in items:
        total_amount += item.gross_amount
        total_discount += item.discount_amount

    return TotalsOutcome.accepted(
        OrderTotals(
            total_amount=quantize_money(total_amount, places),
            total_discount=quantize_money(total_discount, places),
        )
    )
