"""Per-line discount authorization."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Tuple

from ...models.results import DiscountDecision


def _format_percent(value: Decimal) -> str:
    normalized = value.normalize()
    # normalize() turns 20 into 2E+1
    return f"{normalized:f}"


def authorize(requested_discount: Decimal, max_discount: Decimal) -> DiscountDecision:
    """Check a requested line discount against the actor's ceiling.

    The check is per line; there is no cap on the order's aggregate
    discount ratio.
    """

    requested = Decimal(requested_discount)
    ceiling = Decimal(max_discount)
    if requested > ceiling:
        return DiscountDecision(
            requested=requested,
            ceiling=ceiling,
            approved=False,
            message=f"Discount exceeds your maximum allowed discount of {_format_percent(ceiling)}%",
        )
    return DiscountDecision(requested=requested, ceiling=ceiling, approved=True)


def first_unauthorized(
    discounts: Iterable[Decimal], max_discount: Decimal
) -> Optional[Tuple[int, DiscountDecision]]:
    """Return the index and decision of the first discount over the ceiling."""

    for index, discount in enumerate(discounts):
        decision = authorize(discount, max_discount)
        if not decision.approved:
            return index, decision
    return None
