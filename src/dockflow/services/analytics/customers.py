"""Customer activity rollups."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List

from ...models.domain import Customer
from ...schemas.reports import CustomerActivityModel

ZERO = Decimal("0")


def summarize_customer(customer: Customer) -> CustomerActivityModel:
    # Cancelled orders count here, unlike the sales report.
    total_orders = len(customer.orders)
    total_spent = sum((order.net_amount for order in customer.orders), ZERO)
    total_items = sum(item.quantity for order in customer.orders for item in order.items)
    return CustomerActivityModel(
        customerId=customer.id,
        customerName=customer.name,
        isFidelized=customer.is_fidelized,
        quotaMinutes=customer.quota_minutes,
        totalOrders=total_orders,
        totalSpent=total_spent,
        totalItems=total_items,
        averageOrderValue=total_spent / total_orders if total_orders else ZERO,
    )


def aggregate_customer_activity(
    customers: Iterable[Customer],
    window_start: datetime,
    window_end: datetime,
) -> List[CustomerActivityModel]:
    """Summarize each customer's orders created inside the window.

    The window bounds are not re-applied; ``customer.orders`` must already be
    limited to it.
    """

    return [summarize_customer(customer) for customer in customers]
