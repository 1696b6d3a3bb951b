"""Sales rollups by product, customer and calendar day."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, Optional

from ...models.domain import Order
from ...schemas.reports import (
    CustomerSalesModel,
    DailySalesModel,
    ProductSalesModel,
    SalesReport,
    SalesSummaryModel,
)
from .intervals import as_utc

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(slots=True)
class _ProductTotals:
    product_name: Optional[str]
    quantity: int = 0
    revenue: Decimal = ZERO


@dataclass(slots=True)
class _CustomerTotals:
    customer_name: Optional[str]
    order_count: int = 0
    revenue: Decimal = ZERO


@dataclass(slots=True)
class _DayTotals:
    order_count: int = 0
    revenue: Decimal = ZERO


def _sales_day(moment: datetime) -> date:
    return as_utc(moment).date()


def _group_by_product(orders: Iterable[Order]) -> Dict[str, _ProductTotals]:
    groups: Dict[str, _ProductTotals] = {}
    for order in orders:
        for item in order.items:
            bucket = groups.get(item.product_id)
            if bucket is None:
                bucket = groups[item.product_id] = _ProductTotals(product_name=item.product_name)
            bucket.quantity += item.quantity
            bucket.revenue += item.net_amount
    return groups


def _group_by_customer(orders: Iterable[Order]) -> Dict[str, _CustomerTotals]:
    groups: Dict[str, _CustomerTotals] = {}
    for order in orders:
        bucket = groups.get(order.customer_id)
        if bucket is None:
            bucket = groups[order.customer_id] = _CustomerTotals(customer_name=order.customer_name)
        bucket.order_count += 1
        bucket.revenue += order.net_amount
    return groups


def _group_by_day(orders: Iterable[Order]) -> Dict[date, _DayTotals]:
    groups: Dict[date, _DayTotals] = {}
    for order in orders:
        bucket = groups.setdefault(_sales_day(order.created_at), _DayTotals())
        bucket.order_count += 1
        bucket.revenue += order.net_amount
    return groups


def aggregate_sales(
    orders: Iterable[Order],
    window_start: datetime,
    window_end: datetime,
) -> SalesReport:
    """Roll up non-cancelled orders of one company over a window.

    ``orders`` must already be filtered to the company, the creation window
    and non-cancelled statuses. Product revenue is computed per item net of
    its discount; customer and day revenue use the order-level net so that
    both partitions sum to ``netSales`` exactly.
    """

    orders = list(orders)
    total_sales = sum((order.total_amount for order in orders), ZERO)
    total_discounts = sum((order.total_discount for order in orders), ZERO)
    net_sales = total_sales - total_discounts
    order_count = len(orders)
    average = net_sales / order_count if order_count else ZERO

    by_product = [
        ProductSalesModel(
            productId=product_id,
            productName=totals.product_name,
            quantity=totals.quantity,
            revenue=totals.revenue,
        )
        for product_id, totals in _group_by_product(orders).items()
    ]
    by_customer = [
        CustomerSalesModel(
            customerId=customer_id,
            customerName=totals.customer_name,
            orderCount=totals.order_count,
            revenue=totals.revenue,
        )
        for customer_id, totals in _group_by_customer(orders).items()
    ]
    by_day = [
        DailySalesModel(date=day, orderCount=totals.order_count, revenue=totals.revenue)
        for day, totals in _group_by_day(orders).items()
    ]

    logger.debug(
        "Sales rollup: %d orders, %d products, %d customers, %d days",
        order_count,
        len(by_product),
        len(by_customer),
        len(by_day),
    )
    return SalesReport(
        windowStart=window_start,
        windowEnd=window_end,
        summary=SalesSummaryModel(
            totalSales=total_sales,
            totalDiscounts=total_discounts,
            netSales=net_sales,
            orderCount=order_count,
            averageOrderValue=average,
        ),
        byProduct=by_product,
        byCustomer=by_customer,
        byDay=by_day,
    )
