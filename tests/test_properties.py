"""
Property-based tests using Hypothesis.

These tests generate random orders, discounts and intervals to check:
- Order totals equal the sum of discounted lines
- Discount authorization is monotone in the ceiling
- Interval overlap is bounded by the window and the interval
- Sales partitions conserve net sales
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from hypothesis import given, settings, strategies as st

from dockflow.models.domain import Order, OrderItem, OrderStatus
from dockflow.services.analytics import aggregate_sales, overlap_hours
from dockflow.services.orders import authorize, compute_totals

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)

percents = st.integers(min_value=0, max_value=100).map(Decimal)
prices = st.integers(min_value=0, max_value=1_000_000).map(lambda cents: Decimal(cents) / 100)


@st.composite
def item_strategy(draw):
    return OrderItem(
        product_id=draw(st.sampled_from(["P1", "P2", "P3", "P4"])),
        quantity=draw(st.integers(min_value=1, max_value=500)),
        unit_price=draw(prices),
        discount_percent=draw(percents),
    )


@st.composite
def order_strategy(draw):
    items = draw(st.lists(item_strategy(), min_size=1, max_size=6))
    created_at = BASE + timedelta(minutes=draw(st.integers(min_value=0, max_value=60 * 24 * 30)))
    totals = compute_totals(items, places=4).value
    return Order(
        id=draw(st.uuids()).hex,
        order_number="ORD-20240101-1000",
        customer_id=draw(st.sampled_from(["C1", "C2", "C3"])),
        company_id="CO1",
        status=OrderStatus.COMPLETED,
        total_amount=totals.total_amount,
        total_discount=totals.total_discount,
        created_at=created_at,
        items=items,
    )


moments = st.integers(min_value=-500, max_value=500).map(lambda hours: BASE + timedelta(hours=hours))


@given(st.lists(item_strategy(), min_size=1, max_size=20))
@settings(max_examples=100)
def test_totals_net_equals_sum_of_discounted_lines(items):
    """Property: total - discount equals sum of qty * price * (1 - d/100)."""
    # cents * integer percent fits in four decimal places, so no rounding happens
    totals = compute_totals(items, places=4).value

    expected = sum(
        (item.quantity * item.unit_price * (1 - item.discount_percent / 100) for item in items),
        Decimal("0"),
    )
    assert totals.net_amount == expected


@given(percents, percents, percents)
def test_authorization_is_monotone_in_ceiling(requested, ceiling, other):
    """Property: accepted stays accepted for higher ceilings, rejected stays rejected for lower."""
    decision = authorize(requested, ceiling)
    if decision.approved and other >= ceiling:
        assert authorize(requested, other).approved
    if not decision.approved and other < ceiling:
        assert not authorize(requested, other).approved


@given(moments, moments, moments, moments)
def test_overlap_is_bounded(start, end, window_start, window_end):
    """Property: overlap never exceeds either interval and is never negative."""
    hours = overlap_hours(start, end, window_start, window_end)

    assert hours >= 0
    assert hours <= max(0.0, (window_end - window_start).total_seconds() / 3600)
    assert hours <= max(0.0, (end - start).total_seconds() / 3600)


@given(st.lists(order_strategy(), max_size=25))
@settings(max_examples=100)
def test_sales_partitions_conserve_net_sales(orders):
    """Property: byDay and byCustomer revenue each sum to netSales."""
    report = aggregate_sales(orders, BASE, BASE + timedelta(days=31))
    net = report.summary.netSales

    assert sum((entry.revenue for entry in report.byDay), Decimal("0")) == net
    assert sum((entry.revenue for entry in report.byCustomer), Decimal("0")) == net
    assert sum(entry.orderCount for entry in report.byDay) == len(orders)
    if not orders:
        assert report.summary.averageOrderValue == 0
