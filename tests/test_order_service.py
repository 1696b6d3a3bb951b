import random
import re
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from dockflow.models.domain import OrderStatus, User
from dockflow.models.results import RejectionKind
from dockflow.services.orders import OrderNumberGenerator, create_order
from dockflow.services.orders import service as order_service

NOW = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)


def _user(max_discount: str = "20") -> User:
    return User(id="U1", company_id="CO1", max_discount=Decimal(max_discount), name="Operator")


def _payload(*items: dict, **extra) -> dict:
    payload = {"customerId": "C1", "items": list(items)}
    payload.update(extra)
    return payload


def _line(product_id: str, quantity: int, price, discount=0) -> dict:
    return {"productId": product_id, "quantity": quantity, "unitPrice": price, "discountPercent": discount}


def test_create_order_computes_totals_and_builds_pending_order():
    numbers = OrderNumberGenerator(strategy="sequence")
    outcome = create_order(
        _payload(_line("P1", 2, 100, 10), _line("P2", 1, 50), dockId="D1", notes="Fragile"),
        _user("20"),
        numbers=numbers,
        now=NOW,
    )

    assert outcome.ok
    order = outcome.value
    assert order.status is OrderStatus.PENDING
    assert order.company_id == "CO1"
    assert order.user_id == "U1"
    assert order.dock_id == "D1"
    assert order.total_amount == Decimal("250")
    assert order.total_discount == Decimal("20")
    assert order.net_amount == Decimal("230")
    assert [item.product_id for item in order.items] == ["P1", "P2"]
    assert order.order_number == "ORD-20240305-1000"


def test_create_order_rejects_discount_above_ceiling():
    outcome = create_order(
        _payload(_line("P1", 1, 10, 5), _line("P2", 1, 10, 25)),
        _user("20"),
        now=NOW,
    )

    assert not outcome.ok
    assert outcome.value is None
    rejection = outcome.rejection
    assert rejection.kind is RejectionKind.AUTHORIZATION
    assert rejection.reason == "Discount exceeds your maximum allowed discount of 20%"
    assert rejection.details["item_index"] == 1
    assert rejection.details["product_id"] == "P2"
    assert rejection.details["requested_discount"] == Decimal("25")
    assert rejection.details["max_discount"] == Decimal("20")


def test_create_order_allows_many_items_each_under_ceiling():
    lines = [_line(f"P{i}", 1, 10, 20) for i in range(10)]

    outcome = create_order(_payload(*lines), _user("20"), now=NOW)

    assert outcome.ok
    assert outcome.value.total_discount == Decimal("20")


def test_create_order_rejects_empty_items_as_validation_failure():
    outcome = create_order(_payload(), _user(), now=NOW)

    assert not outcome.ok
    assert outcome.rejection.kind is RejectionKind.VALIDATION
    assert "at least one item" in outcome.rejection.reason


@pytest.mark.parametrize(
    "line",
    [
        _line("P1", 1, 10, 101),
        _line("P1", 1, 10, -1),
        _line("P1", 1, 10, "ten"),
        _line("P1", 0, 10),
        _line("P1", 1, -5),
    ],
)
def test_create_order_rejects_malformed_lines(line):
    outcome = create_order(_payload(line), _user("100"), now=NOW)

    assert not outcome.ok
    assert outcome.rejection.kind is RejectionKind.VALIDATION
    assert outcome.rejection.details["errors"]


def test_create_order_uses_default_generator(monkeypatch):
    monkeypatch.setattr(
        order_service,
        "_default_numbers",
        OrderNumberGenerator(prefix="ORD", strategy="random", rng=random.Random(7)),
    )

    outcome = create_order(_payload(_line("P1", 1, 10)), _user(), now=NOW)

    assert re.fullmatch(r"ORD-20240305-\d{4}", outcome.value.order_number)


def test_random_order_numbers_stay_in_suffix_range():
    generator = OrderNumberGenerator(prefix="ORD", strategy="random", rng=random.Random(1))

    suffixes = {int(generator.next(NOW).rsplit("-", 1)[1]) for _ in range(500)}

    assert min(suffixes) >= 1000
    assert max(suffixes) <= 9999


def test_sequence_order_numbers_restart_each_day():
    generator = OrderNumberGenerator(prefix="ORD", strategy="sequence")

    first = generator.next(NOW)
    second = generator.next(NOW)
    next_day = generator.next(datetime(2024, 3, 6, 0, 5, tzinfo=timezone.utc))

    assert (first, second) == ("ORD-20240305-1000", "ORD-20240305-1001")
    assert next_day == "ORD-20240306-1000"


def test_sequence_order_numbers_survive_interleaved_days():
    generator = OrderNumberGenerator(prefix="ORD", strategy="sequence")
    next_day = datetime(2024, 3, 6, 9, tzinfo=timezone.utc)

    labels = [generator.next(NOW), generator.next(next_day), generator.next(NOW), generator.next(next_day)]

    assert len(set(labels)) == 4
    assert labels[2] == "ORD-20240305-1001"
    assert labels[3] == "ORD-20240306-1001"


def test_order_number_uses_utc_date():
    generator = OrderNumberGenerator(prefix="ORD", strategy="sequence")
    late_evening = datetime.fromisoformat("2024-03-05T23:30:00-05:00")

    assert generator.next(late_evening) == "ORD-20240306-1000"
