"""Helpers for turning raw records from the CRUD layer into domain models.

Records arrive as JSON-like mappings with camelCase keys (``totalAmount``,
``createdAt``, nested ``items``/``orders``/``maintenances``).
"""

from __future__ import annotations

from datetime import datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional

from ..models.domain import (
    Customer,
    Dock,
    DockMaintenance,
    DockSchedule,
    Order,
    OrderItem,
    OrderStatus,
    User,
)

_DAY_NAMES = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return None


def _coerce_decimal(value: Any, field: str, default: Optional[Decimal] = None) -> Decimal:
    if value is None or value == "":
        if default is None:
            raise ValueError(f"Missing numeric value for '{field}'")
        return default
    if isinstance(value, bool):
        raise ValueError(f"Unable to parse decimal for '{field}' from value '{value}'")
    text = value.replace(",", "").strip() if isinstance(value, str) else str(value)
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"Unable to parse decimal for '{field}' from value '{value}'") from exc


def _coerce_int(value: Any, field: str, default: Optional[int] = None) -> int:
    if value is None or value == "":
        if default is None:
            raise ValueError(f"Missing integer value for '{field}'")
        return default
    if isinstance(value, bool):
        raise ValueError(f"Unable to parse integer for '{field}' from value '{value}'")
    # int() would truncate 2.7 to 2
    fractional = (isinstance(value, float) and not value.is_integer()) or (
        isinstance(value, Decimal) and (not value.is_finite() or value != value.to_integral_value())
    )
    if fractional:
        raise ValueError(f"Expected a whole number for '{field}', got '{value}'")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Unable to parse integer for '{field}' from value '{value}'") from exc


def parse_timestamp(value: Any, field: str = "timestamp") -> Optional[datetime]:
    """Parse ISO-8601 strings (``Z`` suffix allowed); pass datetimes through."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"Unable to parse timestamp for '{field}' from value '{value}'") from exc
    raise ValueError(f"Unable to parse timestamp for '{field}' from value '{value}'")


def _require_timestamp(value: Any, field: str) -> datetime:
    parsed = parse_timestamp(value, field)
    if parsed is None:
        raise ValueError(f"Missing timestamp for '{field}'")
    return parsed


def _parse_time_of_day(value: Any, field: str) -> time:
    if isinstance(value, time):
        return value
    try:
        return time.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Unable to parse time of day for '{field}' from value '{value}'") from exc


def _parse_day_of_week(value: Any) -> int:
    if isinstance(value, str) and not value.strip().isdigit():
        name = value.strip().upper()
        for index, day_name in enumerate(_DAY_NAMES):
            if day_name.startswith(name[:3]):
                return index
        raise ValueError(f"Unknown day of week '{value}'")
    day = _coerce_int(value, "dayOfWeek")
    if not 0 <= day <= 6:
        raise ValueError(f"Day of week out of range: {day}")
    return day


def _nested_name(record: Mapping[str, Any], key: str) -> Optional[str]:
    nested = record.get(key)
    if isinstance(nested, Mapping):
        name = nested.get("name")
        return str(name) if name is not None else None
    return None


def _nested_id(record: Mapping[str, Any], key: str) -> Optional[str]:
    nested = record.get(key)
    if isinstance(nested, Mapping) and nested.get("id") is not None:
        return str(nested["id"])
    return None


def parse_order_item(record: Mapping[str, Any]) -> OrderItem:
    product_id = _first(record, "productId", "product_id") or _nested_id(record, "product")
    if not product_id:
        raise ValueError("Order item is missing 'productId'")
    return OrderItem(
        product_id=str(product_id),
        quantity=_coerce_int(record.get("quantity"), "quantity"),
        unit_price=_coerce_decimal(_first(record, "unitPrice", "unit_price"), "unitPrice"),
        discount_percent=_coerce_decimal(
            _first(record, "discountPercent", "discount"), "discountPercent", default=Decimal("0")
        ),
        product_name=_first(record, "productName") or _nested_name(record, "product"),
    )


def parse_order(record: Mapping[str, Any]) -> Order:
    status_value = str(record.get("status") or OrderStatus.PENDING.value).upper()
    try:
        status = OrderStatus(status_value)
    except ValueError as exc:
        raise ValueError(f"Unknown order status '{record.get('status')}'") from exc

    customer_id = _first(record, "customerId", "customer_id") or _nested_id(record, "customer")
    return Order(
        id=str(record["id"]),
        order_number=str(_first(record, "orderNumber", "order_number") or ""),
        customer_id=str(customer_id or ""),
        company_id=str(_first(record, "companyId", "company_id") or ""),
        status=status,
        total_amount=_coerce_decimal(_first(record, "totalAmount"), "totalAmount", default=Decimal("0")),
        total_discount=_coerce_decimal(_first(record, "totalDiscount"), "totalDiscount", default=Decimal("0")),
        created_at=_require_timestamp(_first(record, "createdAt", "created_at"), "createdAt"),
        items=[parse_order_item(item) for item in record.get("items") or []],
        scheduled_date=parse_timestamp(record.get("scheduledDate"), "scheduledDate"),
        start_time=parse_timestamp(record.get("startTime"), "startTime"),
        end_time=parse_timestamp(record.get("endTime"), "endTime"),
        dock_id=record.get("dockId"),
        user_id=record.get("userId"),
        notes=record.get("notes"),
        customer_name=_first(record, "customerName") or _nested_name(record, "customer"),
    )


def parse_customer(record: Mapping[str, Any]) -> Customer:
    preferred_days = record.get("preferredDays") or []
    if isinstance(preferred_days, str):
        preferred_days = [day.strip() for day in preferred_days.split(",") if day.strip()]
    return Customer(
        id=str(record["id"]),
        company_id=str(_first(record, "companyId", "company_id") or ""),
        name=str(record.get("name") or ""),
        is_fidelized=bool(record.get("isFidelized", False)),
        quota_minutes=_coerce_int(record.get("quotaMinutes"), "quotaMinutes", default=0),
        auto_reserve=bool(record.get("autoReserve", False)),
        preferred_days=list(preferred_days),
        preferred_time=record.get("preferredTime"),
        active=bool(record.get("active", True)),
        orders=[parse_order(order) for order in record.get("orders") or []],
    )


def parse_dock(record: Mapping[str, Any]) -> Dock:
    maintenances = [
        DockMaintenance(
            start_date=_require_timestamp(item.get("startDate"), "startDate"),
            end_date=_require_timestamp(item.get("endDate"), "endDate"),
            reason=item.get("reason"),
        )
        for item in record.get("maintenances") or []
    ]
    schedules = [
        DockSchedule(
            day_of_week=_parse_day_of_week(item.get("dayOfWeek")),
            start_time=_parse_time_of_day(item.get("startTime"), "startTime"),
            end_time=_parse_time_of_day(item.get("endTime"), "endTime"),
        )
        for item in record.get("schedules") or []
    ]
    return Dock(
        id=str(record["id"]),
        company_id=str(_first(record, "companyId", "company_id") or ""),
        name=str(record.get("name") or ""),
        active=bool(record.get("active", True)),
        schedules=schedules,
        maintenances=maintenances,
        orders=[parse_order(order) for order in record.get("orders") or []],
    )


def parse_user(record: Mapping[str, Any]) -> User:
    return User(
        id=str(record["id"]),
        company_id=str(_first(record, "companyId", "company_id") or ""),
        max_discount=_coerce_decimal(record.get("maxDiscount"), "maxDiscount", default=Decimal("0")),
        name=record.get("name"),
    )


def load_orders(records: Iterable[Mapping[str, Any]]) -> tuple[Order, ...]:
    return tuple(parse_order(record) for record in records)


def load_customers(records: Iterable[Mapping[str, Any]]) -> tuple[Customer, ...]:
    return tuple(parse_customer(record) for record in records)


def load_docks(records: Iterable[Mapping[str, Any]]) -> tuple[Dock, ...]:
    return tuple(parse_dock(record) for record in records)
