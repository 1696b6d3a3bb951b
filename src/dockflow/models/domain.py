"""Domain models for orders, customers, docks and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from decimal import Decimal
from enum import Enum
from typing import List, Optional

HUNDRED = Decimal("100")


class OrderStatus(str, Enum):
    """Lifecycle state of an order. Cancellation is a status, not a deletion."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass(slots=True)
class OrderItem:
    """A single order line. Immutable once the order is created."""

    product_id: str
    quantity: int
    unit_price: Decimal
    discount_percent: Decimal = Decimal("0")
    product_name: Optional[str] = None

    @property
    def gross_amount(self) -> Decimal:
        return self.quantity * self.unit_price

    @property
    def discount_amount(self) -> Decimal:
        return self.gross_amount * self.discount_percent / HUNDRED

    @property
    def net_amount(self) -> Decimal:
        return self.gross_amount - self.discount_amount


@dataclass(slots=True)
class Order:
    """An order with its line items and the totals derived at creation."""

    id: str
    order_number: str
    customer_id: str
    company_id: str
    status: OrderStatus
    total_amount: Decimal
    total_discount: Decimal
    created_at: datetime
    items: List[OrderItem] = field(default_factory=list)
    scheduled_date: Optional[datetime] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    dock_id: Optional[str] = None
    user_id: Optional[str] = None
    notes: Optional[str] = None
    customer_name: Optional[str] = None

    @property
    def net_amount(self) -> Decimal:
        return self.total_amount - self.total_discount

    @property
    def is_cancelled(self) -> bool:
        return self.status is OrderStatus.CANCELLED


@dataclass(slots=True)
class Customer:
    """Represents a customer account and the orders attached to it."""

    id: str
    company_id: str
    name: str
    is_fidelized: bool = False
    quota_minutes: int = 0
    auto_reserve: bool = False
    preferred_days: List[str] = field(default_factory=list)
    preferred_time: Optional[str] = None
    active: bool = True
    orders: List[Order] = field(default_factory=list)


@dataclass(slots=True)
class DockMaintenance:
    """Blackout interval during which a dock cannot be used."""

    start_date: datetime
    end_date: datetime
    reason: Optional[str] = None


@dataclass(slots=True)
class DockSchedule:
    """Recurring weekly availability window (0 = Monday)."""

    day_of_week: int
    start_time: time
    end_time: time


@dataclass(slots=True)
class Dock:
    """A loading bay with its schedules, maintenance windows and orders."""

    id: str
    company_id: str
    name: str
    active: bool = True
    schedules: List[DockSchedule] = field(default_factory=list)
    maintenances: List[DockMaintenance] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)


@dataclass(slots=True)
class User:
    id: str
    company_id: str
    max_discount: Decimal
    name: Optional[str] = None
