"""Result containers returned by the order and report services.

Rejections are values rather than exceptions so callers can tell apart an
empty report, a malformed request and a discount policy violation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .domain import Order

T = TypeVar("T")


class RejectionKind(str, Enum):
    VALIDATION = "VALIDATION"
    AUTHORIZATION = "AUTHORIZATION"


@dataclass(slots=True)
class Rejection:
    kind: RejectionKind
    reason: str
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def validation(cls, reason: str, **details: Any) -> "Rejection":
        return cls(kind=RejectionKind.VALIDATION, reason=reason, details=details)

    @classmethod
    def authorization(cls, reason: str, **details: Any) -> "Rejection":
        return cls(kind=RejectionKind.AUTHORIZATION, reason=reason, details=details)


@dataclass(slots=True, frozen=True)
class DiscountDecision:
    requested: Decimal
    ceiling: Decimal
    approved: bool
    message: Optional[str] = None


@dataclass(slots=True, frozen=True)
class OrderTotals:
    total_amount: Decimal
    total_discount: Decimal

    @property
    def net_amount(self) -> Decimal:
        return self.total_amount - self.total_discount


@dataclass(slots=True)
class Outcome(Generic[T]):
    """Either a value or a rejection, never both."""

    value: Optional[T] = None
    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @classmethod
    def accepted(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def rejected(cls, rejection: Rejection) -> "Outcome[T]":
        return cls(rejection=rejection)


TotalsOutcome = Outcome[OrderTotals]
OrderCreation = Outcome[Order]
