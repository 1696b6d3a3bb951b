"""Order creation: validation, discount authorization and totals."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ...models.domain import Order, OrderItem, OrderStatus, User
from ...models.results import OrderCreation, Rejection
from ...schemas.orders import OrderRequest
from .discounts import first_unauthorized
from .numbering import OrderNumberGenerator
from .totals import compute_totals

logger = logging.getLogger(__name__)

_default_numbers: Optional[OrderNumberGenerator] = None


def _number_generator() -> OrderNumberGenerator:
    global _default_numbers
    if _default_numbers is None:
        _default_numbers = OrderNumberGenerator()
    return _default_numbers


def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = str(error.get("msg", "invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def create_order(
    payload: Union[OrderRequest, Mapping[str, Any]],
    actor: User,
    *,
    numbers: Optional[OrderNumberGenerator] = None,
    now: Optional[datetime] = None,
) -> OrderCreation:
    """Build a ``PENDING`` order from a creation request.

    Every item is checked against ``actor.max_discount``; one offending
    item rejects the whole order. Totals are computed from exactly the
    validated items that end up on the returned order.
    """

    if isinstance(payload, OrderRequest):
        request = payload
    else:
        try:
            request = OrderRequest.model_validate(payload)
        except ValidationError as exc:
            reason = _describe_validation_error(exc)
            logger.warning("Rejected order request: %s", reason)
            return OrderCreation.rejected(Rejection.validation(reason, errors=exc.errors(include_url=False)))

    offending = first_unauthorized((item.discount_percent for item in request.items), actor.max_discount)
    if offending is not None:
        index, decision = offending
        logger.warning(
            "User %s requested %s%% discount on item %d (ceiling %s%%)",
            actor.id,
            decision.requested,
            index,
            decision.ceiling,
        )
        return OrderCreation.rejected(
            Rejection.authorization(
                decision.message or "Discount not authorized",
                item_index=index,
                product_id=request.items[index].product_id,
                requested_discount=decision.requested,
                max_discount=decision.ceiling,
            )
        )

    items = [
        OrderItem(
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            discount_percent=item.discount_percent,
            product_name=item.product_name,
        )
        for item in request.items
    ]
    totals = compute_totals(items)
    if not totals.ok:
        return OrderCreation.rejected(totals.rejection)

    created_at = now or datetime.now(timezone.utc)
    order_number = (numbers or _number_generator()).next(created_at)
    order = Order(
        id=str(uuid.uuid4()),
        order_number=order_number,
        customer_id=request.customer_id,
        company_id=actor.company_id,
        status=OrderStatus.PENDING,
        total_amount=totals.value.total_amount,
        total_discount=totals.value.total_discount,
        created_at=created_at,
        items=items,
        scheduled_date=request.scheduled_date,
        dock_id=request.dock_id,
        user_id=actor.id,
        notes=request.notes,
    )
    logger.info(
        "Prepared order %s with %d items (total %s, discount %s)",
        order.order_number,
        len(items),
        order.total_amount,
        order.total_discount,
    )
    return OrderCreation.accepted(order)
