"""Pydantic request models for order creation."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", min_length=1)
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., alias="unitPrice", ge=0)
    discount_percent: Decimal = Field(
        default=Decimal("0"),
        alias="discountPercent",
        ge=0,
        le=100,
        description="Line discount as a percentage of the line gross amount.",
    )
    product_name: Optional[str] = Field(default=None, alias="productName")


class OrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(..., alias="customerId", min_length=1)
    items: List[OrderItemRequest]
    notes: Optional[str] = None
    scheduled_date: Optional[datetime] = Field(default=None, alias="scheduledDate")
    dock_id: Optional[str] = Field(default=None, alias="dockId")

    @field_validator("items")
    @classmethod
    def validate_items(cls, value: List[OrderItemRequest]) -> List[OrderItemRequest]:
        if not value:
            raise ValueError("Order must have at least one item")
        return value
