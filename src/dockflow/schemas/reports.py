"""Report payload schemas.

Field names are consumed directly by the reporting UI and must stay stable.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, PlainSerializer

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class SalesSummaryModel(BaseModel):
    totalSales: Money
    totalDiscounts: Money
    netSales: Money
    orderCount: int
    averageOrderValue: Money


class ProductSalesModel(BaseModel):
    productId: str
    productName: Optional[str] = None
    quantity: int
    revenue: Money


class CustomerSalesModel(BaseModel):
    customerId: str
    customerName: Optional[str] = None
    orderCount: int
    revenue: Money


class DailySalesModel(BaseModel):
    date: dt.date
    orderCount: int
    revenue: Money


class SalesReport(BaseModel):
    windowStart: dt.datetime
    windowEnd: dt.datetime
    summary: SalesSummaryModel
    byProduct: List[ProductSalesModel]
    byCustomer: List[CustomerSalesModel]
    byDay: List[DailySalesModel]


class DockUtilizationModel(BaseModel):
    dockId: str
    dockName: Optional[str] = None
    totalOrders: int
    orderHours: float
    maintenanceHours: float
    totalAvailableHours: float
    utilizationPercentage: float


class CustomerActivityModel(BaseModel):
    customerId: str
    customerName: Optional[str] = None
    isFidelized: bool
    quotaMinutes: int
    totalOrders: int
    totalSpent: Money
    totalItems: int
    averageOrderValue: Money
