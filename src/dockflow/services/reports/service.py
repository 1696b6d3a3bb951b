"""Report requests: window validation, snapshot filtering and export."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Iterable, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel

from ...data.snapshots import parse_timestamp
from ...models.domain import Customer, Dock, Order
from ...models.results import Outcome, Rejection
from ...persistence.filesystem import FileStorage
from ...schemas.reports import CustomerActivityModel, DockUtilizationModel, SalesReport
from ..analytics.customers import aggregate_customer_activity
from ..analytics.docks import analyze_dock_utilization
from ..analytics.intervals import as_utc
from ..analytics.sales import aggregate_sales

logger = logging.getLogger(__name__)

WindowInput = Union[str, date, datetime, None]
ReportKind = Literal["sales", "dock_utilization", "customer_activity"]


@dataclass(slots=True, frozen=True)
class ReportWindow:
    start: datetime
    end: datetime

    def contains(self, moment: Optional[datetime]) -> bool:
        if moment is None:
            return False
        return as_utc(self.start) <= as_utc(moment) <= as_utc(self.end)

    def intersects(self, start: datetime, end: datetime) -> bool:
        return as_utc(start) <= as_utc(self.end) and as_utc(end) >= as_utc(self.start)


def _coerce_bound(value: WindowInput, field: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    parsed = parse_timestamp(value, field)
    if parsed is None:
        raise ValueError(f"Missing value for '{field}'")
    return parsed


def parse_window(start: WindowInput, end: WindowInput) -> Outcome[ReportWindow]:
    """Validate a report window; both bounds are required and inclusive."""

    if start in (None, "") or end in (None, ""):
        return Outcome.rejected(Rejection.validation("Start date and end date are required"))
    try:
        window = ReportWindow(start=_coerce_bound(start, "startDate"), end=_coerce_bound(end, "endDate"))
    except ValueError as exc:
        return Outcome.rejected(Rejection.validation("Invalid date format", error=str(exc)))
    if as_utc(window.start) > as_utc(window.end):
        return Outcome.rejected(
            Rejection.validation(
                "Start date must not be after end date",
                startDate=window.start.isoformat(),
                endDate=window.end.isoformat(),
            )
        )
    return Outcome.accepted(window)


def select_sales_orders(orders: Iterable[Order], company_id: str, window: ReportWindow) -> List[Order]:
    return [
        order
        for order in orders
        if order.company_id == company_id and not order.is_cancelled and window.contains(order.created_at)
    ]


def select_docks(
    docks: Iterable[Dock],
    company_id: str,
    window: ReportWindow,
    *,
    include_inactive: bool = False,
) -> List[Dock]:
    selected: List[Dock] = []
    for dock in docks:
        if dock.company_id != company_id or not (dock.active or include_inactive):
            continue
        selected.append(
            replace(
                dock,
                orders=[
                    order
                    for order in dock.orders
                    if not order.is_cancelled and window.contains(order.scheduled_date)
                ],
                maintenances=[
                    maintenance
                    for maintenance in dock.maintenances
                    if window.intersects(maintenance.start_date, maintenance.end_date)
                ],
            )
        )
    return selected


def select_customers(
    customers: Iterable[Customer],
    company_id: str,
    window: ReportWindow,
    *,
    include_inactive: bool = False,
) -> List[Customer]:
    # Every status counts for customer activity, cancelled orders included.
    return [
        replace(customer, orders=[order for order in customer.orders if window.contains(order.created_at)])
        for customer in customers
        if customer.company_id == company_id and (customer.active or include_inactive)
    ]


def build_sales_report(
    orders: Iterable[Order],
    company_id: str,
    start: WindowInput,
    end: WindowInput,
) -> Outcome[SalesReport]:
    window_outcome = parse_window(start, end)
    if not window_outcome.ok:
        return Outcome.rejected(window_outcome.rejection)
    window = window_outcome.value

    selected = select_sales_orders(orders, company_id, window)
    logger.info("Generating sales report for company %s over %d orders", company_id, len(selected))
    return Outcome.accepted(aggregate_sales(selected, window.start, window.end))


def build_dock_utilization_report(
    docks: Iterable[Dock],
    company_id: str,
    start: WindowInput,
    end: WindowInput,
    *,
    include_inactive: bool = False,
) -> Outcome[List[DockUtilizationModel]]:
    window_outcome = parse_window(start, end)
    if not window_outcome.ok:
        return Outcome.rejected(window_outcome.rejection)
    window = window_outcome.value

    selected = select_docks(docks, company_id, window, include_inactive=include_inactive)
    logger.info("Generating dock utilization report for company %s over %d docks", company_id, len(selected))
    return Outcome.accepted(analyze_dock_utilization(selected, window.start, window.end))


def build_customer_activity_report(
    customers: Iterable[Customer],
    company_id: str,
    start: WindowInput,
    end: WindowInput,
    *,
    include_inactive: bool = False,
) -> Outcome[List[CustomerActivityModel]]:
    window_outcome = parse_window(start, end)
    if not window_outcome.ok:
        return Outcome.rejected(window_outcome.rejection)
    window = window_outcome.value

    selected = select_customers(customers, company_id, window, include_inactive=include_inactive)
    logger.info("Generating customer activity report for company %s over %d customers", company_id, len(selected))
    return Outcome.accepted(aggregate_customer_activity(selected, window.start, window.end))


def report_payload(report: Union[BaseModel, Sequence[BaseModel]]) -> Any:
    """JSON-ready representation of a report model or list of models."""

    if isinstance(report, BaseModel):
        return report.model_dump(mode="json")
    return [entry.model_dump(mode="json") for entry in report]


def export_report(
    kind: ReportKind,
    report: Union[BaseModel, Sequence[BaseModel]],
    *,
    company_id: Optional[str] = None,
    storage: Optional[FileStorage] = None,
) -> Path:
    """Write the report payload to ``<data_root>/outputs/<kind>_<timestamp>/report.json``."""

    storage = storage or FileStorage()
    run_dir = storage.make_run_directory(prefix=kind)
    target = run_dir / "report.json"
    storage.write_json(
        target,
        {
            "kind": kind,
            "companyId": company_id,
            "report": report_payload(report),
        },
    )
    logger.info("Exported %s report to %s", kind, target)
    return target
