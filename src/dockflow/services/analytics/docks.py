"""Dock utilization over a reporting window."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Iterable, List

from ...models.domain import Dock
from ...schemas.reports import DockUtilizationModel
from .intervals import SECONDS_PER_HOUR, as_utc, hours_between, overlap_hours

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


def window_days(window_start: datetime, window_end: datetime) -> int:
    """Whole calendar days covered by the window, rounded up."""

    seconds = (as_utc(window_end) - as_utc(window_start)).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def analyze_dock(dock: Dock, window_start: datetime, window_end: datetime) -> DockUtilizationModel:
    maintenance_hours = sum(
        overlap_hours(maintenance.start_date, maintenance.end_date, window_start, window_end)
        for maintenance in dock.maintenances
    )
    # Orders without both times have no known occupancy.
    order_hours = sum(
        hours_between(order.start_time, order.end_time)
        for order in dock.orders
        if order.start_time is not None and order.end_time is not None
    )
    # Weekly schedules are not subtracted: capacity is calendar hours minus maintenance.
    available_hours = window_days(window_start, window_end) * 24 - maintenance_hours
    utilization = order_hours / available_hours * 100 if available_hours > 0 else 0.0

    logger.debug(
        "Dock %s: %.2fh orders, %.2fh maintenance, %.2fh available",
        dock.id,
        order_hours,
        maintenance_hours,
        available_hours,
    )
    return DockUtilizationModel(
        dockId=dock.id,
        dockName=dock.name,
        totalOrders=len(dock.orders),
        orderHours=float(order_hours),
        maintenanceHours=float(maintenance_hours),
        totalAvailableHours=float(available_hours),
        utilizationPercentage=float(utilization),
    )


def analyze_dock_utilization(
    docks: Iterable[Dock],
    window_start: datetime,
    window_end: datetime,
) -> List[DockUtilizationModel]:
    """Compute utilization for each dock.

    Each dock's ``orders`` must already be limited to non-cancelled orders
    scheduled inside the window, and its ``maintenances`` to records that
    intersect the window.
    """

    return [analyze_dock(dock, window_start, window_end) for dock in docks]
