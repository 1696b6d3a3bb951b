"""Operational analytics over order, dock and customer snapshots."""

from .customers import aggregate_customer_activity
from .docks import analyze_dock_utilization
from .intervals import overlap_hours
from .sales import aggregate_sales

__all__ = [
    "aggregate_sales",
    "analyze_dock_utilization",
    "aggregate_customer_activity",
    "overlap_hours",
]
