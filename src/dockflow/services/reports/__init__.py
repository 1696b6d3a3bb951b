"""Report service exports."""

from .service import (
    ReportWindow,
    build_customer_activity_report,
    build_dock_utilization_report,
    build_sales_report,
    export_report,
    parse_window,
    report_payload,
)

__all__ = [
    "ReportWindow",
    "parse_window",
    "build_sales_report",
    "build_dock_utilization_report",
    "build_customer_activity_report",
    "export_report",
    "report_payload",
]
