"""Interval arithmetic shared by the utilization analysis."""

from __future__ import annotations

from datetime import datetime, timezone

SECONDS_PER_HOUR = 3600.0


def as_utc(moment: datetime) -> datetime:
    """Treat naive timestamps as UTC so they compare with aware ones."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def hours_between(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)).total_seconds() / SECONDS_PER_HOUR


def overlap_hours(
    interval_start: datetime,
    interval_end: datetime,
    window_start: datetime,
    window_end: datetime,
) -> float:
    """Hours of ``[interval_start, interval_end]`` that fall inside the window.

    Returns 0.0 for disjoint or inverted intervals.
    """

    clamped_start = max(as_utc(interval_start), as_utc(window_start))
    clamped_end = min(as_utc(interval_end), as_utc(window_end))
    return max(0.0, (clamped_end - clamped_start).total_seconds() / SECONDS_PER_HOUR)
