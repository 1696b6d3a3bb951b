"""Order number labels (``ORD-YYYYMMDD-NNNN``).

Order numbers are display labels, not keys. With the ``random`` strategy
the suffix is drawn from 1000-9999, so two orders of the same company on
the same day collide with probability 1/9000. The ``sequence`` strategy
hands out a per-day counter instead, unique within one generator.
"""

from __future__ import annotations

import random
import threading
from datetime import date, datetime, timezone
from typing import Callable, Literal, Optional

from ...config import settings

Strategy = Literal["random", "sequence"]

_SUFFIX_MIN = 1000
_SUFFIX_MAX = 9999


def _utc_today(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


class OrderNumberGenerator:
    def __init__(
        self,
        *,
        prefix: Optional[str] = None,
        strategy: Optional[Strategy] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.prefix = prefix or settings.order_number_prefix
        self.strategy: Strategy = strategy or settings.order_number_strategy
        self._rng = rng or random.Random()
        self._clock = clock
        self._lock = threading.Lock()
        self._counters: dict[date, int] = {}

    def next(self, moment: Optional[datetime] = None) -> str:
        day = _utc_today(moment or self._clock())
        suffix = self._next_suffix(day)
        return f"{self.prefix}-{day:%Y%m%d}-{suffix:04d}"

    def _next_suffix(self, day: date) -> int:
        if self.strategy == "random":
            return self._rng.randint(_SUFFIX_MIN, _SUFFIX_MAX)
        with self._lock:
            current = self._counters.get(day, _SUFFIX_MIN - 1) + 1
            if current > _SUFFIX_MAX:
                raise RuntimeError(f"Order number sequence exhausted for {day.isoformat()}.")
            self._counters[day] = current
            return current
