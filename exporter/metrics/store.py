"""Holds the latest today/tomorrow forecast for the metrics collector.

The poll thread is the only writer; scrape handlers read. Each update swaps
in a new immutable ForecastSnapshot under the lock, so a reader always sees
date and energy from the same poll.
"""

import threading
from collections.abc import Sequence
from dataclasses import replace

from exporter.models.forecast import ForecastPoint, ForecastSnapshot


class ForecastStore:
    def __init__(self, snapshot: ForecastSnapshot | None = None):
        self._lock = threading.Lock()
        self._snapshot = snapshot or ForecastSnapshot()

    def snapshot(self) -> ForecastSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def today(self) -> ForecastPoint:
        return self.snapshot().today

    @property
    def tomorrow(self) -> ForecastPoint:
        return self.snapshot().tomorrow

    def update(self, points: Sequence[ForecastPoint]) -> ForecastSnapshot:
        """Replace today (index 0) and tomorrow (index 1) in one step.

        Points that are not supplied keep their previous value.
        """
        # Same two-day limit the fetcher enforces; guards direct callers.
        if len(points) > 2:
            raise ValueError(f"expected at most 2 forecast points, got {len(points)}")

        changes: dict[str, ForecastPoint] = {}
        if len(points) >= 1:
            changes["today"] = points[0]
        if len(points) == 2:
            changes["tomorrow"] = points[1]

        with self._lock:
            self._snapshot = replace(self._snapshot, **changes)
            return self._snapshot
