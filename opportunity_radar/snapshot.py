"""Cached aggregation snapshot with a background refresh loop.

Separates the refresh path (periodic re-aggregation) from the read path (the
query engine reading the last deduplicated list). A failed refresh keeps the
previous snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

from .aggregator import OpportunityAggregator
from .config import DEFAULT_REFRESH_INTERVAL_S
from .models import Opportunity

logger = logging.getLogger(__name__)


class OpportunitySnapshot:
    """Hold the most recent aggregation result."""

    def __init__(self, aggregator: OpportunityAggregator, max_age_s: Optional[float] = None) -> None:
        self._aggregator = aggregator
        self._max_age_s = max_age_s
        self._opportunities: Optional[List[Opportunity]] = None
        self._refreshed_at: Optional[datetime] = None
        self._refreshed_mono: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def refreshed_at(self) -> Optional[datetime]:
        return self._refreshed_at

    def is_stale(self) -> bool:
        if self._opportunities is None or self._refreshed_mono is None:
            return True
        if self._max_age_s is None:
            return False
        age = asyncio.get_running_loop().time() - self._refreshed_mono
        return age >= self._max_age_s

    async def refresh(self) -> List[Opportunity]:
        """Re-aggregate and swap in the new list.

        Callers that arrive while a refresh is running wait for it and reuse its
        result instead of starting another.
        """
        started_waiting = self._refreshed_mono
        async with self._lock:
            if self._refreshed_mono is not None and self._refreshed_mono != started_waiting:
                return list(self._opportunities or [])
            opportunities = await self._aggregator.aggregate()
            self._opportunities = opportunities
            self._refreshed_at = datetime.now(timezone.utc)
            self._refreshed_mono = asyncio.get_running_loop().time()
            logger.info("Snapshot refreshed with %d opportunities", len(opportunities))
            return list(opportunities)

    async def get(self) -> List[Opportunity]:
        """Return the cached list, refreshing first if it is missing or stale."""
        if self.is_stale():
            return await self.refresh()
        return list(self._opportunities or [])

    async def run_periodic(
        self,
        interval_s: float = DEFAULT_REFRESH_INTERVAL_S,
        stop_event: Optional[asyncio.Event] = None,
    ) -> None:
        """Refresh now and then every `interval_s` seconds until `stop_event` is set."""
        stop_event = stop_event or asyncio.Event()
        while not stop_event.is_set():
            try:
                await self.refresh()
            except Exception:
                logger.exception("Scheduled opportunity aggregation failed; keeping previous snapshot")
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=interval_s)
            except asyncio.TimeoutError:
                continue
