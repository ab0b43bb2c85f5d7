"""Concurrent fan-out over all registered sources.

`OpportunityAggregator.aggregate()` launches every source's `fetch()` as its
own asyncio task, bounds each by the source's timeout, and waits for all of
them to settle. A source that raises or times out is logged and contributes
nothing; it never fails the aggregation. The successful lists are concatenated
in registration order (not completion order) and deduplicated, first
occurrence winning, so the output is deterministic for fixed source outputs.

The aggregator keeps no state between calls. Caching between refreshes is the
job of `snapshot.OpportunitySnapshot`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import AggregationError, SourceError
from .models import Opportunity
from .sources.base import OpportunitySource
from .utils import dedupe_opportunities

logger = logging.getLogger(__name__)


@dataclass
class SourceOutcome:
    """How one source's fetch settled during a single aggregation pass."""

    source: str
    opportunities: List[Opportunity] = field(default_factory=list)
    error: Optional[SourceError] = None
    duration_s: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class OpportunityAggregator:
    """Fan out to sources, tolerate partial failure, merge and deduplicate."""

    def __init__(self, sources: Iterable[OpportunitySource], timeout_s: Optional[float] = None) -> None:
        """
        Args:
            sources: Sources in registration order; earlier sources win ties on
                duplicate records.
            timeout_s: If set, overrides every source's own `timeout_s`.
        """
        self._sources: Tuple[OpportunitySource, ...] = tuple(sources)
        self._timeout_s = timeout_s

    @property
    def sources(self) -> Tuple[OpportunitySource, ...]:
        return self._sources

    def _timeout_for(self, source: OpportunitySource) -> Optional[float]:
        if self._timeout_s is not None:
            return self._timeout_s
        return getattr(source, "timeout_s", None)

    async def _fetch_one(self, source: OpportunitySource, durations: List[float], index: int) -> List[Opportunity]:
        loop = asyncio.get_running_loop()
        started = loop.time()
        logger.debug("Fetching from %s...", source.name)
        try:
            timeout = self._timeout_for(source)
            if timeout is None:
                result = await source.fetch()
            else:
                result = await asyncio.wait_for(source.fetch(), timeout)
            records = list(result)
            for item in records:
                if not isinstance(item, Opportunity):
                    raise TypeError(f"expected Opportunity records, got {type(item).__name__}")
            return records
        finally:
            durations[index] = loop.time() - started

    @staticmethod
    def _describe_failure(exc: BaseException, timeout: Optional[float]) -> str:
        if isinstance(exc, asyncio.TimeoutError):
            return f"timed out after {timeout}s"
        if isinstance(exc, asyncio.CancelledError):
            return "cancelled"
        return f"{type(exc).__name__}: {exc}"

    @staticmethod
    async def _join(tasks: Sequence["asyncio.Task[List[Opportunity]]"]) -> list:
        """Wait for every task to settle; exceptions come back as results."""
        return await asyncio.gather(*tasks, return_exceptions=True)

    async def collect(self) -> List[SourceOutcome]:
        """Run every source concurrently and report each outcome in registration order."""
        durations = [0.0] * len(self._sources)
        tasks = [
            asyncio.create_task(self._fetch_one(source, durations, i), name=f"fetch:{source.name}")
            for i, source in enumerate(self._sources)
        ]
        if not tasks:
            return []

        try:
            results = await self._join(tasks)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            raise
        except Exception as exc:
            for task in tasks:
                task.cancel()
            raise AggregationError(f"joining {len(tasks)} source fetches failed: {exc}") from exc

        outcomes: List[SourceOutcome] = []
        for source, result, duration in zip(self._sources, results, durations):
            if isinstance(result, BaseException):
                reason = self._describe_failure(result, self._timeout_for(source))
                logger.warning("Source %s failed: %s", source.name, reason)
                outcomes.append(
                    SourceOutcome(
                        source=source.name,
                        error=SourceError(source.name, reason, cause=result),
                        duration_s=duration,
                    )
                )
                continue

            logger.info("%s returned %d opportunities in %.3fs", source.name, len(result), duration)
            outcomes.append(SourceOutcome(source=source.name, opportunities=result, duration_s=duration))
        return outcomes

    @staticmethod
    def merge(outcomes: Sequence[SourceOutcome]) -> List[Opportunity]:
        """Concatenate successful outcomes in the given order and deduplicate."""
        merged = list(chain.from_iterable(o.opportunities for o in outcomes if o.ok))
        return dedupe_opportunities(merged)

    async def aggregate(self) -> List[Opportunity]:
        """Return the deduplicated union of every source that succeeded.

        Raises:
            AggregationError: only if the concurrent join itself fails.
        """
        logger.info("Aggregating opportunities from %d sources", len(self._sources))
        outcomes = await self.collect()
        total = sum(len(o.opportunities) for o in outcomes)
        unique = self.merge(outcomes)
        failed = [o.source for o in outcomes if not o.ok]
        logger.info(
            "Aggregated %d opportunities (%d unique) from %d/%d sources%s",
            total,
            len(unique),
            len(outcomes) - len(failed),
            len(outcomes),
            f"; failed: {', '.join(failed)}" if failed else "",
        )
        return unique
