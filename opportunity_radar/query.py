"""Filtering and truncation over the aggregated set.

The filter pass is synchronous, pure computation: no ranking is applied and
results keep aggregation order (registration order, post-dedup). The engine
pulls its input from an async provider, either `aggregator.aggregate` (fresh
recomputation per search) or `OpportunitySnapshot.get` (cached read path).
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Awaitable, Callable, Iterable, List, Optional

from .models import CATEGORIES, CATEGORY_LABELS, CategoryCount, Opportunity, OpportunityFilter, SearchResult

logger = logging.getLogger(__name__)

OpportunityProvider = Callable[[], Awaitable[List[Opportunity]]]


def filter_opportunities(opportunities: Iterable[Opportunity], flt: OpportunityFilter) -> List[Opportunity]:
    """Return every record matching `flt`, in input order, without truncation."""
    return [opp for opp in opportunities if flt.matches(opp)]


def summarize_categories(opportunities: Iterable[Opportunity]) -> List[CategoryCount]:
    """Count records per category; every category is listed, including empty ones."""
    counts = Counter(opp.category for opp in opportunities)
    return [CategoryCount(name=name, label=CATEGORY_LABELS[name], count=counts.get(name, 0)) for name in CATEGORIES]


class OpportunityQueryEngine:
    """Serve filtered, bounded views over the deduplicated opportunity set."""

    def __init__(self, provider: OpportunityProvider) -> None:
        self._provider = provider

    async def search_with_count(self, flt: Optional[OpportunityFilter] = None) -> SearchResult:
        """Filter, then take the `flt.offset`/`flt.limit` page; `total_count` counts all matches."""
        flt = flt or OpportunityFilter()
        opportunities = await self._provider()
        matches = filter_opportunities(opportunities, flt)
        logger.debug("Search %s matched %d of %d", flt.model_dump(exclude_none=True), len(matches), len(opportunities))
        return SearchResult(opportunities=flt.page(matches), total_count=len(matches))

    async def search(self, flt: Optional[OpportunityFilter] = None) -> List[Opportunity]:
        """Like `search_with_count`, returning only the page of records."""
        result = await self.search_with_count(flt)
        return result.opportunities

    async def category_summary(self) -> List[CategoryCount]:
        """Per-category counts over the whole deduplicated set, ignoring any filter."""
        return summarize_categories(await self._provider())
