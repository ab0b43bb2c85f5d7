"""Persistence collaborator interface.

The radar itself recomputes from sources on every call. A store lets
deduplication span calls: records are upserted by `dedupe_key`, and a later
posting with the same key replaces the earlier one in place.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from .models import Opportunity, OpportunityFilter
from .query import filter_opportunities


@runtime_checkable
class OpportunityStore(Protocol):
    """What the service needs from a persistence backend."""

    def upsert(self, opportunity: Opportunity) -> bool:
        """Insert or replace by dedupe key; True when the key was new."""
        ...

    def query(self, flt: Optional[OpportunityFilter] = None) -> List[Opportunity]:
        """Matching records in insertion order, paged by `flt.offset` and `flt.limit`."""
        ...


class InMemoryOpportunityStore:
    """Dict-backed store. Insertion order of keys is the query order."""

    def __init__(self) -> None:
        self._items: Dict[str, Opportunity] = {}

    def __len__(self) -> int:
        return len(self._items)

    def upsert(self, opportunity: Opportunity) -> bool:
        key = opportunity.dedupe_key
        created = key not in self._items
        self._items[key] = opportunity
        return created

    def get(self, key: str) -> Optional[Opportunity]:
        """Look up by dedupe key (case-insensitive)."""
        return self._items.get(key.lower())

    def query(self, flt: Optional[OpportunityFilter] = None) -> List[Opportunity]:
        """Filter stored records in insertion order and return the requested page."""
        flt = flt or OpportunityFilter()
        return flt.page(filter_opportunities(self._items.values(), flt))


def persist(store: OpportunityStore, opportunities: Iterable[Opportunity]) -> int:
    """Upsert every record and return how many were new."""
    return sum(1 for opp in opportunities if store.upsert(opp))
