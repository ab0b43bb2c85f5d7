"""Base classes for opportunity sources."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from ..config import DEFAULT_SOURCE_TIMEOUT_S
from ..models import Opportunity
from ..normalize import build_opportunity


class OpportunitySource(ABC):
    """Abstract base class for an opportunity source.

    A source takes no input and asynchronously returns its records, or raises.
    It must not block indefinitely: `timeout_s` is the bound the aggregator
    enforces on each `fetch()` call.
    """

    name: str
    category: str
    timeout_s: float = DEFAULT_SOURCE_TIMEOUT_S

    @abstractmethod
    async def fetch(self) -> List[Opportunity]:
        """Fetch and return normalized opportunities."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, category={self.category!r})"


class StaticSource(OpportunitySource):
    """Serve a fixed list of records.

    Stand-in for a scraper or API connector: the payload is normalized on every
    fetch, so each aggregation gets fresh values. `delay_s` simulates upstream
    latency.
    """

    name = "static"
    category = "research"
    payload: Sequence[Union[Mapping[str, Any], Opportunity]] = ()
    source_label: Optional[str] = None

    def __init__(
        self,
        name: Optional[str] = None,
        category: Optional[str] = None,
        records: Optional[Iterable[Union[Mapping[str, Any], Opportunity]]] = None,
        delay_s: float = 0.0,
        timeout_s: Optional[float] = None,
    ) -> None:
        if name is not None:
            self.name = name
        if category is not None:
            self.category = category
        if records is not None:
            self.payload = list(records)
        if timeout_s is not None:
            self.timeout_s = timeout_s
        self._delay_s = delay_s

    async def fetch(self, now: Optional[datetime] = None) -> List[Opportunity]:
        if self._delay_s:
            await asyncio.sleep(self._delay_s)
        label = self.source_label or self.name
        out: List[Opportunity] = []
        for item in self.payload:
            if isinstance(item, Opportunity):
                out.append(item)
            else:
                out.append(build_opportunity(item, source=label, now=now))
        return out
