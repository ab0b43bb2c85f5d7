"""
Shared fixtures and fake sources for the radar tests.

Fake sources are real `OpportunitySource` subclasses so the aggregator runs
its normal task/timeout machinery against them.
"""

import asyncio
from typing import List

import pytest

from opportunity_radar.models import Opportunity
from opportunity_radar.sources.base import OpportunitySource, StaticSource


def make_opp(title="Research Assistant", organization="Bio Lab", **overrides) -> Opportunity:
    fields = {
        "title": title,
        "description": f"{title} at {organization}",
        "organization": organization,
        "category": "research",
        "location": "Campus",
        "is_remote": False,
        "compensation": "stipend",
        "source": "test",
    }
    fields.update(overrides)
    return Opportunity(**fields)


class FailingSource(OpportunitySource):
    """Raises from inside the coroutine."""

    category = "startup"

    def __init__(self, name="failing", exc=None):
        self.name = name
        self._exc = exc or RuntimeError("upstream unavailable")

    async def fetch(self) -> List[Opportunity]:
        raise self._exc


class SyncFailingSource(OpportunitySource):
    """Raises before any awaitable is produced."""

    category = "nonprofit"

    def __init__(self, name="sync-failing"):
        self.name = name

    def fetch(self):  # not a coroutine function on purpose
        raise ValueError("bad configuration")


class HangingSource(OpportunitySource):
    """Never completes on its own."""

    category = "student-org"

    def __init__(self, name="hanging", timeout_s=0.05):
        self.name = name
        self.timeout_s = timeout_s

    async def fetch(self) -> List[Opportunity]:
        await asyncio.Event().wait()
        return []


class MalformedSource(OpportunitySource):
    """Resolves, but with plain dicts instead of records."""

    category = "research"

    def __init__(self, name="malformed", items=None):
        self.name = name
        self._items = items if items is not None else [{"title": "not a record"}]

    async def fetch(self):
        return self._items


@pytest.fixture
def opp_factory():
    return make_opp


@pytest.fixture
def static_source():
    def _build(name, records, delay_s=0.0, category="research"):
        return StaticSource(name=name, category=category, records=records, delay_s=delay_s)

    return _build
