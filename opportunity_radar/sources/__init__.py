"""Opportunity sources, one module per category/integration."""

from __future__ import annotations

from typing import List

from .base import OpportunitySource, StaticSource
from .nonprofit import NonprofitSource
from .research import ResearchSource
from .startup import StartupSource
from .student_org import StudentOrgSource


def default_sources() -> List[OpportunitySource]:
    """The built-in sources in registration order (earlier wins on duplicates)."""
    return [ResearchSource(), StartupSource(), NonprofitSource(), StudentOrgSource()]


__all__ = [
    "OpportunitySource",
    "StaticSource",
    "ResearchSource",
    "StartupSource",
    "NonprofitSource",
    "StudentOrgSource",
    "default_sources",
]
