"""Opportunity radar package.

Aggregates research, startup, nonprofit and student-organization
opportunities from independent sources:
- `models.py` defines the stable record and filter schema.
- `sources/` contains per-category sources that produce records.
- `normalize.py` turns raw source payloads into records.
- `aggregator.py` fans out to sources concurrently and deduplicates.
- `query.py` filters and truncates the merged set.
- `service.py` is the facade the HTTP layer calls.
"""

from .aggregator import OpportunityAggregator, SourceOutcome
from .config import Settings
from .errors import AggregationError, FilterValidationError, OpportunityRadarError, SourceError
from .models import CategoryCount, Opportunity, OpportunityFilter, SearchResult
from .query import OpportunityQueryEngine, filter_opportunities
from .service import OpportunityRadarService
from .snapshot import OpportunitySnapshot

__all__ = [
    "AggregationError",
    "CategoryCount",
    "FilterValidationError",
    "Opportunity",
    "OpportunityAggregator",
    "OpportunityFilter",
    "OpportunityQueryEngine",
    "OpportunityRadarError",
    "OpportunityRadarService",
    "OpportunitySnapshot",
    "SearchResult",
    "Settings",
    "SourceError",
    "SourceOutcome",
    "filter_opportunities",
]
