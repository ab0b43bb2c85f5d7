"""In-process facade called by the HTTP layer.

`search()` takes request parameters as they arrive from a query string or JSON
body, validates them into an `OpportunityFilter`, and returns the response
payload `{"opportunities": [...], "totalCount": n}`. `categories()` returns
`{"categories": [{"name", "label", "count"}]}`.

Source failures degrade results silently. Malformed parameters raise
`FilterValidationError` (a client error); `AggregationError` is left to the
HTTP layer to render as a generic service error.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from .aggregator import OpportunityAggregator
from .config import Settings
from .errors import FilterValidationError
from .models import Opportunity, OpportunityFilter
from .query import OpportunityQueryEngine
from .snapshot import OpportunitySnapshot
from .sources import OpportunitySource, default_sources
from .store import OpportunityStore, persist

logger = logging.getLogger(__name__)

# Request parameter name -> filter field name.
PARAM_ALIASES: Dict[str, str] = {
    "query": "query",
    "q": "query",
    "category": "category",
    "location": "location",
    "compensation": "compensation",
    "isRemote": "is_remote",
    "is_remote": "is_remote",
    "skills": "skills",
    "offset": "offset",
    "limit": "limit",
}

# Select-box value the frontend uses for "no constraint".
ANY_VALUE = "all"

# Matched as literal substrings, so surrounding whitespace is significant.
FREE_TEXT_FIELDS = ("query", "location")


def parse_filter(params: Mapping[str, Any], default_limit: Optional[int] = None) -> OpportunityFilter:
    """Validate loosely typed request parameters into a filter.

    String booleans and integers (as from a query string) are coerced, `skills`
    may be a comma-separated string, and unknown parameters are ignored. Free
    text is kept as sent; only all-blank values are dropped.

    Raises:
        FilterValidationError: unknown category/compensation, negative or
            non-numeric limit or offset, or an unparseable boolean.
    """
    values: Dict[str, Any] = {}
    for key, value in params.items():
        field = PARAM_ALIASES.get(key)
        if field is None or value is None:
            continue
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped or (field in ("category", "compensation") and stripped.lower() == ANY_VALUE):
                continue
            if field not in FREE_TEXT_FIELDS:
                value = stripped
        values[field] = value

    if "limit" not in values and default_limit is not None:
        values["limit"] = default_limit

    try:
        return OpportunityFilter.model_validate(values)
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise FilterValidationError(
            f"invalid search parameters: {', '.join(fields) or 'filter'}",
            errors=exc.errors(include_url=False),
        ) from exc


class OpportunityRadarService:
    """Wire sources, aggregator, optional snapshot/store and query engine together."""

    def __init__(
        self,
        sources: Optional[Iterable[OpportunitySource]] = None,
        settings: Optional[Settings] = None,
        use_snapshot: bool = False,
        store: Optional[OpportunityStore] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.aggregator = OpportunityAggregator(
            default_sources() if sources is None else sources,
            timeout_s=self.settings.source_timeout_s,
        )
        self.snapshot: Optional[OpportunitySnapshot] = None
        if use_snapshot:
            self.snapshot = OpportunitySnapshot(self.aggregator, max_age_s=self.settings.snapshot_max_age_s)
        self.store = store
        self.engine = OpportunityQueryEngine(self._load)

    async def _load(self) -> List[Opportunity]:
        if self.snapshot is not None:
            opportunities = await self.snapshot.get()
        else:
            opportunities = await self.aggregator.aggregate()
        if self.store is not None:
            created = persist(self.store, opportunities)
            logger.debug("Persisted %d new opportunities", created)
        return opportunities

    async def search(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Aggregate, filter and page; returns `{"opportunities": [...], "totalCount": n}`."""
        flt = parse_filter(params or {}, default_limit=self.settings.default_limit)
        result = await self.engine.search_with_count(flt)
        return result.to_json()

    async def categories(self) -> Dict[str, Any]:
        """Returns `{"categories": [{"name", "label", "count"}]}` over the deduplicated set."""
        summary = await self.engine.category_summary()
        return {"categories": [c.model_dump() for c in summary]}
