"""Exception types raised (or recorded) by the radar.

Per-source failures never reach callers: they are captured as `SourceError`
inside a `SourceOutcome` and logged. Only problems with the join itself
(`AggregationError`) and malformed search parameters (`FilterValidationError`)
propagate out of the package.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class OpportunityRadarError(Exception):
    """Base class for all radar errors."""


class SourceError(OpportunityRadarError):
    """A single source failed or timed out while fetching."""

    def __init__(self, source: str, reason: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
        self.cause = cause


class AggregationError(OpportunityRadarError):
    """The concurrent join over sources failed as a whole."""


class FilterValidationError(OpportunityRadarError, ValueError):
    """Search parameters could not be turned into a valid filter.

    `errors` keeps pydantic's per-field error dicts so an HTTP layer can
    render them as a 400 response body.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []
