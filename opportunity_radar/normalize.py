"""Normalization of raw source payloads.

Sources produce plain dicts in whatever shape their upstream uses (the static
listings below mirror the camelCase records of the web app). This module turns
them into `Opportunity` values deterministically:

- compensation strings are mapped onto the closed `Compensation` set, with
  anything unrecognized (e.g. "equity") becoming "unspecified"
- deadlines may be datetimes, ISO strings, or a relative `deadlineDays` offset
- requirements/skills/tags are stripped and de-duplicated, order preserved
- a remote record without a location is labelled "Remote"

Keeping this centralized makes every source predictable and testable.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional

from .models import COMPENSATIONS, Opportunity
from .utils import uniq_preserve_order


COMPENSATION_SYNONYMS: Dict[str, str] = {
    "salary": "paid",
    "salaried": "paid",
    "hourly": "paid",
    "wage": "paid",
    "volunteer": "unpaid",
    "none": "unpaid",
    "credit": "academic-credit",
    "course-credit": "academic-credit",
    "fellowship": "stipend",
    "grant": "stipend",
}

LIST_FIELDS = ("requirements", "skills", "tags")


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key, so camelCase and snake_case payloads both work."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def normalize_compensation(value: Any) -> str:
    """Map a free-form compensation value onto the closed set."""
    if not isinstance(value, str):
        return "unspecified"
    v = re.sub(r"[\s_]+", "-", value.strip().lower())
    if v in COMPENSATIONS:
        return v
    return COMPENSATION_SYNONYMS.get(v, "unspecified")


def parse_deadline(
    value: Any = None,
    offset_days: Optional[float] = None,
    now: Optional[datetime] = None,
) -> Optional[datetime]:
    """Normalize a deadline to an aware UTC datetime, or None when absent/unparseable."""
    if value is None and offset_days is not None:
        base = now or datetime.now(timezone.utc)
        return base + timedelta(days=float(offset_days))

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    return None


def _clean_list(values: Any) -> List[str]:
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    return uniq_preserve_order(str(v) for v in values)


def build_opportunity(
    raw: Mapping[str, Any],
    source: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Opportunity:
    """Build a validated `Opportunity` from a raw payload.

    Args:
        raw: Source payload (camelCase or snake_case keys).
        source: Provenance label used when the payload carries none.
        now: Reference time for relative deadlines (defaults to current UTC).

    Raises:
        pydantic.ValidationError: the payload lacks a required field or holds an
            unknown category.
    """
    data: Dict[str, Any] = dict(raw)

    data["source"] = data.get("source") or source
    data["compensation"] = normalize_compensation(data.get("compensation"))

    for field in LIST_FIELDS:
        if field in data:
            data[field] = _clean_list(data[field])

    data["deadline"] = parse_deadline(
        data.pop("deadline", None),
        offset_days=_pick(data, "deadlineDays", "deadline_days"),
        now=now,
    )
    data.pop("deadlineDays", None)
    data.pop("deadline_days", None)

    is_remote = bool(_pick(data, "isRemote", "is_remote", default=False))
    location = _pick(data, "location")
    if is_remote and not (isinstance(location, str) and location.strip()):
        data["location"] = "Remote"

    return Opportunity.model_validate(data)
