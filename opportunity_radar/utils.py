"""Utility helpers shared across the radar."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from .models import Opportunity


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Deduplicate strings case-insensitively while preserving first-seen order."""
    seen = set()
    out: List[str] = []
    for it in items:
        it = (it or "").strip()
        if not it:
            continue
        key = it.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out


def dedupe_opportunities(items: Iterable["Opportunity"]) -> List["Opportunity"]:
    """Keep the first record for each `dedupe_key`; later duplicates are dropped as-is."""
    seen = set()
    out: List["Opportunity"] = []
    for opp in items:
        key = opp.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        out.append(opp)
    return out
