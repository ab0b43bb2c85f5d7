"""Data models for the opportunity radar.

Every source, whatever it wraps, hands back the same normalized `Opportunity`
record. Records are frozen: once a source returns one, nothing downstream
changes it. The `OpportunityFilter` is the typed counterpart of the loosely
typed search parameters an HTTP layer receives; enumerated fields are checked
against closed sets when the filter is built.

Python code uses snake_case field names; JSON output uses the camelCase
aliases the frontend expects (`isRemote`, `applicationUrl`, ...).

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional, Tuple, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_LIMIT


Category = Literal["research", "startup", "nonprofit", "student-org"]

Compensation = Literal["paid", "stipend", "academic-credit", "unpaid", "unspecified"]

CATEGORIES: Tuple[str, ...] = get_args(Category)
COMPENSATIONS: Tuple[str, ...] = get_args(Compensation)

CATEGORY_LABELS: Dict[str, str] = {
    "research": "Research",
    "startup": "Startup",
    "nonprofit": "Nonprofit",
    "student-org": "Student Org",
}

COMPENSATION_LABELS: Dict[str, str] = {
    "paid": "Paid",
    "stipend": "Stipend",
    "academic-credit": "Academic Credit",
    "unpaid": "Volunteer",
    "unspecified": "Not specified",
}


class Opportunity(BaseModel):
    """A normalized opportunity record.

    `title`, `description` and `organization` are required and must be
    non-empty after whitespace stripping. At least one of `application_url`
    or `contact_email` should be present for a record to be actionable, but
    that is not enforced.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    organization: str = Field(..., min_length=1)

    category: Category
    location: Optional[str] = None
    is_remote: bool = Field(default=False, alias="isRemote")
    compensation: Compensation = "unspecified"

    requirements: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    application_url: Optional[str] = Field(default=None, alias="applicationUrl")
    contact_email: Optional[str] = Field(default=None, alias="contactEmail")
    deadline: Optional[datetime] = None

    source: str = Field(..., min_length=1, description="Provenance label, e.g. 'campus' or 'nonprofit-api'.")
    estimated_hours: Optional[float] = Field(default=None, gt=0, alias="estimatedHours")
    duration: str = Field(default="", description="Free-text label such as 'semester' or 'ongoing'.")

    @property
    def dedupe_key(self) -> str:
        """Records sharing this key are duplicates, whatever else differs."""
        return f"{self.title}-{self.organization}".lower()

    def to_json(self) -> dict:
        """Serialize with the external camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class OpportunityFilter(BaseModel):
    """Search constraints. Unset fields impose no constraint; set fields AND together.

    `query` and `location` are matched literally (case-insensitively), so
    surrounding whitespace is kept; only an all-blank value counts as unset.
    `offset` and `limit` select a page of the matches.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: Optional[str] = Field(
        default=None,
        description="Case-insensitive substring of title, description or organization.",
    )
    category: Optional[Category] = None
    location: Optional[str] = Field(
        default=None,
        description="Case-insensitive substring of location; remote records always pass.",
    )
    compensation: Optional[Compensation] = None
    is_remote: Optional[bool] = Field(default=None, alias="isRemote")
    skills: Optional[Tuple[str, ...]] = Field(
        default=None,
        description="Passes when any listed skill equals one of the record's skills, ignoring case.",
    )
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)

    @field_validator("query", "location", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("category", "compensation", mode="before")
    @classmethod
    def _strip_enum(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value):
        # "python, sql" from a query string, or a list from a JSON body
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(",")
        skills = [str(s).strip() for s in value if s is not None and str(s).strip()]
        return tuple(skills) or None

    def matches(self, opp: Opportunity) -> bool:
        """Return True when `opp` satisfies every constraint that is set."""
        if self.query:
            q = self.query.lower()
            if not (
                q in opp.title.lower()
                or q in opp.description.lower()
                or q in opp.organization.lower()
            ):
                return False

        if self.category is not None and opp.category != self.category:
            return False

        if self.location:
            loc = self.location.lower()
            if not (opp.is_remote or (opp.location is not None and loc in opp.location.lower())):
                return False

        if self.compensation is not None and opp.compensation != self.compensation:
            return False

        if self.is_remote is not None and opp.is_remote != self.is_remote:
            return False

        if self.skills:
            have = {s.lower() for s in opp.skills}
            if not any(s.lower() in have for s in self.skills):
                return False

        return True

    def page(self, matches: List[Opportunity]) -> List[Opportunity]:
        """Slice one page (`offset`, then at most `limit` records) out of the matches."""
        return matches[self.offset : self.offset + self.limit]


class CategoryCount(BaseModel):
    """Number of opportunities in one category, with its display label."""

    name: Category
    label: str
    count: int = Field(..., ge=0)


class SearchResult(BaseModel):
    """A truncated page of matches plus the number of matches before truncation."""

    model_config = ConfigDict(populate_by_name=True)

    opportunities: List[Opportunity] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0, alias="totalCount")

    def to_json(self) -> dict:
        """Response body with the page and the pre-pagination match count."""
        return {
            "opportunities": [o.to_json() for o in self.opportunities],
            "totalCount": self.total_count,
        }
