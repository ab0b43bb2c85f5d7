"""Runtime settings.

Values come from constructor arguments, or from `OPPORTUNITY_RADAR_*`
environment variables via `Settings.from_env()`. The CLI layers its flags on
top of the environment.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "OPPORTUNITY_RADAR_"

DEFAULT_LIMIT = 50
DEFAULT_SOURCE_TIMEOUT_S = 10.0
# Scheduled re-aggregation every 6 hours.
DEFAULT_REFRESH_INTERVAL_S = 6 * 60 * 60


class Settings(BaseModel):
    """Tunables shared by the aggregator, snapshot and service."""

    model_config = ConfigDict(frozen=True)

    default_limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    source_timeout_s: float = Field(
        default=DEFAULT_SOURCE_TIMEOUT_S,
        gt=0,
        description="Upper bound for a single source's fetch; exceeding it counts as a failure.",
    )
    refresh_interval_s: float = Field(default=DEFAULT_REFRESH_INTERVAL_S, gt=0)
    snapshot_max_age_s: Optional[float] = Field(
        default=None,
        gt=0,
        description="Refresh the cached snapshot on read once it is older than this; None keeps it until refreshed.",
    )
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, ignoring unset ones."""
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is None or not raw.strip():
                continue
            values[name] = raw.strip()
        # pydantic coerces the strings to the declared field types
        return cls.model_validate(values)
