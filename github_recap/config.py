"""Application configuration helpers."""

from __future__ import annotations

import os
from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, PositiveInt


UTC = timezone.utc


class RecapSettings(BaseModel):
    """Tunable parameters for building a recap."""

    year: int | None = Field(
        default=None,
        ge=2008,
        description="Year to summarize. Defaults to the current UTC year.",
    )
    top_language_limit: PositiveInt = Field(
        default=10, le=100, description="Number of languages kept in the breakdown."
    )
    today: date | None = Field(
        default=None,
        description="Evaluation date for the current streak. Defaults to today in UTC.",
    )

    def resolve_today(self) -> date:
        return self.today or datetime.now(tz=UTC).date()

    def resolve_year(self) -> int:
        return self.year or self.resolve_today().year


class AppConfig(BaseModel):
    """Root configuration container."""

    recap: RecapSettings = Field(default_factory=RecapSettings)

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None, overrides: dict[str, Any] | None = None) -> "AppConfig":
        """Construct a configuration object from environment variables."""

        env = env or os.environ
        overrides = overrides or {}

        year = overrides.get("year") or env.get("RECAP_YEAR")
        top_language_limit = overrides.get("top_language_limit")
        if top_language_limit is None:
            top_language_limit = env.get("RECAP_TOP_LANGUAGES", 10)
        recap = RecapSettings(
            year=int(year) if year else None,
            top_language_limit=int(top_language_limit),
            today=overrides.get("today") or parse_date(env.get("RECAP_TODAY")),
        )

        return cls(recap=recap)


def parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"Invalid date format: {value}") from exc


__all__ = [
    "AppConfig",
    "RecapSettings",
    "UTC",
    "parse_date",
]
