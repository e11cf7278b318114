"""Domain models for contribution calendars and derived recap statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


class InvalidContributionData(ValueError):
    """Raised when upstream contribution data violates its structural contract."""


def parse_iso_date(value: Any) -> date:
    """Parse a ``YYYY-MM-DD`` string, rejecting anything else."""

    if not isinstance(value, str):
        raise InvalidContributionData(f"Expected an ISO date string, got {value!r}")
    try:
        parsed = date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidContributionData(f"Invalid date: {value!r}") from exc
    # Dates are compared as strings, so only the YYYY-MM-DD spelling is accepted.
    if parsed.isoformat() != value:
        raise InvalidContributionData(f"Date is not in YYYY-MM-DD form: {value!r}")
    return parsed


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require(payload: dict[str, Any], key: str) -> Any:
    try:
        return payload[key]
    except (KeyError, TypeError) as exc:
        raise InvalidContributionData(f"Missing required field {key!r}") from exc


@dataclass(slots=True, frozen=True)
class ContributionDay:
    """A single day of the contribution calendar."""

    date: str
    contribution_count: int
    weekday: int
    color: str = ""

    def __post_init__(self) -> None:
        parse_iso_date(self.date)
        if not _is_int(self.weekday) or not 0 <= self.weekday <= 6:
            raise InvalidContributionData(f"Weekday out of range for {self.date}: {self.weekday!r}")
        if not _is_int(self.contribution_count) or self.contribution_count < 0:
            raise InvalidContributionData(
                f"Contribution count must be a non-negative integer for {self.date}: {self.contribution_count!r}"
            )

    @property
    def day(self) -> date:
        return date.fromisoformat(self.date)

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "ContributionDay":
        return cls(
            date=_require(payload, "date"),
            contribution_count=_require(payload, "contributionCount"),
            weekday=_require(payload, "weekday"),
            color=payload.get("color") or "",
        )


@dataclass(slots=True, frozen=True)
class ContributionWeek:
    """Seven consecutive days starting on Sunday."""

    contribution_days: tuple[ContributionDay, ...]
    first_day: str = ""

    @property
    def total(self) -> int:
        return sum(day.contribution_count for day in self.contribution_days)

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "ContributionWeek":
        days = tuple(ContributionDay.from_graphql(item) for item in _require(payload, "contributionDays"))
        first_day = payload.get("firstDay") or (days[0].date if days else "")
        return cls(contribution_days=days, first_day=first_day)


@dataclass(slots=True, frozen=True)
class CalendarMonth:
    name: str
    first_day: str
    total_weeks: int


@dataclass(slots=True, frozen=True)
class ContributionCalendar:
    """Week-grouped contribution calendar as returned by GitHub."""

    total_contributions: int
    weeks: tuple[ContributionWeek, ...] = ()
    months: tuple[CalendarMonth, ...] = ()

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "ContributionCalendar":
        """Convert a ``contributionCalendar`` GraphQL object into a :class:`ContributionCalendar`."""

        weeks = tuple(ContributionWeek.from_graphql(item) for item in payload.get("weeks") or [])
        months = tuple(
            CalendarMonth(
                name=item.get("name", ""),
                first_day=item.get("firstDay", ""),
                total_weeks=item.get("totalWeeks", item.get("totalWeeksInMonth", 0)),
            )
            for item in payload.get("months") or []
        )
        return cls(
            total_contributions=payload.get("totalContributions", 0),
            weeks=weeks,
            months=months,
        )


@dataclass(slots=True, frozen=True)
class LanguageSize:
    """Weighted amount of work attributed to a language."""

    size: float
    color: str = ""


@dataclass(slots=True, frozen=True)
class Repository:
    """Repository owned by the user; only ``stars`` feeds the statistics."""

    name: str
    stars: int = 0
    forks: int = 0
    description: str | None = None
    url: str = ""
    language: str | None = None
    language_color: str | None = None
    created_at: str = ""
    is_private: bool = False

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "Repository":
        language = payload.get("primaryLanguage") or {}
        return cls(
            name=payload.get("name", ""),
            stars=payload.get("stargazerCount", 0),
            forks=payload.get("forkCount", 0),
            description=payload.get("description"),
            url=payload.get("url", ""),
            language=language.get("name"),
            language_color=language.get("color"),
            created_at=payload.get("createdAt", ""),
            is_private=bool(payload.get("isPrivate", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "stars": self.stars,
            "forks": self.forks,
            "language": self.language,
            "createdAt": self.created_at,
            "isPrivate": self.is_private,
        }


@dataclass(slots=True, frozen=True)
class PullRequest:
    created_at: str
    state: str
    merged_at: str | None = None
    closed_at: str | None = None

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "PullRequest":
        return cls(
            created_at=_require(payload, "createdAt"),
            state=payload.get("state", ""),
            merged_at=payload.get("mergedAt"),
            closed_at=payload.get("closedAt"),
        )


@dataclass(slots=True, frozen=True)
class Issue:
    created_at: str
    state: str = ""
    closed_at: str | None = None

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "Issue":
        return cls(
            created_at=_require(payload, "createdAt"),
            state=payload.get("state", ""),
            closed_at=payload.get("closedAt"),
        )


@dataclass(slots=True, frozen=True)
class RepositoryContribution:
    """Commit contributions made to a single repository."""

    repository: str
    commits: int
    language: str | None = None
    language_color: str | None = None

    @classmethod
    def from_graphql(cls, payload: dict[str, Any]) -> "RepositoryContribution":
        repository = payload.get("repository") or {}
        language = repository.get("primaryLanguage") or {}
        return cls(
            repository=repository.get("name", ""),
            commits=(payload.get("contributions") or {}).get("totalCount", 0),
            language=language.get("name"),
            language_color=language.get("color"),
        )


@dataclass(slots=True, frozen=True)
class StreakInfo:
    """A run of consecutive contribution days; dates are ``None`` when ``count`` is 0."""

    count: int = 0
    start_date: str | None = None
    end_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"count": self.count, "startDate": self.start_date, "endDate": self.end_date}


@dataclass(slots=True, frozen=True)
class TopDay:
    date: str = ""
    contributions: int = 0
    day_of_week: str = ""


@dataclass(slots=True, frozen=True)
class TopWeek:
    week_start: str = ""
    week_end: str = ""
    contributions: int = 0


@dataclass(slots=True, frozen=True)
class TopMonth:
    month: str = ""
    year: int = 0
    contributions: int = 0


@dataclass(slots=True, frozen=True)
class TopHour:
    hour: int
    commits: int


@dataclass(slots=True, frozen=True)
class PeakStats:
    """Busiest day, week and month of the calendar."""

    top_day: TopDay
    top_week: TopWeek
    top_month: TopMonth
    top_hour: TopHour | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "topDay": {
                "date": self.top_day.date,
                "contributions": self.top_day.contributions,
                "dayOfWeek": self.top_day.day_of_week,
            },
            "topWeek": {
                "weekStart": self.top_week.week_start,
                "weekEnd": self.top_week.week_end,
                "contributions": self.top_week.contributions,
            },
            "topMonth": {
                "month": self.top_month.month,
                "year": self.top_month.year,
                "contributions": self.top_month.contributions,
            },
            "topHour": (
                {"hour": self.top_hour.hour, "commits": self.top_hour.commits} if self.top_hour else None
            ),
        }


@dataclass(slots=True, frozen=True)
class LanguageStats:
    name: str
    color: str
    size: float
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "color": self.color, "size": self.size, "percentage": self.percentage}


@dataclass(slots=True, frozen=True)
class PullRequestCounts:
    opened: int = 0
    merged: int = 0
    closed: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"opened": self.opened, "merged": self.merged, "closed": self.closed}


@dataclass(slots=True, frozen=True)
class IssueCounts:
    opened: int = 0
    closed: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"opened": self.opened, "closed": self.closed}


__all__ = [
    "CalendarMonth",
    "ContributionCalendar",
    "ContributionDay",
    "ContributionWeek",
    "InvalidContributionData",
    "Issue",
    "IssueCounts",
    "LanguageSize",
    "LanguageStats",
    "PeakStats",
    "PullRequest",
    "PullRequestCounts",
    "Repository",
    "RepositoryContribution",
    "StreakInfo",
    "TopDay",
    "TopHour",
    "TopMonth",
    "TopWeek",
    "parse_iso_date",
]
