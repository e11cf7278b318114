"""Derived analytics over a contribution calendar.

Every function here is pure: inputs are never mutated and the same input
always produces the same output, so callers may evaluate them in any order.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Sequence

from .models import (
    ContributionCalendar,
    ContributionDay,
    Issue,
    IssueCounts,
    LanguageSize,
    LanguageStats,
    PeakStats,
    PullRequest,
    PullRequestCounts,
    Repository,
    RepositoryContribution,
    StreakInfo,
    TopDay,
    TopMonth,
    TopWeek,
)

LOGGER = logging.getLogger(__name__)

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DEFAULT_LANGUAGE_LIMIT = 10


def iter_days(calendar: ContributionCalendar) -> Iterable[ContributionDay]:
    """Yield days in calendar order (week by week)."""

    for week in calendar.weeks:
        yield from week.contribution_days


def flatten_days(calendar: ContributionCalendar) -> list[ContributionDay]:
    """Return every day of the calendar sorted chronologically."""

    return sorted(iter_days(calendar), key=lambda day: day.date)


def compute_longest_streak(days: Sequence[ContributionDay]) -> StreakInfo:
    """Longest run of consecutive active days; the earliest run wins ties."""

    longest = StreakInfo()
    run = 0
    run_start: str | None = None
    for day in days:
        if day.contribution_count > 0:
            if run == 0:
                run_start = day.date
            run += 1
            if run > longest.count:
                longest = StreakInfo(count=run, start_date=run_start, end_date=day.date)
        else:
            run = 0
            run_start = None
    return longest


def compute_current_streak(days: Sequence[ContributionDay], today: date) -> StreakInfo:
    """Walk back from ``today`` counting active days.

    Days after ``today`` are ignored. A zero count on ``today`` itself does
    not end the streak, since the day is not over yet.
    """

    today_iso = today.isoformat()
    count = 0
    start: str | None = None
    end: str | None = None
    for day in reversed(days):
        if day.date > today_iso:
            continue
        if day.contribution_count > 0:
            if count == 0:
                end = day.date
            count += 1
            start = day.date
        elif count == 0 and day.date == today_iso:
            continue
        else:
            break
    return StreakInfo(count=count, start_date=start, end_date=end)


def compute_streaks(calendar: ContributionCalendar, today: date) -> tuple[StreakInfo, StreakInfo]:
    """Return ``(longest, current)`` streaks for the calendar."""

    days = flatten_days(calendar)
    longest = compute_longest_streak(days)
    current = compute_current_streak(days, today)
    LOGGER.debug("Streaks over %s days: longest=%s current=%s", len(days), longest.count, current.count)
    return longest, current


def compute_peaks(calendar: ContributionCalendar) -> PeakStats:
    """Find the busiest day, week and month.

    Months are grouped from each day's date rather than the calendar's
    ``months`` field. The first occurrence wins ties everywhere. ``top_hour``
    stays ``None`` because the calendar carries no commit timestamps.
    """

    top_day = TopDay()
    for day in iter_days(calendar):
        if day.contribution_count > top_day.contributions:
            top_day = TopDay(
                date=day.date,
                contributions=day.contribution_count,
                day_of_week=DAY_NAMES[day.weekday],
            )

    top_week = TopWeek()
    for week in calendar.weeks:
        total = week.total
        if total > top_week.contributions:
            top_week = TopWeek(
                week_start=week.contribution_days[0].date,
                week_end=week.contribution_days[-1].date,
                contributions=total,
            )

    month_totals: dict[tuple[int, int], int] = {}
    for day in iter_days(calendar):
        parsed = day.day
        key = (parsed.year, parsed.month)
        month_totals[key] = month_totals.get(key, 0) + day.contribution_count

    top_month = TopMonth()
    for (year, month), total in month_totals.items():
        if total > top_month.contributions:
            top_month = TopMonth(month=MONTH_NAMES[month - 1], year=year, contributions=total)

    return PeakStats(top_day=top_day, top_week=top_week, top_month=top_month, top_hour=None)


def compute_language_stats(
    sizes: Mapping[str, LanguageSize],
    limit: int = DEFAULT_LANGUAGE_LIMIT,
) -> list[LanguageStats]:
    """Percentage share per language, largest first, truncated to ``limit``.

    Percentages are taken against the total of every language, not just the
    ones kept. Equal sizes keep the mapping's iteration order.
    """

    total = sum(entry.size for entry in sizes.values())
    result = [
        LanguageStats(
            name=name,
            color=entry.color,
            size=entry.size,
            percentage=(entry.size / total) * 100 if total > 0 else 0.0,
        )
        for name, entry in sizes.items()
    ]
    result.sort(key=lambda stats: stats.size, reverse=True)
    return result[:limit]


def compute_total_stars(repositories: Iterable[Repository]) -> int:
    return sum(repository.stars for repository in repositories)


def compute_total_contributions(calendar: ContributionCalendar) -> int:
    return sum(day.contribution_count for day in iter_days(calendar))


def compute_weekday_totals(calendar: ContributionCalendar) -> list[int]:
    """Contribution totals per weekday, Sunday first."""

    totals = [0] * 7
    for day in iter_days(calendar):
        totals[day.weekday] += day.contribution_count
    return totals


def aggregate_language_sizes(contributions: Iterable[RepositoryContribution]) -> dict[str, LanguageSize]:
    """Sum commit contributions per primary language.

    The first color seen for a language is kept; repositories without a
    primary language are skipped.
    """

    sizes: dict[str, LanguageSize] = {}
    for contribution in contributions:
        if not contribution.language:
            continue
        existing = sizes.get(contribution.language)
        if existing is None:
            sizes[contribution.language] = LanguageSize(
                size=contribution.commits,
                color=contribution.language_color or "",
            )
        else:
            sizes[contribution.language] = LanguageSize(
                size=existing.size + contribution.commits,
                color=existing.color,
            )
    return sizes


def compute_pr_counts(pull_requests: Iterable[PullRequest]) -> PullRequestCounts:
    opened = merged = closed = 0
    for pull_request in pull_requests:
        opened += 1
        if pull_request.merged_at:
            merged += 1
        elif pull_request.state == "CLOSED":
            closed += 1
    return PullRequestCounts(opened=opened, merged=merged, closed=closed)


def compute_issue_counts(issues: Iterable[Issue]) -> IssueCounts:
    opened = closed = 0
    for issue in issues:
        opened += 1
        if issue.closed_at:
            closed += 1
    return IssueCounts(opened=opened, closed=closed)


__all__ = [
    "DAY_NAMES",
    "DEFAULT_LANGUAGE_LIMIT",
    "MONTH_NAMES",
    "aggregate_language_sizes",
    "compute_current_streak",
    "compute_issue_counts",
    "compute_language_stats",
    "compute_longest_streak",
    "compute_peaks",
    "compute_pr_counts",
    "compute_streaks",
    "compute_total_contributions",
    "compute_total_stars",
    "compute_weekday_totals",
    "flatten_days",
    "iter_days",
]
