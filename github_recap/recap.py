"""High level assembly of a year-in-review summary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .config import UTC, RecapSettings
from .models import (
    ContributionCalendar,
    IssueCounts,
    LanguageStats,
    PeakStats,
    PullRequestCounts,
    Repository,
    StreakInfo,
)
from .payload import GitHubUserData
from .stats import (
    aggregate_language_sizes,
    compute_issue_counts,
    compute_language_stats,
    compute_peaks,
    compute_pr_counts,
    compute_streaks,
    compute_total_contributions,
    compute_total_stars,
    compute_weekday_totals,
)

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RecapSummary:
    """Everything the presentation layer needs to render a recap."""

    username: str
    display_name: str
    avatar_url: str
    bio: str | None
    year: int
    total_contributions: int
    calendar: ContributionCalendar
    longest_streak: StreakInfo
    current_streak: StreakInfo
    peak_stats: PeakStats
    weekday_totals: tuple[int, ...]
    pr_counts: PullRequestCounts
    issue_counts: IssueCounts
    new_repositories: tuple[Repository, ...]
    followers: int
    following: int
    total_stars: int
    top_languages: tuple[LanguageStats, ...]
    generated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "displayName": self.display_name,
            "avatarUrl": self.avatar_url,
            "bio": self.bio,
            "year": self.year,
            "totalContributions": self.total_contributions,
            "contributionCalendar": _calendar_to_dict(self.calendar),
            "longestStreak": self.longest_streak.to_dict(),
            "currentStreak": self.current_streak.to_dict(),
            "peakStats": self.peak_stats.to_dict(),
            "weekdayTotals": list(self.weekday_totals),
            "prCounts": self.pr_counts.to_dict(),
            "issueCounts": self.issue_counts.to_dict(),
            "newRepos": [repository.to_dict() for repository in self.new_repositories],
            "totalReposCreated": len(self.new_repositories),
            "followers": self.followers,
            "following": self.following,
            "totalStars": self.total_stars,
            "topLanguages": [language.to_dict() for language in self.top_languages],
            "generatedAt": self.generated_at.isoformat(),
        }


def build_recap(
    user_data: GitHubUserData,
    today: date,
    settings: RecapSettings | None = None,
    generated_at: datetime | None = None,
) -> RecapSummary:
    """Run every statistic over ``user_data`` and assemble a :class:`RecapSummary`."""

    settings = settings or RecapSettings()
    calendar = user_data.calendar
    LOGGER.info("Building %s recap for %s", user_data.year, user_data.login)

    total = compute_total_contributions(calendar)
    if total != calendar.total_contributions:
        LOGGER.warning(
            "Calendar reports %s contributions but its days sum to %s; using the day total",
            calendar.total_contributions,
            total,
        )

    longest, current = compute_streaks(calendar, today)
    peaks = compute_peaks(calendar)
    languages = compute_language_stats(
        aggregate_language_sizes(user_data.commit_contributions),
        limit=settings.top_language_limit,
    )
    stars = compute_total_stars(user_data.repositories)

    LOGGER.info(
        "Recap for %s: %s contributions, longest streak %s, %s languages",
        user_data.login,
        total,
        longest.count,
        len(languages),
    )
    return RecapSummary(
        username=user_data.login,
        display_name=user_data.name or user_data.login,
        avatar_url=user_data.avatar_url,
        bio=user_data.bio,
        year=user_data.year,
        total_contributions=total,
        calendar=calendar,
        longest_streak=longest,
        current_streak=current,
        peak_stats=peaks,
        weekday_totals=tuple(compute_weekday_totals(calendar)),
        pr_counts=compute_pr_counts(user_data.pull_requests),
        issue_counts=compute_issue_counts(user_data.issues),
        new_repositories=user_data.repositories,
        followers=user_data.followers,
        following=user_data.following,
        total_stars=stars,
        top_languages=tuple(languages),
        generated_at=generated_at or datetime.now(tz=UTC),
    )


def _calendar_to_dict(calendar: ContributionCalendar) -> dict[str, Any]:
    return {
        "totalContributions": calendar.total_contributions,
        "weeks": [
            {
                "firstDay": week.first_day,
                "contributionDays": [
                    {
                        "date": day.date,
                        "contributionCount": day.contribution_count,
                        "weekday": day.weekday,
                        "color": day.color,
                    }
                    for day in week.contribution_days
                ],
            }
            for week in calendar.weeks
        ],
        "months": [
            {"name": month.name, "firstDay": month.first_day, "totalWeeks": month.total_weeks}
            for month in calendar.months
        ],
    }


__all__ = ["RecapSummary", "build_recap"]
