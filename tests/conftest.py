from __future__ import annotations

from datetime import date, timedelta
from typing import Any

import pytest

# Two weeks starting Sunday 2023-12-31.
CALENDAR_START = date(2023, 12, 31)
DAILY_COUNTS = [0, 2, 3, 1, 0, 4, 4, 5, 0, 0, 1, 1, 1, 0]


def _contribution_days() -> list[dict[str, Any]]:
    days = []
    for offset, count in enumerate(DAILY_COUNTS):
        current = CALENDAR_START + timedelta(days=offset)
        days.append(
            {
                "date": current.isoformat(),
                "contributionCount": count,
                "weekday": offset % 7,
                "color": "#ebedf0" if count == 0 else "#40c463",
            }
        )
    return days


@pytest.fixture
def user_payload() -> dict[str, Any]:
    days = _contribution_days()
    return {
        "login": "octocat",
        "name": "The Octocat",
        "avatarUrl": "https://avatars.githubusercontent.com/u/583231",
        "bio": None,
        "followers": {"totalCount": 120},
        "following": {"totalCount": 9},
        "contributionsCollection": {
            "contributionCalendar": {
                "totalContributions": sum(DAILY_COUNTS),
                "weeks": [
                    {"contributionDays": days[:7]},
                    {"contributionDays": days[7:]},
                ],
                "months": [
                    {"name": "Dec", "firstDay": "2023-12-31", "totalWeeks": 1},
                    {"name": "Jan", "firstDay": "2024-01-01", "totalWeeks": 2},
                ],
            },
            "totalCommitContributions": 19,
            "commitContributionsByRepository": [
                {
                    "repository": {"name": "api", "primaryLanguage": {"name": "Python", "color": "#3572A5"}},
                    "contributions": {"totalCount": 12},
                },
                {
                    "repository": {"name": "web", "primaryLanguage": {"name": "TypeScript", "color": "#3178c6"}},
                    "contributions": {"totalCount": 4},
                },
                {
                    "repository": {"name": "etl", "primaryLanguage": {"name": "Python", "color": "#3572A5"}},
                    "contributions": {"totalCount": 3},
                },
                {
                    "repository": {"name": "notes", "primaryLanguage": None},
                    "contributions": {"totalCount": 2},
                },
            ],
        },
        "repositories": {
            "totalCount": 3,
            "nodes": [
                {
                    "name": "recap",
                    "description": "Year in review",
                    "url": "https://github.com/octocat/recap",
                    "stargazerCount": 7,
                    "forkCount": 1,
                    "primaryLanguage": {"name": "Python", "color": "#3572A5"},
                    "createdAt": "2024-03-01T12:00:00Z",
                    "isPrivate": False,
                },
                {
                    "name": "secret",
                    "description": None,
                    "url": "https://github.com/octocat/secret",
                    "stargazerCount": 100,
                    "forkCount": 0,
                    "primaryLanguage": None,
                    "createdAt": "2024-05-01T12:00:00Z",
                    "isPrivate": True,
                },
                {
                    "name": "old",
                    "description": None,
                    "url": "https://github.com/octocat/old",
                    "stargazerCount": 50,
                    "forkCount": 4,
                    "primaryLanguage": None,
                    "createdAt": "2023-06-01T12:00:00Z",
                    "isPrivate": False,
                },
            ],
        },
        "pullRequests": {
            "nodes": [
                {"createdAt": "2024-02-01T10:00:00Z", "mergedAt": "2024-02-02T10:00:00Z", "closedAt": "2024-02-02T10:00:00Z", "state": "MERGED"},
                {"createdAt": "2024-06-01T10:00:00Z", "mergedAt": None, "closedAt": "2024-06-03T10:00:00Z", "state": "CLOSED"},
                {"createdAt": "2023-11-01T10:00:00Z", "mergedAt": None, "closedAt": None, "state": "OPEN"},
            ]
        },
        "issues": {
            "nodes": [
                {"createdAt": "2024-01-05T00:00:00Z", "closedAt": "2024-01-09T00:00:00Z", "state": "CLOSED"},
                {"createdAt": "2024-08-20T00:00:00Z", "closedAt": None, "state": "OPEN"},
            ]
        },
    }
