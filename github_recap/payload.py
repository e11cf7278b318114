"""Parsing of saved GitHub GraphQL user documents."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from .config import UTC
from .models import (
    ContributionCalendar,
    InvalidContributionData,
    Issue,
    PullRequest,
    Repository,
    RepositoryContribution,
)

LOGGER = logging.getLogger(__name__)


class PayloadError(RuntimeError):
    """Raised when a saved GitHub response cannot be used."""


class UserNotFoundError(PayloadError):
    """Raised when the response holds no user."""


@dataclass(slots=True, frozen=True)
class GitHubUserData:
    """A user's activity for a single year, shaped for the statistics engine."""

    login: str
    name: str | None
    avatar_url: str
    bio: str | None
    followers: int
    following: int
    year: int
    calendar: ContributionCalendar
    total_commits: int
    repositories: tuple[Repository, ...]
    commit_contributions: tuple[RepositoryContribution, ...]
    pull_requests: tuple[PullRequest, ...]
    issues: tuple[Issue, ...]

    @classmethod
    def from_graphql(cls, user: dict[str, Any], year: int) -> "GitHubUserData":
        """Convert a GraphQL ``user`` object, keeping only activity from ``year``."""

        collection = user.get("contributionsCollection") or {}
        calendar_payload = collection.get("contributionCalendar")
        if not isinstance(calendar_payload, dict):
            raise InvalidContributionData("User payload has no contributionCalendar")

        repositories = [
            Repository.from_graphql(node)
            for node in _nodes(user.get("repositories"))
        ]
        pull_requests = [PullRequest.from_graphql(node) for node in _nodes(user.get("pullRequests"))]
        issues = [Issue.from_graphql(node) for node in _nodes(user.get("issues"))]

        new_repositories = tuple(
            repository
            for repository in repositories
            if not repository.is_private and _in_year(repository.created_at, year)
        )
        LOGGER.debug(
            "Kept %s of %s repositories created in %s", len(new_repositories), len(repositories), year
        )

        return cls(
            login=user.get("login", ""),
            name=user.get("name"),
            avatar_url=user.get("avatarUrl", ""),
            bio=user.get("bio"),
            followers=(user.get("followers") or {}).get("totalCount", 0),
            following=(user.get("following") or {}).get("totalCount", 0),
            year=year,
            calendar=ContributionCalendar.from_graphql(calendar_payload),
            total_commits=collection.get("totalCommitContributions", 0),
            repositories=new_repositories,
            commit_contributions=tuple(
                RepositoryContribution.from_graphql(item)
                for item in collection.get("commitContributionsByRepository") or []
                if isinstance(item, dict)
            ),
            pull_requests=tuple(pr for pr in pull_requests if _in_year(pr.created_at, year)),
            issues=tuple(issue for issue in issues if _in_year(issue.created_at, year)),
        )


def load_user_payload(path: Path) -> dict[str, Any]:
    """Read a saved GraphQL response and return its ``user`` object.

    Accepts either the full ``{"data": {"user": ...}}`` document or a bare
    user object.
    """

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PayloadError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise PayloadError(f"{path} does not contain a JSON object")

    errors = payload.get("errors")
    if errors:
        raise PayloadError(f"GraphQL errors: {errors}")

    if "data" in payload:
        data = payload["data"] or {}
        if not isinstance(data, dict):
            raise PayloadError("Response 'data' is not an object")
        user = data.get("user")
    else:
        user = payload.get("user", payload)

    if user is None:
        raise UserNotFoundError("User not found")
    if not isinstance(user, dict):
        raise PayloadError("Response 'user' is not an object")
    return user


def _nodes(connection: Any) -> list[dict[str, Any]]:
    if not isinstance(connection, dict):
        return []
    return [node for node in connection.get("nodes") or [] if isinstance(node, dict)]


def _in_year(timestamp: str, year: int) -> bool:
    if not timestamp:
        return False
    return _parse_datetime(timestamp).year == year


def _parse_datetime(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidContributionData(f"Invalid timestamp: {value}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


__all__ = ["GitHubUserData", "PayloadError", "UserNotFoundError", "load_user_payload"]
