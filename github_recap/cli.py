"""Command line interface for building GitHub recaps."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .config import AppConfig, parse_date
from .models import InvalidContributionData
from .payload import GitHubUserData, PayloadError, load_user_payload
from .recap import build_recap
from .stats import compute_streaks

app = typer.Typer(add_completion=False)

LOGGER = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_config(year: Optional[int], today: Optional[str], top_languages: Optional[int] = None) -> AppConfig:
    overrides: dict[str, object] = {}
    if year:
        overrides["year"] = year
    if top_languages is not None:
        overrides["top_language_limit"] = top_languages
    try:
        if today:
            overrides["today"] = parse_date(today)
        return AppConfig.from_env(overrides=overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_user(payload: Path, year: int) -> GitHubUserData:
    try:
        return GitHubUserData.from_graphql(load_user_payload(payload), year)
    except (PayloadError, InvalidContributionData) as exc:
        LOGGER.error("Cannot use %s: %s", payload, exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("summarize")
def summarize(
    payload: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved GraphQL user response"),
    year: Optional[int] = typer.Option(None, help="Year to summarize"),
    today: Optional[str] = typer.Option(None, envvar="RECAP_TODAY", help="Evaluation date (YYYY-MM-DD)"),
    top_languages: Optional[int] = typer.Option(None, help="Number of languages to keep"),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Destination file, stdout when omitted"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Build a year-in-review summary and write it as JSON."""

    configure_logging(log_level)
    config = _load_config(year, today, top_languages)
    settings = config.recap
    user_data = _load_user(payload, settings.resolve_year())

    summary = build_recap(user_data, settings.resolve_today(), settings)
    document = json.dumps(summary.to_dict(), indent=2)
    if output is None:
        typer.echo(document)
        return
    output.write_text(document + "\n", encoding="utf-8")
    typer.echo(f"Wrote {summary.year} recap for {summary.username} to {output}")


@app.command("streaks")
def streaks(
    payload: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved GraphQL user response"),
    year: Optional[int] = typer.Option(None, help="Year to summarize"),
    today: Optional[str] = typer.Option(None, envvar="RECAP_TODAY", help="Evaluation date (YYYY-MM-DD)"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Print the longest and current contribution streaks."""

    configure_logging(log_level)
    settings = _load_config(year, today).recap
    user_data = _load_user(payload, settings.resolve_year())

    longest, current = compute_streaks(user_data.calendar, settings.resolve_today())
    for label, streak in (("Longest", longest), ("Current", current)):
        if streak.count:
            typer.echo(f"{label} streak: {streak.count} days ({streak.start_date} - {streak.end_date})")
        else:
            typer.echo(f"{label} streak: 0 days")


__all__ = ["app"]
