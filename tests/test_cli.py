from __future__ import annotations

import json

from typer.testing import CliRunner

from github_recap.cli import app

runner = CliRunner()


def test_summarize_writes_recap_document(tmp_path, user_payload):
    payload = tmp_path / "response.json"
    payload.write_text(json.dumps({"data": {"user": user_payload}}), encoding="utf-8")
    output = tmp_path / "recap.json"

    result = runner.invoke(
        app,
        ["summarize", str(payload), "--year", "2024", "--today", "2024-01-13", "--output", str(output)],
    )

    assert result.exit_code == 0, result.output
    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["username"] == "octocat"
    assert document["year"] == 2024
    assert document["totalStars"] == 7
    assert document["currentStreak"]["count"] == 3
    assert "Wrote 2024 recap for octocat" in result.output


def test_streaks_prints_both_streaks(tmp_path, user_payload):
    payload = tmp_path / "user.json"
    payload.write_text(json.dumps(user_payload), encoding="utf-8")

    result = runner.invoke(app, ["streaks", str(payload), "--year", "2024", "--today", "2024-01-13"])

    assert result.exit_code == 0, result.output
    assert "Longest streak: 3 days (2024-01-01 - 2024-01-03)" in result.output
    assert "Current streak: 3 days (2024-01-10 - 2024-01-12)" in result.output


def test_summarize_fails_for_missing_user(tmp_path):
    payload = tmp_path / "response.json"
    payload.write_text(json.dumps({"data": {"user": None}}), encoding="utf-8")

    result = runner.invoke(app, ["summarize", str(payload), "--year", "2024"])

    assert result.exit_code == 1
    assert "User not found" in result.output


def test_summarize_rejects_invalid_today(tmp_path, user_payload):
    payload = tmp_path / "user.json"
    payload.write_text(json.dumps(user_payload), encoding="utf-8")

    result = runner.invoke(app, ["summarize", str(payload), "--today", "not-a-date"])

    assert result.exit_code == 2


def test_summarize_rejects_zero_top_languages(tmp_path, user_payload):
    payload = tmp_path / "user.json"
    payload.write_text(json.dumps(user_payload), encoding="utf-8")

    result = runner.invoke(
        app,
        ["summarize", str(payload), "--year", "2024", "--today", "2024-01-13", "--top-languages", "0"],
    )

    assert result.exit_code == 2


def test_summarize_fails_cleanly_for_non_utf8_payload(tmp_path):
    payload = tmp_path / "response.json"
    payload.write_bytes(b"\xff\xfe\x00garbage")

    result = runner.invoke(app, ["summarize", str(payload), "--year", "2024"])

    assert result.exit_code == 1
    assert "not valid JSON" in result.output
