from __future__ import annotations

from datetime import date

import pytest

from github_recap.config import AppConfig, RecapSettings


def test_from_env_reads_recap_settings():
    config = AppConfig.from_env(
        env={"RECAP_YEAR": "2023", "RECAP_TOP_LANGUAGES": "5", "RECAP_TODAY": "2023-12-31"}
    )

    assert config.recap.year == 2023
    assert config.recap.top_language_limit == 5
    assert config.recap.today == date(2023, 12, 31)


def test_overrides_win_over_environment():
    config = AppConfig.from_env(
        env={"RECAP_YEAR": "2023", "RECAP_TOP_LANGUAGES": "5"},
        overrides={"year": 2024, "top_language_limit": 3, "today": date(2024, 2, 1)},
    )

    assert config.recap.year == 2024
    assert config.recap.top_language_limit == 3
    assert config.recap.resolve_today() == date(2024, 2, 1)


def test_year_defaults_to_evaluation_year():
    settings = RecapSettings(today=date(2022, 7, 4))

    assert settings.resolve_year() == 2022
    assert settings.top_language_limit == 10


def test_invalid_today_raises():
    with pytest.raises(ValueError) as exc:
        AppConfig.from_env(env={"RECAP_TODAY": "yesterday"})

    assert "yesterday" in str(exc.value)


def test_language_limit_must_be_positive():
    with pytest.raises(ValueError):
        AppConfig.from_env(env={"RECAP_TOP_LANGUAGES": "0"})


def test_zero_language_limit_override_is_rejected():
    with pytest.raises(ValueError):
        AppConfig.from_env(env={"RECAP_TOP_LANGUAGES": "5"}, overrides={"top_language_limit": 0})
