"""Tests for configuration helpers."""

import pytest

from food_suggest.config import Settings, parse_language


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "tr"),
        ("", "tr"),
        ("auto", "tr"),
        ("en", "en"),
        ("EN-us", "en"),
        ("tr_TR", "tr"),
        ("de", "tr"),
    ],
)
def test_parse_language(raw: str | None, expected: str) -> None:
    assert parse_language(raw, "tr") == expected


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_DAILY_LIMIT", "7")
    monkeypatch.setenv("AI_PROVIDER", "openai")

    settings = Settings()

    assert settings.ai_daily_limit == 7
    assert settings.ai_provider == "openai"
    assert settings.places_daily_limit == 20
