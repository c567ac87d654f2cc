"""Tests for configuration helpers."""

import pytest

from nutrition_estimator.config import Settings, parse_allowed_origins


@pytest.mark.parametrize("raw", [None, "", "  ", "*"])
def test_parse_allowed_origins_defaults_to_any(raw: str | None) -> None:
    assert parse_allowed_origins(raw) == ["*"]


def test_parse_allowed_origins_splits_and_dedupes() -> None:
    raw = "https://a.example, https://b.example/,,https://a.example"

    assert parse_allowed_origins(raw) == ["https://a.example", "https://b.example"]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_PROVIDER", "openai")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("RECOMMENDATIONS_ENABLED", "false")

    settings = Settings()

    assert settings.text_provider == "openai"
    assert settings.request_timeout_seconds == 12.5
    assert settings.recommendations_enabled is False
