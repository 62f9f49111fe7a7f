"""Tests for the application settings."""

from __future__ import annotations

import pytest

from bizhub.config import Settings

SENDGRID_VARS = ("SENDGRID_API_KEY", "SENDGRID_SENDER")


@pytest.fixture(autouse=True)
def _clear_sendgrid_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in SENDGRID_VARS:
        monkeypatch.delenv(name, raising=False)


def test_email_is_optional() -> None:
    settings = Settings(_env_file=None)

    assert settings.sendgrid_api_key is None
    assert settings.sendgrid_sender is None


def test_sendgrid_settings_must_be_paired() -> None:
    with pytest.raises(ValueError, match="must both be provided"):
        Settings(_env_file=None, sendgrid_api_key="SG.fake")


def test_sendgrid_sender_must_be_an_email() -> None:
    with pytest.raises(ValueError, match="valid email"):
        Settings(_env_file=None, sendgrid_api_key="SG.fake", sendgrid_sender="alerts")


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.env")
    monkeypatch.setenv("SENDGRID_SENDER", "alerts@example.com")
    monkeypatch.setenv("APP_TIMEZONE", "UTC+01:00")

    settings = Settings(_env_file=None)

    assert settings.sendgrid_api_key == "SG.env"
    assert settings.app_timezone == "UTC+01:00"
