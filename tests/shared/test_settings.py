"""Tests for settings loading and validation."""

import pytest
from pydantic import ValidationError

from dto_partials.shared.config.settings import Settings, get_settings


def test_defaults(settings):
    assert settings.LOG_LEVEL == "INFO"
    assert settings.PARTIALS_MAX_DEPTH == 16
    assert (settings.INCLUDE_PARAM, settings.EXCLUDE_PARAM) == ("include", "exclude")
    assert (settings.ONLY_PARAM, settings.EXCEPT_PARAM) == ("only", "except")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PARTIALS_MAX_DEPTH", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("INCLUDE_PARAM", "with")

    settings = Settings()

    assert settings.PARTIALS_MAX_DEPTH == 3
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.INCLUDE_PARAM == "with"


@pytest.mark.parametrize(
    "overrides",
    [{"LOG_LEVEL": "LOUD"}, {"LOG_FORMAT": "xml"}, {"PARTIALS_MAX_DEPTH": 0}],
)
def test_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
