"""Settings - environment-driven configuration."""

import pytest
from pydantic import ValidationError

from movies_api.config import Settings, get_settings


def test_api_keys_loaded_from_json_env(monkeypatch):
    monkeypatch.setenv("API_KEYS", '{"abc": "admin=true"}')
    assert Settings().api_keys == {"abc": "admin=true"}


def test_log_format_is_normalised(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    assert Settings().log_format == "json"


def test_log_format_rejects_unknown_value(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
