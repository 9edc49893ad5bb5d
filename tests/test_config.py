import pytest
from pydantic import ValidationError

from awswire.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.json_timestamp_format == "iso8601"
    assert settings.default_content_type == "application/x-amz-json-1.1"
    assert settings.rest_json_content_type == "application/json"
    assert settings.query_content_type == "application/x-www-form-urlencoded; charset=utf-8"
    assert settings.log_level == "WARNING"
    assert settings.log_format == "text"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWSWIRE_JSON_TIMESTAMP_FORMAT", "rfc822")
    monkeypatch.setenv("awswire_log_level", "DEBUG")

    settings = get_settings()
    assert settings.json_timestamp_format == "rfc822"
    assert settings.log_level == "DEBUG"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWSWIRE_JSON_TIMESTAMP_FORMAT", "epoch")
    with pytest.raises(ValidationError):
        Settings()
