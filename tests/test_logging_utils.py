import sys
from typing import Any

import pytest
from rich.logging import RichHandler

from awswire import logging_utils


@pytest.fixture
def logger_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[Any, ...]]:
    calls: list[tuple[Any, ...]] = []
    monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)
    monkeypatch.setattr(logging_utils.logger, "remove", lambda *args: calls.append(("remove",)))
    monkeypatch.setattr(logging_utils.logger, "add", lambda sink, **kwargs: calls.append(("add", sink, kwargs)))
    monkeypatch.setattr(logging_utils.logger, "enable", lambda name: calls.append(("enable", name)))
    return calls


def test_cli_profile_uses_rich(logger_calls: list[tuple[Any, ...]]) -> None:
    logging_utils.configure_logging(profile="cli", level="debug")

    assert logger_calls[0] == ("remove",)
    _, sink, kwargs = logger_calls[1]
    assert isinstance(sink, RichHandler)
    assert kwargs["level"] == "DEBUG"
    assert kwargs["format"] == "{message}"
    assert logger_calls[2] == ("enable", "awswire")


def test_profile_is_configured_once(logger_calls: list[tuple[Any, ...]]) -> None:
    logging_utils.configure_logging(profile="cli")
    logging_utils.configure_logging(profile="cli")
    assert len(logger_calls) == 3


def test_default_profile_follows_settings(
    monkeypatch: pytest.MonkeyPatch, logger_calls: list[tuple[Any, ...]]
) -> None:
    monkeypatch.setenv("AWSWIRE_LOG_LEVEL", "info")
    monkeypatch.setenv("AWSWIRE_LOG_FORMAT", "json")

    logging_utils.configure_logging()

    _, sink, kwargs = logger_calls[1]
    assert sink is sys.stderr
    assert kwargs["level"] == "INFO"
    assert kwargs["serialize"] is True
