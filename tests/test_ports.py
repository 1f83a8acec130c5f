"""Port conformance stories for the in-memory adapters."""

from __future__ import annotations

import pytest

from greeter.adapters.config.models import AppConfig
from greeter.adapters.memory import (
    RecordingLogger,
    ServeSpy,
    SpyDirectory,
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from greeter.domain.enums import OutputFormat


@pytest.mark.os_agnostic
def test_recording_logger_keeps_messages_in_order() -> None:
    """Messages are appended in call order."""
    logger = RecordingLogger()

    logger.log("a")
    logger.log("b")

    assert logger.messages == ["a", "b"]


@pytest.mark.os_agnostic
def test_recording_logger_clear_empties_messages() -> None:
    """clear() resets captured messages."""
    logger = RecordingLogger(messages=["x"])

    logger.clear()

    assert logger.messages == []


@pytest.mark.os_agnostic
def test_recording_logger_clear_empties_the_shared_event_list() -> None:
    """clear() also resets the event list it shares with a SpyDirectory."""
    events: list[str] = []
    logger = RecordingLogger(events=events)
    logger.log("SayHello(1)")

    logger.clear()

    assert logger.messages == []
    assert events == []


@pytest.mark.os_agnostic
def test_spy_directory_answers_like_the_reference_table() -> None:
    """SpyDirectory delegates to a SimpleDataStore over the same data."""
    spy = SpyDirectory()

    assert spy.user_name_for_id("1") == ("Fred", True)
    assert spy.user_name_for_id("7") == ("", False)
    assert spy.lookups == ["1", "7"]


@pytest.mark.os_agnostic
def test_shared_event_list_interleaves_logs_and_lookups() -> None:
    """A shared events list records both doubles in call order."""
    events: list[str] = []
    logger = RecordingLogger(events=events)
    spy = SpyDirectory(events=events)

    spy.user_name_for_id("2")
    logger.log("after")

    assert events == ["lookup:2", "log:after"]


@pytest.mark.os_agnostic
def test_in_memory_config_returns_defaults_for_any_profile() -> None:
    """get_config_in_memory ignores profile and start_dir."""
    assert get_config_in_memory() == AppConfig()
    assert get_config_in_memory(profile="anything", start_dir="/nowhere").server.port == 8080


@pytest.mark.os_agnostic
def test_in_memory_display_and_logging_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """The no-op doubles produce no output."""
    display_config_in_memory(AppConfig(), output_format=OutputFormat.JSON, section="server")
    init_logging_in_memory(AppConfig())

    assert capsys.readouterr() == ("", "")


@pytest.mark.os_agnostic
def test_serve_spy_exposes_last_app_and_clears() -> None:
    """last_app returns the latest app; clear() forgets every call."""
    spy = ServeSpy()
    first, second = object(), object()

    spy.serve(first, host="h", port=1)  # type: ignore[arg-type]
    spy.serve(second, host="h", port=2, log_level="debug")  # type: ignore[arg-type]

    assert spy.last_app is second
    assert spy.calls[1]["log_level"] == "debug"
    spy.clear()
    assert spy.calls == []
