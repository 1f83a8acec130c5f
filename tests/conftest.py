"""Shared pytest fixtures for greeting, web, and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from starlette.testclient import TestClient

from greeter.adapters.config.models import AppConfig
from greeter.adapters.memory import RecordingLogger, ServeSpy, SpyDirectory

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.2+ keeps ``result.stdout`` and ``result.stderr`` apart; use
    ``result.stdout`` when parsing output.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """A logger double that keeps every message in order."""
    return RecordingLogger()


@pytest.fixture
def event_log() -> list[str]:
    """Shared event list for observing log/lookup interleaving."""
    return []


@pytest.fixture
def ordered_doubles(event_log: list[str]) -> tuple[RecordingLogger, SpyDirectory]:
    """A logger and a directory that append to the same event list."""
    return RecordingLogger(events=event_log), SpyDirectory(events=event_log)


@pytest.fixture
def serve_spy() -> ServeSpy:
    """A listener double that records ``serve`` calls instead of binding."""
    return ServeSpy()


@pytest.fixture
def testing_factory(recording_logger: RecordingLogger, serve_spy: ServeSpy) -> Callable[[], AppServices]:
    """Services factory wired with in-memory adapters sharing this test's doubles.

    Example:
        def test_hello(cli_runner, testing_factory) -> None:
            result = cli_runner.invoke(cli, ["hello", "1"], obj=testing_factory)
            assert result.exit_code == 0
    """
    from greeter.composition import build_testing

    def _factory() -> AppServices:
        return build_testing(logger=recording_logger, serve_spy=serve_spy)

    return _factory


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def web_client(recording_logger: RecordingLogger) -> Iterator[TestClient]:
    """A TestClient around the fully wired app, logging into ``recording_logger``."""
    from greeter.composition import build_web_app

    with TestClient(build_web_app(logger=recording_logger)) as client:
        yield client


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    from greeter.adapters.cli.context import restore_traceback_state, snapshot_traceback_state

    snapshot = snapshot_traceback_state()
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    try:
        yield
    finally:
        restore_traceback_state(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before and after each test."""
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def isolated_config_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    clear_config_cache: None,
) -> Path:
    """Point the user config at *tmp_path* and drop any GREETER_* variables.

    Returns the directory standing in for the per-user config directory.
    """
    import os

    from greeter.adapters.config import loader as config_mod

    for name in list(os.environ):
        if name.upper().startswith("GREETER_"):
            monkeypatch.delenv(name)

    def _user_path(profile: str | None = None) -> Path:
        base = tmp_path / "profile" / profile if profile else tmp_path
        return base / "config.toml"

    monkeypatch.setattr(config_mod, "get_user_config_path", _user_path)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], AppConfig]:
    """Create validated AppConfig instances from plain section dicts.

    Example:
        def test_port(config_factory) -> None:
            config = config_factory({"server": {"port": 9090}})
            assert config.server.port == 9090
    """

    def _factory(data: dict[str, Any]) -> AppConfig:
        return AppConfig.model_validate(data)

    return _factory


@pytest.fixture
def inject_config(testing_factory: Callable[[], AppServices]) -> Callable[[AppConfig], Callable[[], AppServices]]:
    """Return a helper that swaps the testing factory's config for *config*."""
    from dataclasses import replace

    def _inject(config: AppConfig) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> AppConfig:
            return config

        def _factory() -> AppServices:
            return replace(testing_factory(), get_config=_fake_get_config)

        return _factory

    return _inject
