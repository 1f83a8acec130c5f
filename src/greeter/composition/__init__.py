"""Composition root wiring adapters to application ports.

This is the only module that names concrete adapters. Everything it builds
is handed onward typed as a port, so the greeting logic and the controller
never learn which implementation they received.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from starlette.applications import Starlette

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Capability adapters
from ..adapters.console import LoggerAdapter, log_output
from ..adapters.directory import new_simple_data_store

# Logging services
from ..adapters.logging.setup import init_logging

# Web adapters
from ..adapters.web import Controller, build_app, new_controller, serve
from ..application.greeting import SimpleLogic, new_simple_logic

# Static conformance assertions: pyright verifies that each adapter
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import RecordingLogger, ServeSpy
    from ..application.ports import (
        BuildController,
        BuildLogic,
        DisplayConfig,
        GetConfig,
        InitLogging,
        Logger,
        ServeApp,
        UserDirectory,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_serve: ServeApp = serve
    _assert_logger: Logger = LoggerAdapter(log_output)
    _assert_directory: UserDirectory = new_simple_data_store()


def _resolve(logger: Logger | None, directory: UserDirectory | None) -> tuple[Logger, UserDirectory]:
    resolved_logger: Logger = logger if logger is not None else LoggerAdapter(log_output)
    resolved_directory: UserDirectory = directory if directory is not None else new_simple_data_store()
    return resolved_logger, resolved_directory


def build_logic(*, logger: Logger | None = None, directory: UserDirectory | None = None) -> SimpleLogic:
    """Wire a logger and a directory into the greeting logic.

    Defaults reproduce the production wiring: ``log_output`` adapted into a
    Logger and the reference three-entry directory.

    Example:
        >>> from greeter.adapters.memory import RecordingLogger
        >>> build_logic(logger=RecordingLogger()).say_goodbye("2")
        'Maryさん　さようなら'
    """
    return new_simple_logic(*_resolve(logger, directory))


def build_controller(*, logger: Logger | None = None, directory: UserDirectory | None = None) -> Controller:
    """Wire logger, directory, logic, and controller.

    The controller and the logic share one logger. Either dependency can be
    replaced, which is how tests inject fakes.

    Example:
        >>> from greeter.adapters.memory import RecordingLogger
        >>> controller = build_controller(logger=RecordingLogger())
        >>> controller.logic.say_hello("1")
        'Fredさん　こんにちは。'
    """
    resolved_logger, resolved_directory = _resolve(logger, directory)
    logic = new_simple_logic(resolved_logger, resolved_directory)
    return new_controller(resolved_logger, logic)


def build_web_app(*, logger: Logger | None = None, directory: UserDirectory | None = None) -> Starlette:
    """Wire a controller and mount it on ``/hello``."""
    return build_app(build_controller(logger=logger, directory=directory))


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    build_logic: BuildLogic
    build_controller: BuildController
    serve: ServeApp


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        build_logic=build_logic,
        build_controller=build_controller,
        serve=serve,
    )


def build_testing(
    *,
    logger: RecordingLogger | None = None,
    serve_spy: ServeSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        logger: Optional RecordingLogger shared by every built logic and
            controller. When None, a fresh one is created.
        serve_spy: Optional ServeSpy capturing ``serve`` calls. When None, a
            fresh one is created. Pass your own to assert on the started app.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RecordingLogger,
        ServeSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    recording = logger if logger is not None else RecordingLogger()
    spy = serve_spy if serve_spy is not None else ServeSpy()

    def _build_recording_logic(*, logger: Logger | None = None, directory: UserDirectory | None = None) -> SimpleLogic:
        return build_logic(logger=logger if logger is not None else recording, directory=directory)

    def _build_recording_controller(
        *, logger: Logger | None = None, directory: UserDirectory | None = None
    ) -> Controller:
        return build_controller(logger=logger if logger is not None else recording, directory=directory)

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        build_logic=_build_recording_logic,
        build_controller=_build_recording_controller,
        serve=spy.serve,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    # Logging
    "init_logging",
    # Wiring
    "build_controller",
    "build_logic",
    "build_web_app",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
