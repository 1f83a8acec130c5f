"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no stdout, no sockets, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logger` - Recording logger, spy directory, no-op logging init
    * :mod:`.server` - ServeSpy capturing listener start-up
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logger import RecordingLogger, SpyDirectory, init_logging_in_memory
from .server import ServeSpy

# Static conformance assertions
if TYPE_CHECKING:
    from greeter.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        Logger,
        ServeApp,
        UserDirectory,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_logger: Logger = RecordingLogger()
    _assert_directory: UserDirectory = SpyDirectory()
    _assert_serve: ServeApp = ServeSpy().serve

__all__ = [
    "RecordingLogger",
    "ServeSpy",
    "SpyDirectory",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
