"""Application layer - use cases and port definitions.

Contains the greeting use case and the port protocols that define the
interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Capability and service Protocol definitions
    * :mod:`.greeting` - :class:`SimpleLogic` greeting use case
"""

from __future__ import annotations

from .greeting import SimpleLogic, new_simple_logic
from .ports import (
    BuildController,
    BuildLogic,
    DisplayConfig,
    GetConfig,
    InitLogging,
    Logger,
    Logic,
    ServeApp,
    UserDirectory,
)

__all__ = [
    "BuildController",
    "BuildLogic",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "Logger",
    "Logic",
    "ServeApp",
    "SimpleLogic",
    "UserDirectory",
    "new_simple_logic",
]
