"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting and farewell message formatting
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GOODBYE_SUFFIX,
    HELLO_SUFFIX,
    build_goodbye,
    build_hello,
    call_signature,
)
from .enums import OutputFormat
from .errors import UNKNOWN_USER_MESSAGE, ConfigurationError, UnknownUserError

__all__ = [
    # Behaviors
    "GOODBYE_SUFFIX",
    "HELLO_SUFFIX",
    "build_goodbye",
    "build_hello",
    "call_signature",
    # Enums
    "OutputFormat",
    # Errors
    "UNKNOWN_USER_MESSAGE",
    "ConfigurationError",
    "UnknownUserError",
]
