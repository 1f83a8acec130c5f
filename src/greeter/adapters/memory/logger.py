"""In-memory logger and directory doubles for testing.

Contents:
    * :class:`RecordingLogger` - Captures ``log`` calls for assertions.
    * :class:`SpyDirectory` - Wraps a directory and records lookups.
    * :func:`init_logging_in_memory` - No-op logging initializer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..config.models import AppConfig
from ..directory.simple import DEFAULT_USERS, SimpleDataStore


@dataclass
class RecordingLogger:
    """Logger port implementation that keeps every message in order.

    An optional ``events`` list may be shared with a :class:`SpyDirectory`
    to observe the relative order of logging and lookups.

    Example:
        >>> logger = RecordingLogger()
        >>> logger.log("SayHello(1)")
        >>> logger.messages
        ['SayHello(1)']
    """

    messages: list[str] = field(default_factory=list)
    events: list[str] | None = None

    def log(self, message: str) -> None:
        self.messages.append(message)
        if self.events is not None:
            self.events.append(f"log:{message}")

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.messages.clear()
        if self.events is not None:
            self.events.clear()


@dataclass
class SpyDirectory:
    """UserDirectory port implementation recording every lookup.

    Example:
        >>> spy = SpyDirectory()
        >>> spy.user_name_for_id("3")
        ('Pat', True)
        >>> spy.lookups
        ['3']
    """

    users: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_USERS))
    lookups: list[str] = field(default_factory=list)
    events: list[str] | None = None
    _store: SimpleDataStore = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._store = SimpleDataStore(self.users)

    def user_name_for_id(self, user_id: str) -> tuple[str, bool]:
        self.lookups.append(user_id)
        if self.events is not None:
            self.events.append(f"lookup:{user_id}")
        return self._store.user_name_for_id(user_id)


def init_logging_in_memory(config: AppConfig) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


__all__ = [
    "RecordingLogger",
    "SpyDirectory",
    "init_logging_in_memory",
]
