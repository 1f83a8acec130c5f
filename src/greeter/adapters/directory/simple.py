"""Fixed in-memory user directory."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

#: Reference table served when no other directory is wired in.
DEFAULT_USERS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "1": "Fred",
        "2": "Mary",
        "3": "Pat",
    }
)


class SimpleDataStore:
    """Read-only identifier-to-name table satisfying the UserDirectory port.

    The mapping is copied at construction and exposed only through a
    read-only view, so concurrent request handlers can share one instance
    without locking.

    Example:
        >>> store = SimpleDataStore({"7": "Ann"})
        >>> store.user_name_for_id("7")
        ('Ann', True)
        >>> store.user_name_for_id("")
        ('', False)
    """

    __slots__ = ("_user_data",)

    def __init__(self, user_data: Mapping[str, str]) -> None:
        self._user_data: Mapping[str, str] = MappingProxyType(dict(user_data))

    @property
    def user_data(self) -> Mapping[str, str]:
        return self._user_data

    def user_name_for_id(self, user_id: str) -> tuple[str, bool]:
        name = self._user_data.get(user_id)
        if name is None:
            return "", False
        return name, True

    def __repr__(self) -> str:
        return f"SimpleDataStore({dict(self._user_data)!r})"


def new_simple_data_store() -> SimpleDataStore:
    """Return a store holding the reference three-entry table.

    Example:
        >>> new_simple_data_store().user_name_for_id("1")
        ('Fred', True)
    """
    return SimpleDataStore(DEFAULT_USERS)


__all__ = ["DEFAULT_USERS", "SimpleDataStore", "new_simple_data_store"]
