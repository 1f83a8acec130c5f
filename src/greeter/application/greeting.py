"""Greeting use case orchestrating the logger and user directory ports."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.behaviors import build_goodbye, build_hello, call_signature
from ..domain.errors import UnknownUserError
from .ports import Logger, UserDirectory


@dataclass(frozen=True, slots=True)
class SimpleLogic:
    """Business logic depending only on the :class:`Logger` and :class:`UserDirectory` ports.

    Nothing here touches a concrete adapter, so a different logger or
    directory can be swapped in without changing this class.

    Every operation logs its call signature before consulting the
    directory, whether or not the lookup succeeds.

    Example:
        >>> from greeter.adapters.console import LoggerAdapter
        >>> from greeter.adapters.directory import new_simple_data_store
        >>> logic = SimpleLogic(LoggerAdapter(lambda _: None), new_simple_data_store())
        >>> logic.say_hello("2")
        'Maryさん　こんにちは。'
        >>> logic.say_goodbye("4")
        Traceback (most recent call last):
        ...
        greeter.domain.errors.UnknownUserError: 不明なユーザー
    """

    logger: Logger
    directory: UserDirectory

    def say_hello(self, user_id: str) -> str:
        """Return the greeting for *user_id*.

        Raises:
            UnknownUserError: The directory does not know *user_id*.
        """
        self.logger.log(call_signature("SayHello", user_id))
        return build_hello(self._lookup(user_id))

    def say_goodbye(self, user_id: str) -> str:
        """Return the farewell for *user_id*.

        Raises:
            UnknownUserError: The directory does not know *user_id*.
        """
        self.logger.log(call_signature("SayGoodbye", user_id))
        return build_goodbye(self._lookup(user_id))

    def _lookup(self, user_id: str) -> str:
        name, found = self.directory.user_name_for_id(user_id)
        if not found:
            raise UnknownUserError()
        return name


def new_simple_logic(logger: Logger, directory: UserDirectory) -> SimpleLogic:
    """Factory accepting the two ports and returning the wired logic."""
    return SimpleLogic(logger=logger, directory=directory)


__all__ = ["SimpleLogic", "new_simple_logic"]
