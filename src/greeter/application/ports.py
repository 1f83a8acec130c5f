"""Application ports: Protocol definitions the greeting core depends on.

Two kinds of port live here:

* Capability ports (:class:`Logger`, :class:`UserDirectory`, :class:`Logic`)
  are small single-method Protocols. The greeting logic and the HTTP
  controller receive them at construction and never reference a concrete
  type, so any object with a matching method can be substituted
  (structural subtyping, PEP 544).
* Service ports (:class:`GetConfig`, :class:`InitLogging`,
  :class:`DisplayConfig`, :class:`BuildLogic`, :class:`BuildController`,
  :class:`ServeApp`) define a ``__call__`` whose signature matches the
  corresponding adapter function. Module-level functions satisfy them
  automatically.

System Role:
    Sits between domain and adapters. Infrastructure types (``AppConfig``,
    ``Controller``, ``ASGIApp``) are imported under ``TYPE_CHECKING`` only so
    that the layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from starlette.types import ASGIApp

    from ..adapters.config.models import AppConfig
    from ..adapters.web.controller import Controller
    from .greeting import SimpleLogic


class Logger(Protocol):
    """Record a text message somewhere observable."""

    def log(self, message: str) -> None: ...


class UserDirectory(Protocol):
    """Map an opaque user identifier to a display name.

    Returns ``(name, True)`` for known identifiers and ``("", False)``
    otherwise. Unknown or empty identifiers are not an error at this layer.
    """

    def user_name_for_id(self, user_id: str) -> tuple[str, bool]: ...


class Logic(Protocol):
    """The greeting operation the HTTP controller depends on."""

    def say_hello(self, user_id: str) -> str: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> AppConfig: ...


class InitLogging(Protocol):
    """Configure operational logging from the loaded configuration."""

    def __call__(self, config: AppConfig) -> None: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: AppConfig, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class BuildLogic(Protocol):
    """Wire concrete capabilities into the greeting use case."""

    def __call__(self, *, logger: Logger | None = ..., directory: UserDirectory | None = ...) -> SimpleLogic: ...


class BuildController(Protocol):
    """Wire concrete capabilities into a ready-to-route controller."""

    def __call__(self, *, logger: Logger | None = ..., directory: UserDirectory | None = ...) -> Controller: ...


class ServeApp(Protocol):
    """Run an ASGI application until the process is stopped."""

    def __call__(self, app: ASGIApp, *, host: str, port: int, log_level: str = ...) -> None: ...


__all__ = [
    "BuildController",
    "BuildLogic",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "Logger",
    "Logic",
    "ServeApp",
    "UserDirectory",
]
