"""Validated configuration sections.

Raw layered values are parsed into these models at the boundary so every
consumer sees typed fields.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

UvicornLogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ServerConfigModel(BaseModel):
    """The ``[server]`` section.

    Example:
        >>> ServerConfigModel().port
        8080
        >>> ServerConfigModel(host="127.0.0.1", port=9000).host
        '127.0.0.1'
    """

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: UvicornLogLevel = "info"

    model_config = ConfigDict(extra="forbid", frozen=True)


class LoggingConfigModel(BaseModel):
    """The ``[logging]`` section, handed to ``lib_log_rich.runtime.RuntimeConfig``.

    ``service`` defaults to the package name when unset. Keys beyond the
    declared ones pass through unchanged as ``RuntimeConfig`` arguments.

    Example:
        >>> LoggingConfigModel().console_level
        'INFO'
        >>> LoggingConfigModel(console_level="debug").console_level
        'DEBUG'
        >>> LoggingConfigModel(force_color=True).model_dump()["force_color"]
        True
    """

    service: str | None = None
    environment: str = "prod"
    console_level: LogLevel = "INFO"

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("console_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseModel):
    """Complete, immutable application configuration.

    Example:
        >>> config = AppConfig()
        >>> config.server.port, config.logging.environment
        (8080, 'prod')
        >>> config.section("server")["host"]
        '0.0.0.0'
    """

    server: ServerConfigModel = Field(default_factory=ServerConfigModel)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def as_dict(self) -> dict[str, dict[str, object]]:
        """Return every section as plain nested dicts."""
        return self.model_dump()

    def section(self, name: str) -> dict[str, object]:
        """Return one section as a plain dict.

        Raises:
            ValueError: *name* is not a configuration section.
        """
        sections = self.as_dict()
        if name not in sections:
            raise ValueError(f"Unknown configuration section {name!r}; expected one of {sorted(sections)}")
        return sections[name]


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "AppConfig",
    "LogLevel",
    "LoggingConfigModel",
    "ServerConfigModel",
    "UvicornLogLevel",
]
