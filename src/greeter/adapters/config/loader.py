"""Configuration loader with caching and profile support.

Sources in precedence order (lowest first):

1. the bundled ``defaultconfig.toml``;
2. the user file ``<app dir>/config.toml`` (or
   ``<app dir>/profile/<name>/config.toml`` when a profile is selected);
3. a ``.env`` file in ``start_dir`` (current directory by default);
4. ``GREETER_<SECTION>__<KEY>`` environment variables.

pydantic-settings merges the layers; the result is validated into an
immutable :class:`~greeter.adapters.config.models.AppConfig`.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar, Protocol, cast

import rich_click as click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from greeter import __init__conf__
from greeter.domain.errors import ConfigurationError

from .models import AppConfig

DEFAULT_MAX_PROFILE_LENGTH = 64
_PROFILE_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> AppConfig: ...
    def cache_clear(self) -> None: ...


class _LayeredSources(BaseSettings):
    """Raw sections merged from every source, validated afterwards."""

    model_config = SettingsConfigDict(
        env_prefix=__init__conf__.ENV_PREFIX,
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    toml_files: ClassVar[tuple[Path, ...]] = ()

    server: dict[str, Any] = Field(default_factory=dict)
    logging: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win, so the most specific TOML file goes first.
        toml_sources = tuple(TomlConfigSettingsSource(settings_cls, toml_file=path) for path in reversed(cls.toml_files))
        for source in toml_sources:
            _reject_unknown_sections(source, settings_cls)
        return (init_settings, env_settings, dotenv_settings, *toml_sources)


def _reject_unknown_sections(source: TomlConfigSettingsSource, settings_cls: type[BaseSettings]) -> None:
    """Fail on top-level TOML tables that no configuration section models.

    ``extra="ignore"`` stays on the settings class because the dotenv
    source hands it every line of ``.env``, ``LOG_*`` variables included.
    """
    unknown = sorted(set(source.toml_data) - set(settings_cls.model_fields))
    if unknown:
        raise ConfigurationError(
            f"invalid configuration: unknown section(s) {', '.join(unknown)} in {source.toml_file_path}"
        )


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or could escape the config dir.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("production")

        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: '../etc/passwd'
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    if not profile:
        raise ValueError("profile must not be empty")
    if len(profile) > length:
        raise ValueError(f"profile exceeds maximum length of {length} characters")
    if not _PROFILE_PATTERN.match(profile):
        raise ValueError(f"profile contains invalid characters: {profile!r}")


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> path = get_default_config_path()
        >>> path.name
        'defaultconfig.toml'
        >>> path.exists()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


def get_user_config_path(profile: str | None = None) -> Path:
    """Return the per-user config file, inside a profile subdirectory when given.

    Example:
        >>> get_user_config_path("staging").parts[-3:]
        ('profile', 'staging', 'config.toml')
    """
    base = Path(click.get_app_dir(__init__conf__.CONFIG_APP_NAME))
    if profile:
        base = base / "profile" / profile
    return base / "config.toml"


def _sources_for(paths: tuple[Path, ...]) -> type[_LayeredSources]:
    class _ProfileSources(_LayeredSources):
        toml_files: ClassVar[tuple[Path, ...]] = paths

    return _ProfileSources


# Loaded once per (profile, start_dir) and kept for the process lifetime;
# the listener reads it exactly once at startup.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> AppConfig:
    """Cached read; the caller has already validated *profile*."""
    sources_cls = _sources_for((get_default_config_path(), get_user_config_path(profile)))
    env_file = Path(start_dir) / ".env" if start_dir else Path(".env")
    try:
        raw = sources_cls(_env_file=env_file)  # type: ignore[call-arg]
        return AppConfig.model_validate(raw.model_dump())
    except ValidationError as exc:
        raise ConfigurationError(describe_validation_error(exc)) from exc


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
    return f"invalid configuration: {details}"


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> AppConfig:
    """Load layered configuration with application defaults.

    Args:
        profile: Optional profile name; selects ``profile/<name>/config.toml``
            as the user layer.
        start_dir: Optional directory holding the ``.env`` file. Defaults to
            the current working directory.

    Returns:
        Immutable, validated configuration.

    Raises:
        ValueError: The profile name is invalid.
        ConfigurationError: A layer holds values that fail validation.

    Example:
        >>> config = get_config()
        >>> config.server.port
        8080
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Invalidate cached configuration so the next call re-reads every layer."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once the wrapper is
# cast to a Protocol, so attach it explicitly.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "DEFAULT_MAX_PROFILE_LENGTH",
    "describe_validation_error",
    "get_config",
    "get_default_config_path",
    "get_user_config_path",
    "validate_profile",
]
