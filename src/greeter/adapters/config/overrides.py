"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to AppConfig."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from pydantic import ValidationError

from .models import AppConfig

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first dot separates the section from the key path and the first
    ``=`` separates the dotted path from the value.

    Raises:
        ValueError: If the string lacks ``=``, has no dot in the key, or has
            empty section/key components.

    Examples:
        >>> override = parse_override("server.port=9090")
        >>> override.section, override.key_path, override.value
        ('server', ('port',), 9090)

        >>> parse_override("server.host=127.0.0.1").value
        '127.0.0.1'
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw string with JSON parsing, falling back to the string itself.

    Examples:
        >>> coerce_value("8080")
        8080
        >>> coerce_value("false")
        False
        >>> coerce_value("debug")
        'debug'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert *override* into the nested dict merged over the loaded sections.

    Examples:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="server", key_path=("port",), value=1))
        >>> d
        {'server': {'port': 1}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            msg = f"Expected dict at key {part!r}, got {type(existing).__name__}"
            raise TypeError(msg)
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def _deep_merge(base: dict[str, object], overlay: dict[str, object]) -> dict[str, object]:
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(cast("dict[str, object]", current), cast("dict[str, object]", value))
        else:
            merged[key] = value
    return merged


def apply_overrides(config: AppConfig, raw_overrides: tuple[str, ...]) -> AppConfig:
    """Deep-merge CLI overrides into *config* and re-validate the result.

    Returns the original object untouched when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed or the merged
            configuration fails validation.

    Examples:
        >>> cfg = AppConfig()
        >>> apply_overrides(cfg, ("server.port=9090",)).server.port
        9090
        >>> apply_overrides(cfg, ()) is cfg
        True
        >>> apply_overrides(cfg, ("server.port=0",))  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        ValueError: Invalid override for server.port: ...
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    merged = _deep_merge(cast("dict[str, object]", config.as_dict()), cast("dict[str, object]", overrides))
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValueError(f"Invalid override for {location}: {first['msg']}") from exc


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
