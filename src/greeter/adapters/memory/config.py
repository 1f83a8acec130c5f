"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters but never touch the
filesystem, the environment, or ``.env`` files.
"""

from __future__ import annotations

from ...domain.enums import OutputFormat
from ..config.models import AppConfig


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> AppConfig:
    """Return the built-in defaults regardless of profile."""
    return AppConfig()


def display_config_in_memory(
    config: AppConfig,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
