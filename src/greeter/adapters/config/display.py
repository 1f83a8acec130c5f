"""Display configuration as TOML-like text or JSON.

Flushes pending log output before rendering so log lines do not interleave
with the configuration dump.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
from rich.console import Console

from greeter.domain.enums import OutputFormat

from .models import AppConfig


def _render_human(console: Console, sections: dict[str, dict[str, object]], profile: str | None) -> None:
    if profile:
        console.print(f"# profile: {profile}", markup=False, highlight=False)
    for index, (name, values) in enumerate(sections.items()):
        if index:
            console.print()
        console.print(f"[bold cyan]\\[{name}][/bold cyan]")
        for key, value in values.items():
            rendered = orjson.dumps(value).decode() if value is not None else "# unset"
            console.print(f"{key} = {rendered}", markup=False, highlight=False)


def display_config(
    config: AppConfig,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render *config* on a Rich console.

    Args:
        config: Already-loaded configuration to display.
        output_format: TOML-like human output or JSON.
        section: Optional section name (e.g. ``server``) to restrict output.
        console: Optional Rich Console, mainly for tests.
        profile: Optional profile name noted in the human header.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    target = console if console is not None else Console()

    sections = config.as_dict() if section is None else {section: config.section(section)}

    if output_format is OutputFormat.JSON:
        payload = sections[section] if section is not None else sections
        target.print_json(orjson.dumps(payload).decode())
        return

    _render_human(target, sections, profile)


__all__ = ["display_config"]
