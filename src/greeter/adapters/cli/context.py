"""State handed from the root group to every greeter subcommand.

The root group swaps ``ctx.obj`` from the services factory to a
:class:`CLIContext`. The ``--traceback`` switch lives in
``lib_cli_exit_tools.config`` so the exception renderer sees it too.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click

from greeter.adapters.config.models import AppConfig

if TYPE_CHECKING:
    from greeter.composition import AppServices

#: ``(traceback, traceback_force_color)`` as read from ``lib_cli_exit_tools.config``.
TracebackState = tuple[bool, bool]


@dataclass(slots=True)
class CLIContext:
    """Resolved services and configuration for one CLI run."""

    traceback: bool
    config: AppConfig
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: AppConfig,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Put a :class:`CLIContext` on *ctx* in place of the services factory.

    ``set_overrides`` is kept so ``config --profile`` can reapply the
    root-level ``--set`` values after reloading.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from greeter.composition import build_testing
        >>> holder = MagicMock()
        >>> store_cli_context(holder, traceback=True, config=AppConfig(), services=build_testing())
        >>> holder.obj.config.server.port
        8080
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the :class:`CLIContext` the root group stored.

    Raises:
        RuntimeError: The root group has not run for this context.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for the exception renderer.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback_force_color
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    settings = lib_cli_exit_tools.config
    return bool(settings.traceback), bool(settings.traceback_force_color)


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
