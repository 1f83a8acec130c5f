"""Root CLI command group and global option handling.

Defines the top-level Click group. Handles the global ``--traceback``,
``--profile``, and ``--set`` flags before any subcommand runs.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from greeter import __init__conf__
from greeter.adapters.config.models import AppConfig
from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.errors import ConfigurationError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _apply_cli_overrides(config: AppConfig, set_overrides: tuple[str, ...]) -> AppConfig:
    """Apply ``--set`` overrides, turning malformed input into a UsageError."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _load_config(services: AppServices, profile: str | None) -> AppConfig:
    """Load configuration, turning bad profiles and invalid layers into clean exits."""
    try:
        return services.get_config(profile=profile)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. server.port=9090",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve services, load configuration once, and initialise logging.

    ``ctx.obj`` arrives as the services factory (production or testing) and
    leaves as a :class:`~greeter.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["hello", "1"], obj=build_testing)
        >>> result.exit_code
        0
        >>> "Fredさん　こんにちは。" in result.output
        True
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_config(services, profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so registration is deferred until
# the group above exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_goodbye, cli_hello, cli_info, cli_serve

    for cmd in (cli_serve, cli_hello, cli_goodbye, cli_info, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
