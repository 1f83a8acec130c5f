"""Configuration display CLI command.

Contents:
    * :func:`cli_config` - Display merged configuration.
"""

from __future__ import annotations

import logging

import rich_click as click

from greeter.adapters.config.models import AppConfig
from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only a specific configuration section (e.g., 'server')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Override profile from root command (e.g., 'production', 'test')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the current merged configuration from all sources.

    Precedence: defaults -> user -> dotenv -> env -> --set
    """
    cli_ctx = get_cli_context(ctx)
    effective_config, effective_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    logger.info("Displaying configuration (format=%s, section=%s, profile=%s)", fmt.value, section, effective_profile)
    try:
        cli_ctx.services.display_config(effective_config, output_format=fmt, section=section, profile=effective_profile)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.GENERAL_ERROR) from exc


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[AppConfig, str | None]:
    """Resolve configuration from context or reload with a profile override.

    A subcommand-level profile reloads configuration and reapplies the
    root-level ``--set`` overrides stored in the CLI context.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    try:
        config = cli_ctx.services.get_config(profile=profile)
        return apply_overrides(config, cli_ctx.set_overrides), profile
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc


__all__ = ["cli_config"]
