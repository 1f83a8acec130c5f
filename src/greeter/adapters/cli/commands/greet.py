"""One-shot greeting commands that bypass the HTTP listener.

Contents:
    * :func:`cli_hello` - Greet a user by identifier.
    * :func:`cli_goodbye` - Say goodbye to a user by identifier.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import rich_click as click

from greeter.application.greeting import SimpleLogic
from greeter.domain.errors import UnknownUserError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _greet(ctx: click.Context, user_id: str, operation: Callable[[SimpleLogic, str], str]) -> None:
    cli_ctx = get_cli_context(ctx)
    logic = cli_ctx.services.build_logic()
    try:
        message = operation(logic, user_id)
    except UnknownUserError as exc:
        logger.warning("Unknown user identifier %r", user_id)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.UNKNOWN_USER) from exc
    click.echo(message)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("user_id")
@click.pass_context
def cli_hello(ctx: click.Context, user_id: str) -> None:
    """Print the greeting for USER_ID, exiting with 22 when it is unknown."""
    _greet(ctx, user_id, SimpleLogic.say_hello)


@click.command("goodbye", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("user_id")
@click.pass_context
def cli_goodbye(ctx: click.Context, user_id: str) -> None:
    """Print the farewell for USER_ID, exiting with 22 when it is unknown."""
    _greet(ctx, user_id, SimpleLogic.say_goodbye)


__all__ = ["cli_goodbye", "cli_hello"]
