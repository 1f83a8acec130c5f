"""Start the HTTP listener.

Contents:
    * :func:`cli_serve` - Wire the controller into an app and serve it.
"""

from __future__ import annotations

import logging

import rich_click as click

from greeter.adapters.web.app import build_app

from ..constants import CLICK_CONTEXT_SETTINGS, PORT_RANGE
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("serve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--host", type=str, default=None, help="Interface to bind (default: [server].host)")
@click.option(
    "--port",
    type=PORT_RANGE,
    default=None,
    help="TCP port to listen on (default: [server].port, 8080)",
)
@click.pass_context
def cli_serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Serve ``GET /hello?user_id=ID`` until interrupted.

    Command-line flags win over every configuration layer.
    """
    cli_ctx = get_cli_context(ctx)
    server = cli_ctx.config.server
    bind_host = host if host is not None else server.host
    bind_port = port if port is not None else server.port

    app = build_app(cli_ctx.services.build_controller())
    logger.info("Starting listener on %s:%d", bind_host, bind_port)
    cli_ctx.services.serve(app, host=bind_host, port=bind_port, log_level=server.log_level)


__all__ = ["cli_serve"]
