"""Blocking uvicorn runner used by the ``serve`` command."""

from __future__ import annotations

import logging

import uvicorn
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def serve(app: ASGIApp, *, host: str, port: int, log_level: str = "info") -> None:
    """Serve *app* on ``host:port`` until interrupted.

    Each request runs in its own task on uvicorn's event loop; nothing here
    adds timeouts or retries.

    Args:
        app: ASGI application built by :func:`greeter.adapters.web.build_app`.
        host: Interface to bind.
        port: TCP port to listen on.
        log_level: uvicorn's own log level (access log and lifecycle).
    """
    logger.info("Starting HTTP listener", extra={"host": host, "port": port})
    uvicorn.run(app, host=host, port=port, log_level=log_level)
    logger.info("HTTP listener stopped", extra={"host": host, "port": port})


__all__ = ["serve"]
