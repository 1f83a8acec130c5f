"""Starlette application exposing the controller's single route."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.routing import Route

from .controller import Controller

#: Path the greeting handler is mounted on.
HELLO_PATH = "/hello"


def build_app(controller: Controller) -> Starlette:
    """Create the ASGI application routing ``GET /hello`` to *controller*.

    Any other path falls through to Starlette's default 404 response.

    Example:
        >>> from greeter.composition import build_controller
        >>> app = build_app(build_controller())
        >>> [route.path for route in app.routes]
        ['/hello']
    """
    routes = [
        Route(HELLO_PATH, endpoint=controller.say_hello, methods=["GET"]),
    ]
    return Starlette(debug=False, routes=routes)


__all__ = ["HELLO_PATH", "build_app"]
