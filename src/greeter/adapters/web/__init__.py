"""Web adapter - Starlette controller, routing, and uvicorn runner.

Contents:
    * :mod:`.controller` - :class:`Controller` handling ``/hello``
    * :mod:`.app` - :func:`build_app` ASGI application factory
    * :mod:`.server` - :func:`serve` blocking listener
"""

from __future__ import annotations

from .app import HELLO_PATH, build_app
from .controller import SAY_HELLO_TRACE, USER_ID_PARAM, Controller, new_controller
from .server import serve

__all__ = [
    "HELLO_PATH",
    "SAY_HELLO_TRACE",
    "USER_ID_PARAM",
    "Controller",
    "build_app",
    "new_controller",
    "serve",
]
