"""Public package surface exposing the greeting service and its wiring.

Imports are routed through the architectural layers:
- Domain exports: greeting text builders and errors
- Application exports: the greeting use case
- Composition exports: wired controller and web app
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeting import SimpleLogic, new_simple_logic

# Composition exports (wired adapters)
from .composition import build_controller, build_logic, build_web_app, get_config

# Domain exports
from .domain.behaviors import GOODBYE_SUFFIX, HELLO_SUFFIX, build_goodbye, build_hello
from .domain.errors import UnknownUserError

__all__ = [
    "GOODBYE_SUFFIX",
    "HELLO_SUFFIX",
    "SimpleLogic",
    "UnknownUserError",
    "build_controller",
    "build_goodbye",
    "build_hello",
    "build_logic",
    "build_web_app",
    "get_config",
    "new_simple_logic",
    "print_info",
]
