"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Listener command from :mod:`.serve`
    * Greeting commands from :mod:`.greet`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_goodbye, cli_hello
from .info import cli_info
from .serve import cli_serve

__all__ = [
    "cli_config",
    "cli_goodbye",
    "cli_hello",
    "cli_info",
    "cli_serve",
]
