"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.console` - Logger port writing to standard output
    * :mod:`.directory` - Fixed in-memory user directory
    * :mod:`.web` - Starlette controller, app, and uvicorn listener
    * :mod:`.config` - Layered configuration loading and display
    * :mod:`.logging` - Operational logging through lib_log_rich
    * :mod:`.memory` - In-memory doubles for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
