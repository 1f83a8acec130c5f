"""In-memory listener for testing the ``serve`` command without sockets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.types import ASGIApp


@dataclass
class ServeSpy:
    """Records ``serve`` calls instead of binding a port.

    The captured ``app`` can be driven with Starlette's ``TestClient`` to
    check that the command wired a working application.

    Example:
        >>> spy = ServeSpy()
        >>> spy.serve(object(), host="127.0.0.1", port=8080)  # type: ignore[arg-type]
        >>> spy.calls[0]["port"]
        8080
    """

    calls: list[dict[str, Any]] = field(default_factory=list)

    def serve(self, app: ASGIApp, *, host: str, port: int, log_level: str = "info") -> None:
        self.calls.append({"app": app, "host": host, "port": port, "log_level": log_level})

    @property
    def last_app(self) -> ASGIApp:
        """Application passed to the most recent call."""
        return self.calls[-1]["app"]

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.calls.clear()


__all__ = ["ServeSpy"]
