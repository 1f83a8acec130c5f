"""Console logger adapter - a plain function promoted to the Logger port.

Contents:
    * :func:`log_output` - write a message line to standard output.
    * :class:`LoggerAdapter` - wrap any ``(str) -> None`` callable as a Logger.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import rich_click as click

LogFunc = Callable[[str], None]


def log_output(message: str) -> None:
    """Write *message* followed by a newline to standard output.

    Example:
        >>> log_output("SayHello(1)")
        SayHello(1)
    """
    click.echo(message)


@dataclass(frozen=True, slots=True)
class LoggerAdapter:
    """Satisfy the Logger port by forwarding to a stored function.

    Example:
        >>> seen: list[str] = []
        >>> LoggerAdapter(seen.append).log("SayGoodbye(3)")
        >>> seen
        ['SayGoodbye(3)']
    """

    func: LogFunc

    def log(self, message: str) -> None:
        self.func(message)


__all__ = ["LogFunc", "LoggerAdapter", "log_output"]
