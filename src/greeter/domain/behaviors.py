"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

HELLO_SUFFIX = "さん　こんにちは。"
GOODBYE_SUFFIX = "さん　さようなら"


def build_hello(name: str) -> str:
    """Return the greeting addressed to *name*.

    Example:
        >>> build_hello("Fred")
        'Fredさん　こんにちは。'
    """
    return name + HELLO_SUFFIX


def build_goodbye(name: str) -> str:
    """Return the farewell addressed to *name*.

    Example:
        >>> build_goodbye("Pat")
        'Patさん　さようなら'
    """
    return name + GOODBYE_SUFFIX


def call_signature(operation: str, user_id: str) -> str:
    """Render the ``Operation(user_id)`` trace line logged on every call.

    Example:
        >>> call_signature("SayHello", "1")
        'SayHello(1)'
        >>> call_signature("SayGoodbye", "")
        'SayGoodbye()'
    """
    return operation + "(" + user_id + ")"


__all__ = [
    "GOODBYE_SUFFIX",
    "HELLO_SUFFIX",
    "build_goodbye",
    "build_hello",
    "call_signature",
]
