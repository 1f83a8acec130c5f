"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

UNKNOWN_USER_MESSAGE = "不明なユーザー"


class UnknownUserError(LookupError):
    """The user directory has no entry for the requested identifier.

    The only failure the greeting logic can produce. The message text is
    user-facing: the HTTP controller sends it verbatim as the body of a
    400 response and the CLI prints it on stderr.

    Example:
        >>> from greeter.domain.errors import UnknownUserError
        >>> str(UnknownUserError())
        '不明なユーザー'
        >>> isinstance(UnknownUserError(), LookupError)
        True
    """

    def __init__(self, message: str = UNKNOWN_USER_MESSAGE) -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """A configuration layer holds values that fail validation.

    Caught at the CLI boundary, which prints the message and exits 78.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("server.port must be between 1 and 65535")
        >>> str(err)
        'server.port must be between 1 and 65535'
    """


__all__ = [
    "UNKNOWN_USER_MESSAGE",
    "ConfigurationError",
    "UnknownUserError",
]
