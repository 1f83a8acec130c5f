"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values
instead of a bare ``1``.
"""

from __future__ import annotations

from enum import IntEnum

import lib_cli_exit_tools

from greeter.domain.errors import ConfigurationError, UnknownUserError


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h conventions.

    * 0-1: generic success / failure
    * 22: EINVAL, e.g. an unknown user identifier
    * 78: EX_CONFIG, a configuration layer failed validation
    * 130: interrupted by SIGINT (informational)

    Example:
        >>> int(ExitCode.UNKNOWN_USER)
        22
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    UNKNOWN_USER = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130


def exit_code_for(exc: BaseException) -> int:
    """Map *exc* to an exit status, domain errors first.

    Anything that is not a greeter error is left to
    ``lib_cli_exit_tools.get_system_exit_code``.

    Examples:
        >>> exit_code_for(UnknownUserError())
        22
        >>> exit_code_for(ConfigurationError("bad port"))
        78
        >>> exit_code_for(SystemExit(3))
        3
    """
    if isinstance(exc, UnknownUserError):
        return int(ExitCode.UNKNOWN_USER)
    if isinstance(exc, ConfigurationError):
        return int(ExitCode.CONFIG_ERROR)
    return lib_cli_exit_tools.get_system_exit_code(exc)


__all__ = ["ExitCode", "exit_code_for"]
