"""CLI boundary stories: exit-code mapping on top of lib_cli_exit_tools."""

from __future__ import annotations

import lib_cli_exit_tools
import pytest

from greeter.adapters.cli.exit_codes import ExitCode, exit_code_for
from greeter.domain.errors import ConfigurationError, UnknownUserError


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (UnknownUserError(), ExitCode.UNKNOWN_USER),
        (ConfigurationError("x"), ExitCode.CONFIG_ERROR),
    ],
)
def test_domain_errors_have_dedicated_exit_codes(exc: BaseException, code: int) -> None:
    """Greeter's own errors map to 22 and 78."""
    assert exit_code_for(exc) == code


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "exc",
    [SystemExit(5), KeyboardInterrupt(), RuntimeError("x")],
)
def test_other_exceptions_follow_lib_cli_exit_tools(exc: BaseException) -> None:
    """Anything else is mapped exactly as lib_cli_exit_tools maps it."""
    assert exit_code_for(exc) == lib_cli_exit_tools.get_system_exit_code(exc)


@pytest.mark.os_agnostic
def test_system_exit_keeps_its_code() -> None:
    """An explicit SystemExit status passes through unchanged."""
    assert exit_code_for(SystemExit(3)) == 3
