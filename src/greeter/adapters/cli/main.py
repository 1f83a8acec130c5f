"""Run the greeter CLI and turn its outcome into a process exit status.

Both ``python -m greeter`` and the ``greeter`` console script end up in
:func:`main`.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state
from .exit_codes import exit_code_for

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return exit_code_for(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # commands print their own message before exiting
        return exit_code_for(exc)
    except BaseException as exc:
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run one CLI invocation and return its exit status.

    ``services_factory`` picks the wiring: ``build_production`` for real
    runs, ``build_testing`` for in-memory doubles. The ``--traceback``
    flags are put back afterwards unless *restore_traceback* is false.

    Raises:
        ValueError: No services factory was given.

    Example:
        >>> from greeter.composition import build_testing
        >>> main(["goodbye", "3"], services_factory=build_testing)
        Patさん　さようなら
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required: entry points pass build_production, tests build_testing")

    args = list(argv) if argv is not None else sys.argv[1:]
    saved = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # worker threads leave the shared runtime alone
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
