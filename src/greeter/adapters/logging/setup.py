"""Centralized logging initialization for all entry points.

Module execution, the console script, and tests share one path into the
``lib_log_rich`` runtime so it is configured exactly once per process.

Contents:
    * :func:`init_logging` - idempotent runtime setup from the ``[logging]`` section.
    * :func:`_build_runtime_config` - maps ``[logging]`` onto ``RuntimeConfig``.

System Role:
    Lives in the adapters layer. Operational diagnostics (listener start,
    CLI commands) go through stdlib ``logging``, which is bridged into
    ``lib_log_rich``. The greeting core's own ``Logger`` port is separate
    and writes to standard output.
"""

from __future__ import annotations

import lib_log_rich.config
import lib_log_rich.runtime

from greeter import __init__conf__
from greeter.adapters.config.models import AppConfig


def _build_runtime_config(config: AppConfig) -> lib_log_rich.runtime.RuntimeConfig:
    """Build a ``RuntimeConfig`` from the validated ``[logging]`` section.

    ``service`` falls back to the package name. Every other key of the
    section, declared or passed through, becomes a keyword argument.
    """
    parsed = config.logging
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: AppConfig) -> None:
    """Initialise the ``lib_log_rich`` runtime and bridge stdlib logging into it.

    Loads ``.env`` files first so ``LOG_*`` variables take effect. Later
    calls return immediately once the runtime is up.

    Args:
        config: Loaded configuration with a ``[logging]`` section.

    Example:
        >>> init_logging(AppConfig())  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["init_logging"]
