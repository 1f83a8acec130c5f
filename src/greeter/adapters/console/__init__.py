"""Console adapter - standard output implementation of the Logger port.

Contents:
    * :func:`.logger.log_output` - Reference console function
    * :class:`.logger.LoggerAdapter` - Function-to-Logger adapter
"""

from __future__ import annotations

from .logger import LogFunc, LoggerAdapter, log_output

__all__ = ["LogFunc", "LoggerAdapter", "log_output"]
