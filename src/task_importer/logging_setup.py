# src/task_importer/logging_setup.py

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import get_settings

LOGGER_NAMESPACE = "task_importer"

# Task modules are executed under this package name, so a task file that does
# logging.getLogger(__name__) logs below our namespace too.
LOADED_NAMESPACE = f"{LOGGER_NAMESPACE}.loaded"


class _NamespaceFilter(logging.Filter):
    """
    Keep the diagnostic stream readable:
    - allow every task_importer record that passed the level check
    - but suppress chatter from loaded task modules unless WARNING+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(LOADED_NAMESPACE + "."):
            return record.levelno >= logging.WARNING
        return True


_handler: logging.Handler | None = None


def setup_logging(
    *,
    level: int | str | None = None,
    debug: bool | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """
    Turn on the task_importer diagnostic channel.

    The library itself never attaches handlers; nothing is printed unless the
    embedding build script calls this (or configures logging on its own).

    - debug=True (or TASK_IMPORTER_DEBUG=1) traces every scanned file
    - level overrides TASK_IMPORTER_LOG_LEVEL otherwise

    Calling it again replaces the handler installed by the previous call.
    """
    global _handler

    settings = get_settings()
    if debug is None:
        debug = settings.debug

    if debug:
        resolved = logging.DEBUG
    elif level is None:
        resolved = getattr(logging, settings.log_level, logging.WARNING)
    elif isinstance(level, str):
        resolved = getattr(logging, level.upper(), logging.WARNING)
    else:
        resolved = level

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(resolved)

    # Remove our previous handler to avoid duplicate lines.
    if _handler is not None:
        logger.removeHandler(_handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(stream if stream is not None else sys.stderr)
    ch.setLevel(resolved)
    ch.setFormatter(fmt)
    ch.addFilter(_NamespaceFilter())
    logger.addHandler(ch)

    _handler = ch
    return ch
