"""Logging for the ``finance_charts`` package.

Modules log through ``get_logger(__name__)``.  Nothing is printed until the
Streamlit app (or a script) calls :func:`configure_logging`, which attaches
one stream handler to the package logger at ``FINCHARTS_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from . import config

PACKAGE_LOGGER = "finance_charts"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_package_logger = logging.getLogger(PACKAGE_LOGGER)
_package_logger.addHandler(logging.NullHandler())


def configure_logging(level: int | str | None = None, stream: IO[str] = sys.stderr) -> None:
    """Attach a stream handler to the package logger.  Later calls are ignored."""
    if any(isinstance(h, logging.StreamHandler) for h in _package_logger.handlers):
        return
    if not isinstance(level, int):
        level = logging.getLevelName(str(level or config.LOG_LEVEL).upper())
        if not isinstance(level, int):
            level = logging.INFO
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    _package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
