"""Verbosity handling driven by the ``DEBUG`` environment variable.

Verbosity levels:

* ``-1``: nothing is logged
* ``0``: errors only
* ``1``: errors and warnings
* ``2``: adds informational messages
* ``3``: adds trace messages
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Mapping
from typing import TextIO

TRACE = 5
"""Logging level used for trace messages, below ``logging.DEBUG``."""

LOGGER_NAME = "mnistnet"

_SILENT = logging.CRITICAL + 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

logging.addLevelName(TRACE, "TRACE")


def debug_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Read the verbosity from ``DEBUG``, defaulting to 0.

    The value is read like C's ``atoi``: leading blanks and a sign are
    accepted, parsing stops at the first non-digit, and text without a
    leading number counts as 0.
    """
    if environ is None:
        environ = os.environ
    raw = environ.get("DEBUG")
    if raw is None:
        return 0
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else 0


def log_level_for(debug_level: int) -> int:
    """Map a verbosity level to the matching :mod:`logging` level."""
    if debug_level < 0:
        return _SILENT
    if debug_level == 0:
        return logging.ERROR
    if debug_level == 1:
        return logging.WARNING
    if debug_level == 2:
        return logging.INFO
    return TRACE


def configure_logging(level: int, stream: TextIO | None = None) -> logging.Logger:
    """Set up the package logger for the given verbosity and return it.

    Messages are written to ``stream`` (standard output by default) as
    ``[LEVEL] file:line message``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(
        logging.Formatter("[%(levelname)s] %(filename)s:%(lineno)d %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(log_level_for(level))
    logger.propagate = False
    return logger