"""
Bridge from the standard library ``logging`` module into the dispatcher.
"""

from __future__ import annotations

import logging

from .core import get_dispatcher
from .levels import Severity


def severity_for(levelno: int) -> Severity:
    """Map a stdlib level number onto the closest Severity."""
    if levelno >= logging.WARNING:
        return Severity.ERROR
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.DEBUG


class StdLibHandler(logging.Handler):
    """
    Redirect standard library logging records to the process-wide dispatcher.
    Third-party loggers then share the same sinks and thresholds.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            get_dispatcher().log_message(msg, severity_for(record.levelno))
        except Exception:
            self.handleError(record)


def intercept_stdlib_logging(level: int = logging.DEBUG) -> StdLibHandler:
    """Replace the root logger's handlers with a ``StdLibHandler``."""
    handler = StdLibHandler()
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    return handler
