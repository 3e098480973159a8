"""
levellog: a leveled logger with colored console and append-only file output.

Console and file each have their own threshold:

    import levellog

    levellog.setup_logging(levellog.INFO, levellog.DEBUG)
    levellog.info("x=%d", 42)
    levellog.close()

Library: structlog processor pipeline fanning out to two sinks.
"""

from .config import LoggingSettings
from .core import (
    LogDispatcher,
    close,
    configure_logging,
    debug,
    error,
    fail,
    get_dispatcher,
    info,
    init_default_log_file,
    log_message,
    reset_dispatcher,
    set_console_level,
    set_file_level,
    set_log_file,
    setup_logging,
    success,
)
from .exceptions import LogFileError
from .interceptors import StdLibHandler, intercept_stdlib_logging
from .levels import Severity, should_log

DEBUG = Severity.DEBUG
INFO = Severity.INFO
ERROR = Severity.ERROR
SUCCESS = Severity.SUCCESS
FAIL = Severity.FAIL

__all__ = [
    "DEBUG",
    "INFO",
    "ERROR",
    "SUCCESS",
    "FAIL",
    "Severity",
    "should_log",
    "LogDispatcher",
    "LoggingSettings",
    "LogFileError",
    "StdLibHandler",
    "intercept_stdlib_logging",
    "get_dispatcher",
    "reset_dispatcher",
    "setup_logging",
    "configure_logging",
    "set_console_level",
    "set_file_level",
    "set_log_file",
    "init_default_log_file",
    "close",
    "log_message",
    "debug",
    "info",
    "error",
    "success",
    "fail",
]
