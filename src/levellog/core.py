"""
Core dispatch engine and the process-wide logger.

Thread-safety: replacing or closing the file sink is serialized, and the
handle is closed through a once-guard. Threshold changes and the logging
path itself are unsynchronized; a message racing a reconfiguration may be
filtered against either the old or the new threshold, or hit a handle that
was just closed, in which case the write is dropped.
"""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, WrappedLogger

from .config import DEFAULT_LOG_FILE_NAME, LoggingSettings
from .exceptions import LogFileError
from .formatters import LineFormatter, render_message
from .levels import Severity, should_log
from .paths import default_log_dir
from .sinks import BaseSink, ConsoleSink, FileSink

# =============================================================================
# Structlog Plumbing
# =============================================================================


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp the event with local wall-clock time."""
    event_dict.setdefault("timestamp", datetime.now())
    return event_dict


# =============================================================================
# Dispatcher
# =============================================================================


class LogDispatcher:
    """Fans log events out to a console sink and an optional file sink.

    Each sink has its own threshold. Sinks that are not configured, or whose
    threshold is above the event level, are skipped without error.
    """

    def __init__(self, console_stream: Any = None) -> None:
        self.console_level: Severity = Severity.DEBUG
        self.file_level: Severity = Severity.DEBUG
        self._console_stream = console_stream
        self._console_sink: Optional[ConsoleSink] = None
        self._file_sink: Optional[FileSink] = None
        self._file_lock = threading.Lock()
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=_NOP_FILE),
            processors=[add_timestamp, self._render_to_sinks],
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def console_sink(self) -> Optional[ConsoleSink]:
        return self._console_sink

    @property
    def file_sink(self) -> Optional[FileSink]:
        return self._file_sink

    def set_console_level(self, level: Severity | str) -> None:
        """Set the console threshold and (re)create the console sink."""
        self.console_level = Severity.parse(level)
        self._console_sink = ConsoleSink(self._console_stream)

    def set_file_level(self, level: Severity | str) -> None:
        """Set the file threshold. The file sink itself is left alone."""
        self.file_level = Severity.parse(level)

    def set_log_file(self, path: str | Path) -> None:
        """Open ``path`` for appending and make it the active file sink.

        The new file is opened first; the previous sink is closed only once
        the replacement succeeded, so a failed call keeps the old file.

        Raises:
            LogFileError: if the file cannot be opened or created.
        """
        sink = FileSink(path)
        with self._file_lock:
            previous, self._file_sink = self._file_sink, sink
        if previous is not None:
            previous.close()

    def init_default_log_file(self, log_dir: str | Path | None = None, file_name: str = DEFAULT_LOG_FILE_NAME) -> None:
        """Open ``out.log`` in the default log directory."""
        if log_dir is None:
            try:
                log_dir = default_log_dir()
            except OSError as exc:
                raise LogFileError(file_name, exc) from exc
        self.set_log_file(Path(log_dir) / file_name)

    def setup_logging(self, console_level: Severity | str, file_level: Severity | str) -> None:
        """Shortcut for both thresholds plus the default log file."""
        self.set_console_level(console_level)
        self.set_file_level(file_level)
        self.init_default_log_file()

    def configure(self, settings: LoggingSettings) -> None:
        """Apply a settings object: thresholds, timestamp format, log file."""
        LineFormatter.configure(timestamp_format=settings.timestamp_format)
        self.set_console_level(settings.console_level)
        self.set_file_level(settings.file_level)
        self.init_default_log_file(settings.log_dir, settings.file_name)

    def close(self) -> None:
        """Release the file sink. Safe to call any number of times."""
        with self._file_lock:
            sink, self._file_sink = self._file_sink, None
        if sink is not None:
            sink.close()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def log_message(self, template: str, level: Severity | str, *args: Any) -> None:
        """Render ``template`` with ``args`` and dispatch it at ``level``.

        Level names are accepted like the setters accept them. A name that is
        not a known level is tagged ``UNKNOWN`` and filtered with DEBUG rank.
        """
        try:
            level = Severity.parse(level)
        except ValueError:
            pass  # Kept as-is; rendered as UNKNOWN
        self._logger.msg(render_message(template, args), level=level)

    def _targets(self, level: Severity | str) -> list[BaseSink]:
        if not isinstance(level, Severity):
            level = Severity.DEBUG
        targets: list[BaseSink] = []
        file_sink = self._file_sink
        if file_sink is not None and should_log(level, self.file_level):
            targets.append(file_sink)
        console_sink = self._console_sink
        if console_sink is not None and should_log(level, self.console_level):
            targets.append(console_sink)
        return targets

    def _render_to_sinks(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        """Render to every sink whose threshold passes. Returns empty to suppress default output."""
        for sink in self._targets(event_dict["level"]):
            try:
                sink.emit(event_dict)
            except Exception:
                pass  # Logging never breaks the caller
        return ""

    def debug(self, template: str, *args: Any) -> None:
        self.log_message(template, Severity.DEBUG, *args)

    def info(self, template: str, *args: Any) -> None:
        self.log_message(template, Severity.INFO, *args)

    def error(self, template: str, *args: Any) -> None:
        self.log_message(template, Severity.ERROR, *args)

    def success(self, template: str, *args: Any) -> None:
        self.log_message(template, Severity.SUCCESS, *args)

    def fail(self, template: str, *args: Any) -> None:
        self.log_message(template, Severity.FAIL, *args)


# =============================================================================
# Process-wide Instance
# =============================================================================

_dispatcher = LogDispatcher()


def get_dispatcher() -> LogDispatcher:
    """Return the process-wide dispatcher."""
    return _dispatcher


def reset_dispatcher(console_stream: Any = None) -> LogDispatcher:
    """Close the current dispatcher and install a fresh, unconfigured one."""
    global _dispatcher

    _dispatcher.close()
    LineFormatter.reset()
    _dispatcher = LogDispatcher(console_stream)
    return _dispatcher


def setup_logging(console_level: Severity | str, file_level: Severity | str) -> None:
    """
    Configure both thresholds and open ``out.log`` in the default directory.

    Shortcut for::

        set_console_level(...)
        set_file_level(...)
        init_default_log_file()

    Raises:
        LogFileError: if the default log file cannot be opened.
    """
    _dispatcher.setup_logging(console_level, file_level)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """
    Configure the logger from ``LoggingSettings`` (``LEVELLOG_*`` env vars).

    Args:
        settings: Explicit settings; loaded from the environment when omitted.
    """
    _dispatcher.configure(settings or LoggingSettings())


def set_console_level(level: Severity | str) -> None:
    """Set the minimum level for console output."""
    _dispatcher.set_console_level(level)


def set_file_level(level: Severity | str) -> None:
    """Set the minimum level for file output."""
    _dispatcher.set_file_level(level)


def set_log_file(path: str | Path) -> None:
    """Append file output to ``path``, creating the file if needed."""
    _dispatcher.set_log_file(path)


def init_default_log_file() -> None:
    """Open ``out.log`` in the working directory, or next to a bundled executable."""
    _dispatcher.init_default_log_file()


def close() -> None:
    """Close the log file. Can be called any number of times."""
    _dispatcher.close()


def log_message(template: str, level: Severity | str, *args: Any) -> None:
    """Log at ``level``, honouring the console and file thresholds."""
    _dispatcher.log_message(template, level, *args)


def debug(template: str, *args: Any) -> None:
    """Log a message at DEBUG level."""
    _dispatcher.log_message(template, Severity.DEBUG, *args)


def info(template: str, *args: Any) -> None:
    """Log a message at INFO level."""
    _dispatcher.log_message(template, Severity.INFO, *args)


def error(template: str, *args: Any) -> None:
    """Log a message at ERROR level."""
    _dispatcher.log_message(template, Severity.ERROR, *args)


def success(template: str, *args: Any) -> None:
    """Log a message at SUCCESS level."""
    _dispatcher.log_message(template, Severity.SUCCESS, *args)


def fail(template: str, *args: Any) -> None:
    """Log a message at FAIL level."""
    _dispatcher.log_message(template, Severity.FAIL, *args)
