"""
Exceptions raised by the configuration entry points.

Logging calls themselves never raise; only opening the log file can fail.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LogFileError(OSError):
    """The log file could not be opened or created for appending.

    Raised by ``set_log_file``, ``init_default_log_file``, ``setup_logging``
    and ``configure_logging``. The underlying error is chained as
    ``__cause__``.
    """

    def __init__(self, path: str | Path, cause: Optional[Exception] = None) -> None:
        reason = getattr(cause, "strerror", None) or str(cause or "cannot open log file")
        super().__init__(getattr(cause, "errno", None), reason, str(path))
        self.path = Path(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"Cannot open log file '{self.path}': {self.reason}"
