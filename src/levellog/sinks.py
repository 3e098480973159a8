"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any

from structlog.typing import EventDict

from .exceptions import LogFileError
from .formatters import LineFormatter
from .once import Once

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Emit a log event to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class ConsoleSink(BaseSink):
    """Colored sink writing to standard output.

    Args:
        stream: Output stream. When omitted, ``sys.stdout`` is looked up on
            every write so redirection after configuration is honoured.
    """

    def __init__(self, stream: Any = None):
        self._stream = stream

    @property
    def stream(self) -> Any:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, event_dict: EventDict) -> None:
        stream = self.stream
        stream.write(LineFormatter.format(event_dict, use_color=True) + "\n")
        stream.flush()

    def close(self) -> None:
        pass


class FileSink(BaseSink):
    """Append-only plain text file sink.

    The file is created when absent and never truncated. Its parent directory
    must already exist.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        try:
            self._file: IO[str] = open(self._path, "a", encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise LogFileError(self._path, exc) from exc
        self._write_lock = threading.Lock()
        self._closer = Once()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closer.done

    def emit(self, event_dict: EventDict) -> None:
        line = LineFormatter.format(event_dict, use_color=False) + "\n"
        with self._write_lock:
            self._file.write(line)
            self._file.flush()

    def close(self) -> None:
        self._closer.do(self._release)

    def _release(self) -> None:
        try:
            with self._write_lock:
                self._file.close()
        except OSError:
            pass  # Unflushable data is dropped
