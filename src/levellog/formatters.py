"""
Message rendering and line formatting.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from structlog.typing import EventDict

from .levels import Severity

DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S.%f"

# =============================================================================
# ANSI Colors
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
}

LEVEL_COLORS = {
    Severity.DEBUG: "yellow",
    Severity.INFO: "blue",
    Severity.ERROR: "red",
    Severity.FAIL: "red",
    Severity.SUCCESS: "green",
}

FALLBACK_COLOR = "yellow"


def level_color(level: Any) -> str:
    """Return the ANSI escape used for a level, yellow when unrecognized."""
    return COLORS[LEVEL_COLORS.get(level, FALLBACK_COLOR)]


# =============================================================================
# Message Rendering
# =============================================================================


def render_message(template: str, args: tuple[Any, ...]) -> str:
    """Substitute ``args`` into a printf-style ``template``.

    With no arguments the template is returned untouched, so plain messages
    may contain literal ``%`` characters. A template that does not match its
    arguments is not an error: the arguments are appended instead.
    """
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError, KeyError):
        return " ".join([template, *(str(arg) for arg in args)])


# =============================================================================
# Line Formatter
# =============================================================================


class LineFormatter:
    """Renders ``<timestamp> | LEVEL | message`` lines.

    The console variant wraps the ``| LEVEL |`` tag in the level color and
    resets right after it; the file variant carries no escape codes.
    """

    TIMESTAMP_FORMAT = DEFAULT_TIMESTAMP_FORMAT

    @classmethod
    def configure(cls, *, timestamp_format: str | None = None) -> None:
        """Configure the timestamp prefix shared by every sink."""
        if timestamp_format:
            cls.TIMESTAMP_FORMAT = timestamp_format

    @classmethod
    def reset(cls) -> None:
        cls.TIMESTAMP_FORMAT = DEFAULT_TIMESTAMP_FORMAT

    @classmethod
    def _format_timestamp(cls, timestamp: datetime | None) -> str:
        return (timestamp or datetime.now()).strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def _level_tag(cls, level: Any, use_color: bool) -> str:
        name = level.value if isinstance(level, Severity) else "UNKNOWN"
        tag = f"| {name} |"
        if not use_color:
            return tag
        return f"{level_color(level)}{tag}{COLORS['reset']}"

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool) -> str:
        """Format an event dict into a single line without the trailing newline."""
        timestamp = cls._format_timestamp(event_dict.get("timestamp"))
        tag = cls._level_tag(event_dict.get("level", Severity.DEBUG), use_color)
        message = event_dict.get("event", "")
        return f"{timestamp} {tag} {message}"
