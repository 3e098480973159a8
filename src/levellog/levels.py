"""
Severity levels.

Levels are ordered by declaration rank, not by how serious they are:
``DEBUG < INFO < ERROR < SUCCESS < FAIL``. Thresholds compare ranks only.
"""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"

    @property
    def rank(self) -> int:
        """Position in declaration order."""
        return _RANKS[self]

    @classmethod
    def parse(cls, value: Severity | str) -> Severity:
        """Coerce a member or a case-insensitive level name into a Severity."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown log level {value!r} (expected one of: {names})") from None


_RANKS = {member: index for index, member in enumerate(Severity)}


def should_log(msg_level: Severity, min_level: Severity) -> bool:
    """Return True when ``msg_level`` meets the ``min_level`` threshold."""
    return msg_level.rank >= min_level.rank
