"""
Default log directory resolution.
"""

from __future__ import annotations

import sys
from pathlib import Path


def is_frozen() -> bool:
    """True when running from a bundled executable (PyInstaller, cx_Freeze, ...)."""
    return bool(getattr(sys, "frozen", False))


def default_log_dir() -> Path:
    """Directory holding the default log file.

    A bundled application logs next to its executable; an interpreter run
    logs into the current working directory.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return Path.cwd()
