"""
Single-execution guard.
"""

from __future__ import annotations

import threading
from typing import Callable


class Once:
    """Runs a callable at most once, even under concurrent callers.

    Callers that lose the race block until the winning call has finished, so
    ``done`` is only observed as True after the action completed.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def do(self, action: Callable[[], None]) -> bool:
        """Run ``action`` if no earlier call did. Returns True if it ran here."""
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            try:
                action()
            finally:
                self._done = True
        return True
