"""
Maple - Debouncer
=================
Deliver only the last value submitted within a quiet window.
"""

import threading
from typing import Any, Callable, Optional


class Debouncer:
    """
    Timer-based debouncer.

    Every submit() restarts the quiet window; the callback runs on a timer
    thread with the most recent value once the window passes.
    """

    def __init__(self, delay_seconds: float, callback: Callable[[Any], None]):
        self.delay_seconds = delay_seconds
        self.callback = callback
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._value: Any = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def submit(self, value: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._value = value
            self._timer = threading.Timer(self.delay_seconds, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> None:
        """Deliver the pending value now instead of waiting."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._timer = None
            value = self._value
        self.callback(value)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self) -> None:
        with self._lock:
            if self._timer is None or threading.current_thread() is not self._timer:
                return
            self._timer = None
            value = self._value
        self.callback(value)
