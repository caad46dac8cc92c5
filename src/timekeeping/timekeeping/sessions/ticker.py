from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTicker:
    """Run a callback every `interval_seconds` on a daemon thread until cancelled.

    cancel() is effective once; after it returns the callback never runs again.
    """

    def __init__(self, callback: Callable[[], None], interval_seconds: float, *, name: str = "session-ticker"):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._callback = callback
        self._interval = float(interval_seconds)
        self._name = name
        self._stopped = threading.Event()
        self._lock = threading.RLock()
        self._cancelled = False
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    def start(self) -> None:
        with self._lock:
            if self._cancelled:
                raise RuntimeError("ticker already cancelled")
            if self._thread is not None:
                return
            self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()

    def cancel(self) -> bool:
        """Stop the ticker. Returns False if it was already cancelled."""
        with self._lock:
            if self._cancelled:
                return False
            self._cancelled = True
            self._stopped.set()

        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        return True

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            with self._lock:
                if self._stopped.is_set():
                    return
                try:
                    self._callback()
                except Exception:
                    logger.exception("Ticker %s callback failed", self._name)
