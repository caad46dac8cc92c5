from __future__ import annotations

import threading
from typing import Callable, Dict, Hashable, Optional

from .tracker import SessionTracker


class SessionRegistry:
    """One SessionTracker per employee; the lock only guards the mapping."""

    def __init__(self, tracker_factory: Optional[Callable[[Hashable], SessionTracker]] = None):
        self._factory = tracker_factory or (lambda owner: SessionTracker(owner=owner))
        self._trackers: Dict[Hashable, SessionTracker] = {}
        self._lock = threading.Lock()

    def get(self, employee_id: Hashable) -> SessionTracker:
        with self._lock:
            tracker = self._trackers.get(employee_id)
            if tracker is None:
                tracker = self._factory(employee_id)
                self._trackers[employee_id] = tracker
            return tracker

    def discard(self, employee_id: Hashable) -> None:
        with self._lock:
            tracker = self._trackers.pop(employee_id, None)
        if tracker is not None:
            tracker.end_session()

    def __len__(self) -> int:
        with self._lock:
            return len(self._trackers)
