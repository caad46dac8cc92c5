from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_SESSION_TICK_SECONDS
from ..core.enums import ScanType, SessionState
from ..core.exceptions import AlreadyActiveError
from .model import ElapsedTime, ScanEvent, WorkSession
from .ticker import PeriodicTicker

logger = logging.getLogger(__name__)


class SessionTracker:
    """Two-state machine (IDLE -> ACTIVE -> IDLE) for one employee device.

    begin_session and end_session are atomic, so concurrent scans for the
    same employee open at most one session. When `on_tick` is given, the
    elapsed time is pushed to it every `tick_seconds` while the session is
    active; on_tick runs on the ticker thread and must not begin or end
    sessions itself.
    """

    def __init__(
        self,
        *,
        owner: Optional[object] = None,
        on_tick: Optional[Callable[[ElapsedTime], None]] = None,
        tick_seconds: float = DEFAULT_SESSION_TICK_SECONDS,
        clock: Callable[[], datetime] = now_local,
        ticker_factory: Callable[..., PeriodicTicker] = PeriodicTicker,
    ):
        self._owner = owner
        self._on_tick = on_tick
        self._tick_seconds = tick_seconds
        self._clock = clock
        self._ticker_factory = ticker_factory
        self._session: Optional[WorkSession] = None
        self._ticker: Optional[PeriodicTicker] = None
        self._lock = threading.RLock()

    @property
    def state(self) -> SessionState:
        return SessionState.ACTIVE if self._session is not None else SessionState.IDLE

    @property
    def session(self) -> Optional[WorkSession]:
        return self._session

    def begin_session(self, started_at: Optional[datetime] = None) -> WorkSession:
        with self._lock:
            if self._session is not None:
                raise AlreadyActiveError("Phiên làm việc đang mở, không thể check-in lần nữa")

            session = WorkSession(started_at=started_at or self._clock())
            self._session = session
            if self._on_tick is not None:
                self._ticker = self._ticker_factory(self._tick, self._tick_seconds)
                self._ticker.start()

        logger.info("Work session started owner=%s at=%s", self._owner, session.started_at.isoformat())
        return session

    def elapsed(self, now: Optional[datetime] = None) -> Optional[ElapsedTime]:
        """Working time since check-in, or None while idle."""
        session = self._session
        if session is None:
            return None
        return ElapsedTime.from_timedelta((now or self._clock()) - session.started_at)

    def end_session(self) -> Optional[WorkSession]:
        """Close the active session. Calling it while idle is a no-op."""
        with self._lock:
            session = self._session
            if session is None:
                return None

            # Cancel before clearing: the ticker joins its thread, so no tick
            # survives this call.
            ticker, self._ticker = self._ticker, None
            if ticker is not None:
                ticker.cancel()
            self._session = None

        logger.info("Work session ended owner=%s started_at=%s", self._owner, session.started_at.isoformat())
        return session

    def handle_scan(self, event: ScanEvent, now: Optional[datetime] = None) -> Optional[WorkSession]:
        """Apply a successful scan: check-in opens a session, check-out closes it."""
        if event.scan_type == ScanType.CHECKIN:
            return self.begin_session(now)
        return self.end_session()

    def _tick(self) -> None:
        elapsed = self.elapsed()
        if elapsed is not None and self._on_tick is not None:
            self._on_tick(elapsed)
