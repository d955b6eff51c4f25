from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, MutableMapping, Optional

from flask import session as flask_session


class SessionState:
    """Login state kept in the Flask session.

    Keys: ``user_id`` and ``user_refresh_time`` (UNIX seconds after which the
    login is no longer trusted).
    """

    USER_ID = "user_id"
    REFRESH_TIME = "user_refresh_time"

    def __init__(self, store: Optional[MutableMapping[str, Any]] = None):
        self._store = store if store is not None else flask_session

    @property
    def user_id(self) -> Optional[int]:
        value = self._store.get(self.USER_ID)
        if value in (None, ""):
            return None
        return int(value)

    @property
    def user_refresh_time(self) -> Optional[float]:
        value = self._store.get(self.REFRESH_TIME)
        if value in (None, ""):
            return None
        return float(value)

    def start(self, user_id: int, lifetime: timedelta, *, now: Optional[float] = None) -> None:
        """Dipanggil oleh handler login setelah kredensial valid."""
        now = time.time() if now is None else now
        self._store.clear()
        self._store[self.USER_ID] = int(user_id)
        self._store[self.REFRESH_TIME] = int(now + lifetime.total_seconds())

    def is_expired(self, now: Optional[float] = None) -> bool:
        refresh_time = self.user_refresh_time
        if not refresh_time:
            return True
        now = time.time() if now is None else now
        return refresh_time < now

    def destroy(self) -> None:
        self._store.clear()
