import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Dict, List, Optional

from fitcoach.interfaces.providers.session_store import SessionStore

logger = logging.getLogger(__name__)


class _LockEntry:
    """Re-entrant lock shared by every holder and waiter of one session."""

    def __init__(self) -> None:
        self.rlock = threading.RLock()
        self.holders = 0


class SessionLock:
    """Context manager serializing the turns of one session.

    The underlying lock is looked up when acquired, not when this handle is
    created, and stays registered until its last holder or waiter releases
    it. Deleting, evicting or expiring the session's data never drops it.
    """

    def __init__(self, store: "InMemorySessionStore", session_id: str):
        self._store = store
        self._session_id = session_id
        self._entries: List[_LockEntry] = []

    def acquire(self, blocking: bool = True, timeout: float = -1) -> bool:
        entry = self._store._checkout(self._session_id)
        if not entry.rlock.acquire(blocking, timeout):
            self._store._checkin(self._session_id, entry)
            return False
        self._entries.append(entry)
        return True

    def release(self) -> None:
        entry = self._entries.pop()
        entry.rlock.release()
        self._store._checkin(self._session_id, entry)

    def __enter__(self) -> "SessionLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class InMemorySessionStore(SessionStore):
    """Thread-safe in-memory session store with LRU eviction and optional TTL."""

    def __init__(self, max_sessions: int = 1000, ttl: Optional[float] = None):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        if ttl is not None and ttl <= 0:
            raise ValueError("ttl must be positive when provided")
        self.max_sessions = max_sessions
        self.ttl = ttl
        self._data: OrderedDict = OrderedDict()
        self._expires: Dict[str, float] = {}
        self._locks: Dict[str, _LockEntry] = {}
        self._guard = threading.Lock()

    def get(self, session_id: str) -> Optional[Any]:
        with self._guard:
            if session_id not in self._data:
                return None
            if self._is_expired(session_id):
                logger.debug(f"Session {session_id} expired")
                self._remove(session_id)
                return None
            self._data.move_to_end(session_id)
            return self._data[session_id]

    def put(self, session_id: str, value: Any) -> None:
        with self._guard:
            if session_id in self._data:
                self._data.move_to_end(session_id)
            else:
                while len(self._data) >= self.max_sessions:
                    oldest = next(iter(self._data))
                    logger.info(f"Evicting least recently used session {oldest}")
                    self._remove(oldest)
            self._data[session_id] = value
            if self.ttl is not None:
                self._expires[session_id] = time.monotonic() + self.ttl

    def delete(self, session_id: str) -> bool:
        with self._guard:
            if session_id in self._data:
                self._remove(session_id)
                return True
            return False

    def lock(self, session_id: str) -> SessionLock:
        return SessionLock(self, session_id)

    def clear(self) -> None:
        with self._guard:
            self._data.clear()
            self._expires.clear()

    @property
    def active_locks(self) -> int:
        """Number of sessions whose lock is currently held or awaited."""
        with self._guard:
            return len(self._locks)

    def _checkout(self, session_id: str) -> _LockEntry:
        with self._guard:
            entry = self._locks.get(session_id)
            if entry is None:
                entry = _LockEntry()
                self._locks[session_id] = entry
            entry.holders += 1
            return entry

    def _checkin(self, session_id: str, entry: _LockEntry) -> None:
        with self._guard:
            entry.holders -= 1
            if entry.holders == 0 and self._locks.get(session_id) is entry:
                del self._locks[session_id]

    def _is_expired(self, session_id: str) -> bool:
        expires_at = self._expires.get(session_id)
        return expires_at is not None and time.monotonic() > expires_at

    def _remove(self, session_id: str) -> None:
        self._data.pop(session_id, None)
        self._expires.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, session_id: str) -> bool:
        return self.get(session_id) is not None
