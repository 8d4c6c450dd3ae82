# src/login_dfa/gateway/sessions.py
import threading
from collections import OrderedDict
from contextlib import contextmanager

from login_dfa.dfa.session import LoginSession
from login_dfa.utils.logger import get_logger

_logger = get_logger()


class _Slot:
    __slots__ = ("session", "lock", "users")

    def __init__(self, sid):
        self.session = LoginSession(sid)
        self.lock = threading.Lock()
        # requests holding or waiting on the lock; guarded by the registry lock
        self.users = 0


class SessionStore:
    """
    Process-wide registry of login sessions keyed by session id.
    Each session has its own lock so read -> transition -> write is never
    interleaved for one session, while different sessions proceed in parallel.
    Lock order is always session lock, then registry lock.
    """

    def __init__(self, max_sessions=0):
        self.max_sessions = max_sessions
        self._sessions = OrderedDict()   # sid -> _Slot, LRU order
        self._registry_lock = threading.Lock()

    def __len__(self):
        with self._registry_lock:
            return len(self._sessions)

    def __contains__(self, sid):
        with self._registry_lock:
            return sid in self._sessions

    def _slot(self, sid, claim=False):
        with self._registry_lock:
            slot = self._sessions.get(sid)
            if slot is None:
                slot = _Slot(sid)
                self._sessions[sid] = slot
                _logger.info(f"[SESSIONS] created {sid}")
            else:
                self._sessions.move_to_end(sid)
            if claim:
                slot.users += 1
            self._evict()
            return slot

    def _evict(self):
        # registry lock held; sessions in use are never evicted
        if not self.max_sessions:
            return
        idle = [sid for sid, slot in self._sessions.items() if not slot.users]
        for sid in idle:
            if len(self._sessions) <= self.max_sessions:
                break
            del self._sessions[sid]
            _logger.info(f"[SESSIONS] evicted {sid}")

    def _release(self, slot):
        with self._registry_lock:
            slot.users -= 1

    @contextmanager
    def locked(self, sid):
        """Yield the session for sid while holding its lock."""
        while True:
            slot = self._slot(sid, claim=True)
            try:
                with slot.lock:
                    with self._registry_lock:
                        live = self._sessions.get(sid) is slot
                    if live:
                        yield slot.session
                        return
            finally:
                self._release(slot)
            # discarded while we waited; retry against the live slot

    def get_or_create(self, sid):
        return self._slot(sid).session

    def reset(self, sid):
        with self.locked(sid) as session:
            return session.restart()

    def discard(self, sid):
        with self._registry_lock:
            slot = self._sessions.get(sid)
        if slot is None:
            return False
        with slot.lock:
            with self._registry_lock:
                if self._sessions.get(sid) is not slot:
                    return False
                del self._sessions[sid]
        _logger.info(f"[SESSIONS] discarded {sid}")
        return True
