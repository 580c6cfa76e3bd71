import logging
import threading
import time

logger = logging.getLogger(__name__)

DEFAULT_PRUNE_INTERVAL = 24 * 60 * 60


class SessionStore:
    """Server-side session records kept in process memory.

    Each record maps a session id to its data and an absolute expiry time.
    Expired records are never returned, and ``prune`` (run periodically once
    ``start_pruning`` is called) drops them from memory. Nothing survives a
    restart.
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._sessions = {}
        self._lock = threading.Lock()
        self._timer = None
        self._prune_interval = None

    def get(self, sid):
        with self._lock:
            entry = self._sessions.get(sid)
            if entry is None:
                return None
            data, expires_at = entry
            if expires_at <= self._clock():
                del self._sessions[sid]
                return None
            return dict(data)

    def set(self, sid, data, max_age):
        """Store ``data`` under ``sid``, expiring ``max_age`` seconds from now."""
        with self._lock:
            self._sessions[sid] = (dict(data), self._clock() + max_age)

    def touch(self, sid, max_age):
        with self._lock:
            entry = self._sessions.get(sid)
            if entry is None or entry[1] <= self._clock():
                return False
            self._sessions[sid] = (entry[0], self._clock() + max_age)
            return True

    def destroy(self, sid):
        with self._lock:
            return self._sessions.pop(sid, None) is not None

    def prune(self):
        now = self._clock()
        with self._lock:
            expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at <= now]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.debug(f"Pruned {len(expired)} expired sessions")
        return len(expired)

    def start_pruning(self, interval=DEFAULT_PRUNE_INTERVAL):
        self.stop_pruning()
        with self._lock:
            self._prune_interval = interval
            self._schedule()

    def stop_pruning(self):
        with self._lock:
            self._prune_interval = None
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    def _schedule(self):
        # Caller holds the lock
        self._timer = threading.Timer(self._prune_interval, self._run_prune)
        self._timer.daemon = True
        self._timer.start()

    def _run_prune(self):
        try:
            self.prune()
        finally:
            with self._lock:
                if self._prune_interval:
                    self._schedule()

    def __len__(self):
        with self._lock:
            return len(self._sessions)
