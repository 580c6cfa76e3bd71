"""Tests for the in-memory session store."""

import pytest

from petsphere.services.session_store import SessionStore


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(clock=clock)


class TestSessionStore:

    def test_set_and_get(self, store):
        store.set("abc", {"_user_id": "1"}, 60)

        assert store.get("abc") == {"_user_id": "1"}
        assert store.get("missing") is None

    def test_returned_data_is_a_copy(self, store):
        store.set("abc", {"_user_id": "1"}, 60)

        store.get("abc")["_user_id"] = "2"

        assert store.get("abc") == {"_user_id": "1"}

    def test_expired_session_is_invisible(self, store, clock):
        store.set("abc", {"_user_id": "1"}, 60)
        clock.now += 61

        assert store.get("abc") is None
        assert len(store) == 0

    def test_touch_renews_expiry(self, store, clock):
        store.set("abc", {"_user_id": "1"}, 60)
        clock.now += 50
        assert store.touch("abc", 60) is True
        clock.now += 50

        assert store.get("abc") == {"_user_id": "1"}
        assert store.touch("missing", 60) is False

    def test_destroy(self, store):
        store.set("abc", {"_user_id": "1"}, 60)

        assert store.destroy("abc") is True
        assert store.destroy("abc") is False

    def test_prune_removes_only_expired(self, store, clock):
        store.set("old", {"n": 1}, 10)
        store.set("new", {"n": 2}, 100)
        clock.now += 20

        assert store.prune() == 1
        assert len(store) == 1
        assert store.get("new") == {"n": 2}


class TestPruningTimer:

    def test_start_and_stop(self):
        store = SessionStore()
        store.start_pruning(3600)
        try:
            assert store._timer is not None
            assert store._timer.daemon
        finally:
            store.stop_pruning()
        assert store._timer is None

    def test_prune_run_after_stop_does_not_rearm(self):
        """A prune already in flight when pruning stops schedules nothing."""
        store = SessionStore()
        store.start_pruning(3600)
        store.stop_pruning()

        store._run_prune()

        assert store._timer is None

    def test_prune_run_rearms_while_active(self):
        store = SessionStore()
        store.start_pruning(3600)
        try:
            first = store._timer
            first.cancel()
            store._run_prune()
            assert store._timer is not None
            assert store._timer is not first
        finally:
            store.stop_pruning()
