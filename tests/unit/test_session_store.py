from __future__ import annotations

from reelpick.services.session_store import InMemorySessionStore, TTLSessionStore


def test_in_memory_store_appends_and_resets():
    store = InMemorySessionStore()
    assert store.get_excluded("ana") == []

    store.add_excluded("ana", [1, 2])
    store.add_excluded("ana", [2, 3])
    store.add_excluded("bo", [9])

    assert store.get_excluded("ana") == [1, 2, 3]
    assert store.count_users() == 2

    store.reset("ana")
    assert store.get_excluded("ana") == []
    assert store.get_excluded("bo") == [9]


def test_reset_unknown_user_is_noop():
    store = InMemorySessionStore()
    store.reset("nobody")
    assert store.count_users() == 0


def test_get_excluded_returns_copy():
    store = InMemorySessionStore()
    store.add_excluded("ana", [1])
    store.get_excluded("ana").append(99)
    assert store.get_excluded("ana") == [1]


def test_ttl_store_expires_users():
    store = TTLSessionStore(ttl=60)
    store.add_excluded("ana", [1])
    assert store.get_excluded("ana") == [1]

    # TTLCache expiry is driven by its timer
    store._data.expire(time=store._data.timer() + 61)
    assert store.get_excluded("ana") == []
