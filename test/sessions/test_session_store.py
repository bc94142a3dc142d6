"""Tests for the in-memory session store."""

from datetime import timedelta

from icongen.sessions import GenerationRequest, SessionStore


def test_stores_are_isolated(make_manager) -> None:
    first, second = SessionStore(), SessionStore()
    session = make_manager(store=first).create_session(GenerationRequest(prompt="x"))

    assert session.session_id in first
    assert session.session_id not in second
    assert second.load_session(session.session_id) is None


def test_list_and_delete(make_manager) -> None:
    store = SessionStore()
    manager = make_manager(store=store)
    a = manager.create_session(GenerationRequest(prompt="a"))
    b = manager.create_session(GenerationRequest(prompt="b"))

    assert sorted(store.list_sessions()) == sorted([a.session_id, b.session_id])
    assert store.delete_session(a.session_id) is True
    assert store.delete_session(a.session_id) is False
    assert store.list_sessions() == [b.session_id]


def test_purge_older_than_evicts_only_expired(make_manager) -> None:
    store = SessionStore()
    manager = make_manager(store=store)
    old = manager.create_session(GenerationRequest(prompt="old"))
    fresh = manager.create_session(GenerationRequest(prompt="fresh"))
    old.start_time = old.start_time - timedelta(hours=2)

    purged = store.purge_older_than(timedelta(hours=1))

    assert purged == 1
    assert old.session_id not in store
    assert fresh.session_id in store
