from __future__ import annotations

from unittest.mock import MagicMock

from shortlink_client.auth import UnauthorizedHandler, build_auth_headers
from shortlink_client.session_store import MemorySessionStore, SessionStoreError


def test_headers_without_token():
    assert build_auth_headers(MemorySessionStore()) == {"Content-Type": "application/json"}


def test_headers_with_token():
    headers = build_auth_headers(MemorySessionStore(token="T.o.k"))
    assert headers["Authorization"] == "Bearer T.o.k"
    assert headers["Content-Type"] == "application/json"


def test_headers_degrade_when_storage_fails(caplog):
    store = MagicMock()
    store.get_token.side_effect = SessionStoreError("locked")

    headers = build_auth_headers(store)

    assert "Authorization" not in headers
    assert "Session storage unavailable" in caplog.text


def test_handler_clears_before_notifying():
    store = MemorySessionStore(token="abc", is_admin=True)
    seen = []
    handler = UnauthorizedHandler(store, login_path="/login")
    handler.subscribe(lambda event: seen.append((store.get_token(), event.login_path)))

    handler()

    assert seen == [(None, "/login")]
    assert store.is_admin() is False


def test_handler_is_idempotent_without_token():
    store = MemorySessionStore()
    events = []
    handler = UnauthorizedHandler(store)
    handler.subscribe(events.append)

    handler()
    handler()

    assert len(events) == 2
    assert store.get_token() is None


def test_unsubscribe_stops_notifications():
    handler = UnauthorizedHandler(MemorySessionStore())
    events = []
    unsubscribe = handler.subscribe(events.append)
    unsubscribe()

    handler()

    assert events == []


def test_handler_still_notifies_when_clear_fails(caplog):
    store = MagicMock()
    store.clear.side_effect = SessionStoreError("read-only")
    events = []
    handler = UnauthorizedHandler(store)
    handler.subscribe(events.append)

    handler()

    assert len(events) == 1
    assert "Could not clear persisted session" in caplog.text


def test_listener_error_does_not_skip_later_listeners(caplog):
    handler = UnauthorizedHandler(MemorySessionStore(token="abc"))
    received = []

    def broken_listener(event):
        raise RuntimeError("ui gone")

    handler.subscribe(broken_listener)
    handler.subscribe(received.append)

    handler()

    assert [event.login_path for event in received] == ["/login"]
    assert "Session invalidation listener" in caplog.text
