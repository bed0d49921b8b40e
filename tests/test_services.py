from __future__ import annotations

from conftest import make_response
from shortlink_client.models import AuthState
from shortlink_client.services import ShortlinkService
from shortlink_client.session_store import FileSessionStore, MemorySessionStore


def _route(responses):
    def request(method, url, **kwargs):
        for suffix, response in responses.items():
            if url.endswith(suffix):
                return response
        raise AssertionError(f"unexpected request {method} {url}")

    return request


def test_auth_state_reflects_store(service, store):
    assert service.auth_state() == AuthState(is_signed_in=False)

    store.set_session("abc", is_admin=True)

    assert service.auth_state() == AuthState(is_signed_in=True, is_admin=True)


def test_load_dashboard_fans_out(service, http_session):
    http_session.request.side_effect = _route(
        {
            "/links": make_response(200, []),
            "/folders": make_response(200, []),
            "/tags": make_response(200, []),
            "/analytics/dashboard": make_response(200, {"total_links": 0}),
        }
    )

    snapshot = service.load_dashboard()

    assert snapshot.links.data == []
    assert snapshot.stats.data.total_links == 0
    assert snapshot.errors == {}
    assert http_session.request.call_count == 4


def test_load_dashboard_with_expired_session(service, store, http_session):
    store.set_session("abc")
    events = []
    service.on_session_invalidated(events.append)
    http_session.request.side_effect = _route(
        {
            "/links": make_response(401),
            "/folders": make_response(401),
            "/tags": make_response(200, []),
            "/analytics/dashboard": make_response(429, headers={"Retry-After": "5"}),
        }
    )

    snapshot = service.load_dashboard()

    assert store.get_token() is None
    assert len(events) == 2
    assert snapshot.errors["links"] == "Session expired. Please log in again."
    assert "5" in snapshot.errors["stats"]
    assert "tags" not in snapshot.errors


def test_create_uses_file_store_by_default(settings):
    service = ShortlinkService.create(settings)

    assert isinstance(service._store, FileSessionStore)
    assert service.endpoints.base == settings.api_url
    service.close()


def test_memory_store_can_be_injected(settings):
    store = MemorySessionStore(token="abc")
    service = ShortlinkService.create(settings, store=store)

    assert service.auth_state().is_signed_in


def test_load_dashboard_survives_unexpected_payload_and_listener_error(service, http_session):
    def broken_listener(event):
        raise RuntimeError("ui gone")

    service.on_session_invalidated(broken_listener)
    http_session.request.side_effect = _route(
        {
            "/links": make_response(200, {"unexpected": True}),
            "/folders": make_response(401),
            "/tags": make_response(200, []),
            "/analytics/dashboard": make_response(200, {"total_links": 1}),
        }
    )

    snapshot = service.load_dashboard()

    assert set(snapshot.errors) == {"links", "folders"}
    assert snapshot.folders.error_message == "Session expired. Please log in again."
    assert snapshot.stats.data.total_links == 1
