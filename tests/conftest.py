from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from shortlink_client.auth import UnauthorizedHandler
from shortlink_client.config import AppSettings
from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.services import ShortlinkService
from shortlink_client.session_store import MemorySessionStore

BASE_URL = "https://api.short.test"


def make_response(
    status_code: int,
    body: Any = None,
    headers: dict[str, str] | None = None,
    content: bytes | None = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = b"" if body is None else json.dumps(body).encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(api_url=BASE_URL, timeout_seconds=5, session_path=str(tmp_path / "session.json"))


@pytest.fixture
def endpoints() -> EndpointRegistry:
    return EndpointRegistry(BASE_URL)


@pytest.fixture
def store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def http_session() -> requests.Session:
    session = requests.Session()
    session.request = MagicMock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def handler(store) -> UnauthorizedHandler:
    return UnauthorizedHandler(store, login_path="/login")


@pytest.fixture
def client(settings, store, handler, http_session) -> HttpClient:
    return HttpClient(settings, store, on_unauthorized=handler, session=http_session)


@pytest.fixture
def service(settings, store, http_session) -> ShortlinkService:
    return ShortlinkService.create(settings, store=store, session=http_session)


def sent_request(session: requests.Session, index: int = -1):
    """Return (method, url, kwargs) of a call recorded on the mocked session."""
    recorded = session.request.call_args_list[index]
    method, url = recorded.args
    return method, url, recorded.kwargs
