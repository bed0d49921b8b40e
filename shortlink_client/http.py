from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import requests
from requests.structures import CaseInsensitiveDict

from shortlink_client.auth import UnauthorizedHandler, build_auth_headers
from shortlink_client.config import AppSettings
from shortlink_client.results import ApiError, CallResult
from shortlink_client.session_store import SessionStore

logger = logging.getLogger(__name__)


class HttpClient:
    """Runs one request/response cycle per call and normalizes the outcome.

    Every backend operation goes through ``call``: credentials are attached
    from the session store, 401 responses trigger ``on_unauthorized`` and
    every failure comes back as a ``CallResult`` error instead of an
    exception.
    """

    def __init__(
        self,
        settings: AppSettings,
        store: SessionStore,
        on_unauthorized: Callable[[], None] | None = None,
        session: requests.Session | None = None,
    ):
        self._settings = settings
        self._store = store
        if on_unauthorized is None:
            on_unauthorized = UnauthorizedHandler(store, login_path=settings.login_path)
        self._on_unauthorized = on_unauthorized
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def call(
        self,
        url: str,
        method: str = "GET",
        json: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        raw: bool = False,
        authenticated: bool = True,
    ) -> CallResult[Any]:
        # Public calls (login, register, ...) send no credentials and treat
        # 401 as an ordinary failure such as "Invalid credentials".
        if authenticated:
            request_headers = CaseInsensitiveDict(build_auth_headers(self._store))
        else:
            request_headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        if headers:
            request_headers.update(headers)

        try:
            response = self._session.request(
                method,
                url,
                headers=request_headers,
                json=json,
                params=_drop_none(params),
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as error:
            logger.warning("%s %s failed before a response was received: %s", method, url, error)
            return CallResult.failure(ApiError.transport(error))

        logger.debug("%s %s -> %s", method, url, response.status_code)

        if response.status_code == 401 and authenticated:
            logger.warning("%s %s returned 401, invalidating session", method, url)
            self._on_unauthorized()
            return CallResult.failure(ApiError.unauthorized())

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After") or str(self._settings.rate_limit_fallback_seconds)
            logger.warning("%s %s rate limited, retry after %s seconds", method, url, retry_after)
            return CallResult.failure(ApiError.rate_limited(retry_after))

        if not response.ok:
            body = _parse_json(response)
            return CallResult.failure(ApiError.request_failed(response.status_code, _server_message(body)))

        if raw:
            return CallResult.success(response.content)

        if not response.content:
            return CallResult.success(None)

        try:
            return CallResult.success(response.json())
        except ValueError:
            logger.error("%s %s returned a body that is not valid JSON", method, url)
            return CallResult.failure(ApiError.malformed_response(response.status_code))

    def get(self, url: str, params: Mapping[str, Any] | None = None) -> CallResult[Any]:
        return self.call(url, params=params)

    def post(self, url: str, payload: Any = None, authenticated: bool = True) -> CallResult[Any]:
        return self.call(url, method="POST", json=payload, authenticated=authenticated)

    def put(self, url: str, payload: Any = None) -> CallResult[Any]:
        return self.call(url, method="PUT", json=payload)

    def delete(self, url: str, payload: Any = None) -> CallResult[Any]:
        return self.call(url, method="DELETE", json=payload)

    def close(self) -> None:
        self._session.close()


def _parse_json(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _server_message(body: Any) -> str | None:
    if isinstance(body, dict):
        message = body.get("error")
        if message:
            return str(message)
    return None


def _drop_none(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None} or None
