from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
from typing import Any, Callable

import requests

from shortlink_client.apis import AdminApi, AnalyticsApi, AuthApi, FoldersApi, LinksApi, OrgsApi, TagsApi
from shortlink_client.auth import SessionListener, UnauthorizedHandler
from shortlink_client.config import AppSettings
from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import AuthSession, AuthState, DashboardStats, Folder, Link, Tag
from shortlink_client.results import CallResult
from shortlink_client.session_store import FileSessionStore, SessionStore, SessionStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    links: CallResult[list[Link]]
    folders: CallResult[list[Folder]]
    tags: CallResult[list[Tag]]
    stats: CallResult[DashboardStats]

    @property
    def errors(self) -> dict[str, str]:
        parts = {"links": self.links, "folders": self.folders, "tags": self.tags, "stats": self.stats}
        return {name: result.error_message for name, result in parts.items() if result.error_message}


class ShortlinkService:
    def __init__(
        self,
        settings: AppSettings,
        store: SessionStore,
        unauthorized_handler: UnauthorizedHandler,
        http_client: HttpClient,
        endpoints: EndpointRegistry,
    ):
        self._settings = settings
        self._store = store
        self._unauthorized_handler = unauthorized_handler
        self._http_client = http_client
        self.endpoints = endpoints
        self.auth = AuthApi(endpoints, http_client, store)
        self.links = LinksApi(endpoints, http_client)
        self.folders = FoldersApi(endpoints, http_client)
        self.tags = TagsApi(endpoints, http_client)
        self.orgs = OrgsApi(endpoints, http_client)
        self.analytics = AnalyticsApi(endpoints, http_client)
        self.admin = AdminApi(endpoints, http_client)

    @staticmethod
    def create(
        settings: AppSettings,
        store: SessionStore | None = None,
        session: requests.Session | None = None,
    ) -> "ShortlinkService":
        store = store if store is not None else FileSessionStore(settings.session_path)
        handler = UnauthorizedHandler(store, login_path=settings.login_path)
        http_client = HttpClient(settings, store, on_unauthorized=handler, session=session)
        return ShortlinkService(settings, store, handler, http_client, EndpointRegistry(settings.api_url))

    @property
    def request_timeout_seconds(self) -> float:
        return self._settings.timeout_seconds

    def auth_state(self) -> AuthState:
        try:
            token = self._store.get_token()
            is_admin = self._store.is_admin()
        except SessionStoreError as error:
            logger.warning("Session storage unavailable: %s", error)
            return AuthState(is_signed_in=False)
        return AuthState(is_signed_in=bool(token), is_admin=bool(token) and is_admin)

    def sign_in(self, email: str, password: str) -> CallResult[AuthSession]:
        return self.auth.login(email, password)

    def sign_out(self) -> None:
        self.auth.logout()

    def on_session_invalidated(self, listener: SessionListener) -> Callable[[], None]:
        return self._unauthorized_handler.subscribe(listener)

    def load_dashboard(self, days: int | None = None) -> DashboardSnapshot:
        """Fetch links, folders, tags and stats concurrently."""
        calls: dict[str, Callable[[], CallResult[Any]]] = {
            "links": self.links.list,
            "folders": self.folders.list,
            "tags": self.tags.list,
            "stats": lambda: self.analytics.dashboard(days),
        }
        with ThreadPoolExecutor(max_workers=self._settings.max_workers) as executor:
            futures = {name: executor.submit(call) for name, call in calls.items()}
            results = {name: future.result() for name, future in futures.items()}
        return DashboardSnapshot(**results)

    def close(self) -> None:
        self._http_client.close()
