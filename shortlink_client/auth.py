from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from typing import Callable

from shortlink_client.session_store import SessionStore, SessionStoreError

logger = logging.getLogger(__name__)


def build_auth_headers(store: SessionStore) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    try:
        token = store.get_token()
    except SessionStoreError as error:
        logger.warning("Session storage unavailable, sending request without credentials: %s", error)
        token = None
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


@dataclass(frozen=True)
class SessionInvalidated:
    login_path: str
    reason: str


SessionListener = Callable[[SessionInvalidated], None]


class UnauthorizedHandler:
    """Clears the persisted session and tells subscribers to show the login surface.

    Navigation itself belongs to whoever subscribes (the CLI prints a login
    hint, a UI would switch screens), so the HTTP layer never depends on it.
    """

    def __init__(self, store: SessionStore, login_path: str = "/login"):
        self._store = store
        self._login_path = login_path
        self._listeners: list[SessionListener] = []
        self._lock = threading.Lock()

    @property
    def login_path(self) -> str:
        return self._login_path

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def __call__(self, reason: str = "unauthorized") -> None:
        try:
            self._store.clear()
        except SessionStoreError as error:
            logger.error("Could not clear persisted session: %s", error)

        event = SessionInvalidated(login_path=self._login_path, reason=reason)
        with self._lock:
            listeners = list(self._listeners)
        if not listeners:
            logger.info("Session invalidated (%s); no navigation listener registered", reason)
        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception("Session invalidation listener %r failed", listener)
