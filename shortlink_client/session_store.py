from __future__ import annotations

import json
import logging
import os
import threading
from typing import Protocol

from msal_extensions import FilePersistence, FilePersistenceWithDataProtection
from msal_extensions.persistence import PersistenceNotFound

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
ADMIN_KEY = "is_admin"


class SessionStoreError(RuntimeError):
    pass


class SessionStore(Protocol):
    def get_token(self) -> str | None: ...

    def is_admin(self) -> bool: ...

    def set_session(self, token: str, is_admin: bool = False) -> None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    """Session kept in process memory only."""

    def __init__(self, token: str | None = None, is_admin: bool = False):
        self._values: dict[str, str] = {}
        self._lock = threading.Lock()
        if token:
            self.set_session(token, is_admin)

    def get_token(self) -> str | None:
        with self._lock:
            return self._values.get(TOKEN_KEY) or None

    def is_admin(self) -> bool:
        with self._lock:
            return self._values.get(ADMIN_KEY) == "true"

    def set_session(self, token: str, is_admin: bool = False) -> None:
        with self._lock:
            self._values[TOKEN_KEY] = token
            self._values[ADMIN_KEY] = "true" if is_admin else "false"

    def clear(self) -> None:
        with self._lock:
            self._values.pop(TOKEN_KEY, None)
            self._values.pop(ADMIN_KEY, None)


class FileSessionStore:
    """Session persisted as a small JSON document with msal-extensions.

    The document holds two string keys, ``token`` and ``is_admin``. On
    Windows the file is encrypted with DPAPI when available.
    """

    def __init__(self, path: str):
        self._path = path
        self._persistence = self._build_persistence(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> str:
        return self._path

    @staticmethod
    def _build_persistence(path: str):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            return FilePersistenceWithDataProtection(path)
        except Exception as error:
            logger.debug("Data protection unavailable, using plain file persistence: %s", error)
            return FilePersistence(path)

    def get_token(self) -> str | None:
        with self._lock:
            return self._load().get(TOKEN_KEY) or None

    def is_admin(self) -> bool:
        with self._lock:
            return self._load().get(ADMIN_KEY) == "true"

    def set_session(self, token: str, is_admin: bool = False) -> None:
        with self._lock:
            values = self._load_for_update()
            values[TOKEN_KEY] = token
            values[ADMIN_KEY] = "true" if is_admin else "false"
            self._save(values)

    def clear(self) -> None:
        with self._lock:
            values = self._load_for_update()
            if TOKEN_KEY not in values and ADMIN_KEY not in values:
                return
            values.pop(TOKEN_KEY, None)
            values.pop(ADMIN_KEY, None)
            self._save(values)

    def _load(self) -> dict[str, str]:
        try:
            content = self._persistence.load()
        except PersistenceNotFound:
            return {}
        except OSError as error:
            raise SessionStoreError(f"Cannot read session file {self._path}: {error}") from error

        if not content:
            return {}
        try:
            values = json.loads(content)
        except ValueError as error:
            raise SessionStoreError(f"Session file {self._path} is corrupted") from error
        if not isinstance(values, dict):
            raise SessionStoreError(f"Session file {self._path} is corrupted")
        return {str(key): str(value) for key, value in values.items()}

    def _load_for_update(self) -> dict[str, str]:
        # A corrupted file is overwritten rather than blocking login/logout.
        try:
            return self._load()
        except SessionStoreError as error:
            logger.warning("%s; resetting it", error)
            return {}

    def _save(self, values: dict[str, str]) -> None:
        try:
            self._persistence.save(json.dumps(values))
        except OSError as error:
            raise SessionStoreError(f"Cannot write session file {self._path}: {error}") from error
