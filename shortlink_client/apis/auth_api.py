from __future__ import annotations

import logging
from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import AuthSession
from shortlink_client.results import CallResult
from shortlink_client.session_store import SessionStore

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("display_name", "bio", "website", "avatar_url", "location")


class AuthApi:
    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient, store: SessionStore):
        self._endpoints = endpoints
        self._http_client = http_client
        self._store = store

    def login(self, email: str, password: str) -> CallResult[AuthSession]:
        payload = {"email": email, "password": password}
        result = self._http_client.post(self._endpoints.login, payload, authenticated=False)
        return self._remember(result)

    def register(self, email: str, password: str) -> CallResult[AuthSession]:
        payload = {"email": email, "password": password}
        result = self._http_client.post(self._endpoints.register, payload, authenticated=False)
        return self._remember(result)

    def logout(self) -> None:
        self._store.clear()
        logger.info("Signed out")

    def verify_email(self, token: str) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.verify_email, {"token": token}, authenticated=False)

    def resend_verification(self, email: str) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.resend_verification, {"email": email}, authenticated=False)

    def forgot_password(self, email: str) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.forgot_password, {"email": email}, authenticated=False)

    def reset_password(self, token: str, password: str) -> CallResult[Any]:
        payload = {"token": token, "password": password}
        return self._http_client.post(self._endpoints.reset_password, payload, authenticated=False)

    def change_password(self, current_password: str, new_password: str) -> CallResult[Any]:
        payload = {"current_password": current_password, "new_password": new_password}
        return self._http_client.post(self._endpoints.change_password, payload)

    def delete_account(self, password: str) -> CallResult[Any]:
        result = self._http_client.post(self._endpoints.delete_account, {"password": password})
        if result.ok:
            self._store.clear()
        return result

    def get_profile(self) -> CallResult[dict[str, Any]]:
        return self._http_client.get(self._endpoints.user_profile)

    def update_profile(self, **fields: Any) -> CallResult[dict[str, Any]]:
        unknown = sorted(set(fields) - set(PROFILE_FIELDS))
        if unknown:
            raise TypeError(f"Unsupported profile fields: {', '.join(unknown)}")
        return self._http_client.put(self._endpoints.update_profile, fields)

    def get_app_settings(self) -> CallResult[dict[str, Any]]:
        return self._http_client.get(self._endpoints.app_settings)

    def _remember(self, result: CallResult[Any]) -> CallResult[AuthSession]:
        mapped = result.map(AuthSession.from_dict)
        if mapped.data is not None:
            self._store.set_session(mapped.data.token, mapped.data.is_admin)
            logger.info("Signed in as %s", mapped.data.email)
        return mapped
