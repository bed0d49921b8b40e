from __future__ import annotations

from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.results import CallResult


class AdminApi:
    """Operator endpoints; the backend answers 403 for non-admin tokens."""

    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient):
        self._endpoints = endpoints
        self._http_client = http_client

    def stats(self) -> CallResult[dict[str, Any]]:
        return self._http_client.get(self._endpoints.admin_stats)

    def users(self) -> CallResult[list[dict[str, Any]]]:
        return self._http_client.get(self._endpoints.admin_users)

    def delete_user(self, user_id: int, hard: bool = False) -> CallResult[Any]:
        if hard:
            return self._http_client.delete(self._endpoints.admin_user_hard_delete(user_id))
        return self._http_client.delete(self._endpoints.admin_user(user_id))

    def restore_user(self, user_id: int) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.admin_user_restore(user_id))

    def set_admin(self, user_id: int, is_admin: bool) -> CallResult[Any]:
        if is_admin:
            return self._http_client.post(self._endpoints.admin_user_make_admin(user_id))
        return self._http_client.post(self._endpoints.admin_user_remove_admin(user_id))

    def blocked_links(self) -> CallResult[list[dict[str, Any]]]:
        return self._http_client.get(self._endpoints.admin_blocked_links)

    def block_link(self, url: str, reason: str | None = None) -> CallResult[dict[str, Any]]:
        return self._http_client.post(self._endpoints.admin_blocked_links, {"url": url, "reason": reason})

    def unblock_link(self, blocked_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.admin_blocked_link(blocked_id))

    def blocked_domains(self) -> CallResult[list[dict[str, Any]]]:
        return self._http_client.get(self._endpoints.admin_blocked_domains)

    def block_domain(self, domain: str, reason: str | None = None) -> CallResult[dict[str, Any]]:
        return self._http_client.post(self._endpoints.admin_blocked_domains, {"domain": domain, "reason": reason})

    def unblock_domain(self, blocked_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.admin_blocked_domain(blocked_id))

    def backups(self) -> CallResult[dict[str, Any]]:
        return self._http_client.get(self._endpoints.admin_backup)

    def create_backup(self) -> CallResult[dict[str, Any]]:
        return self._http_client.post(self._endpoints.admin_backup)

    def cleanup_backups(self, keep: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.admin_backup_cleanup(keep))
