from __future__ import annotations

from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import Link
from shortlink_client.results import CallResult

LINK_OPTION_FIELDS = (
    "custom_alias",
    "expires_at",
    "password",
    "notes",
    "folder_id",
    "org_id",
    "starts_at",
    "max_clicks",
    "tag_ids",
)

LINK_UPDATE_FIELDS = (
    "original_url",
    "expires_at",
    "password",
    "remove_password",
    "remove_expiration",
    "notes",
    "folder_id",
    "starts_at",
    "max_clicks",
    "remove_starts_at",
    "remove_max_clicks",
)


class LinksApi:
    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient):
        self._endpoints = endpoints
        self._http_client = http_client

    def list(
        self,
        folder_id: int | None = None,
        org_id: int | None = None,
        tag_id: int | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> CallResult[list[Link]]:
        params = {
            "folder_id": folder_id,
            "org_id": org_id,
            "tag_id": tag_id,
            "search": search,
            "limit": limit,
            "offset": offset,
        }
        result = self._http_client.get(self._endpoints.links, params=params)
        return result.map(lambda items: [Link.from_dict(item) for item in items])

    def create(self, original_url: str, **options: Any) -> CallResult[dict[str, Any]]:
        payload = {"original_url": original_url}
        payload.update(_select(options, LINK_OPTION_FIELDS))
        return self._http_client.post(self._endpoints.links, payload)

    def update(self, link_id: int, **fields: Any) -> CallResult[Link]:
        payload = _select(fields, LINK_UPDATE_FIELDS)
        return self._http_client.put(self._endpoints.link_update(link_id), payload).map(Link.from_dict)

    def delete(self, link_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.link_delete(link_id))

    def clone(self, link_id: int) -> CallResult[dict[str, Any]]:
        return self._http_client.post(self._endpoints.link_clone(link_id))

    def pin(self, link_id: int) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.link_pin(link_id))

    def bulk_create(
        self,
        urls: list[str],
        folder_id: int | None = None,
        org_id: int | None = None,
    ) -> CallResult[dict[str, Any]]:
        payload = {"urls": [url for url in urls if url.strip()], "folder_id": folder_id, "org_id": org_id}
        return self._http_client.post(self._endpoints.bulk_links, payload)

    def bulk_delete(self, ids: list[int]) -> CallResult[dict[str, Any]]:
        return self._http_client.post(self._endpoints.bulk_delete_links, {"ids": list(ids)})

    def bulk_update(
        self,
        ids: list[int],
        folder_id: int | None = None,
        expires_at: str | None = None,
        remove_expiration: bool | None = None,
    ) -> CallResult[dict[str, Any]]:
        payload = {
            "ids": list(ids),
            "folder_id": folder_id,
            "expires_at": expires_at,
            "remove_expiration": remove_expiration,
        }
        return self._http_client.post(self._endpoints.bulk_update_links, payload)

    def check_code(self, code: str) -> CallResult[Any]:
        return self._http_client.get(self._endpoints.check_code, params={"code": code})

    def export_csv(self) -> CallResult[str]:
        result = self._http_client.call(self._endpoints.export_links, raw=True)
        return result.map(lambda content: content.decode("utf-8"))

    def qr_code(self, link_id: int) -> CallResult[bytes]:
        return self._http_client.call(self._endpoints.link_qr(link_id), raw=True)

    def add_tags(self, link_id: int, tag_ids: list[int]) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.link_tags(link_id), {"tag_ids": list(tag_ids)})

    def remove_tags(self, link_id: int, tag_ids: list[int]) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.link_tags(link_id), {"tag_ids": list(tag_ids)})

    def preview(self, code: str) -> CallResult[dict[str, Any]]:
        return self._http_client.get(self._endpoints.preview(code))

    def verify_password(self, code: str, password: str) -> CallResult[dict[str, Any]]:
        return self._http_client.post(self._endpoints.verify_password(code), {"password": password})


def _select(values: dict[str, Any], allowed: tuple[str, ...]) -> dict[str, Any]:
    unknown = sorted(set(values) - set(allowed))
    if unknown:
        raise TypeError(f"Unsupported link fields: {', '.join(unknown)}")
    return {key: value for key, value in values.items() if value is not None}
