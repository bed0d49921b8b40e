from __future__ import annotations

from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import Folder, Link
from shortlink_client.results import CallResult


class FoldersApi:
    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient):
        self._endpoints = endpoints
        self._http_client = http_client

    def list(self, org_id: int | None = None) -> CallResult[list[Folder]]:
        result = self._http_client.get(self._endpoints.folders, params={"org_id": org_id})
        return result.map(lambda items: [Folder.from_dict(item) for item in items])

    def get(self, folder_id: int) -> CallResult[Folder]:
        return self._http_client.get(self._endpoints.folder(folder_id)).map(Folder.from_dict)

    def create(self, name: str, color: str | None = None, org_id: int | None = None) -> CallResult[Folder]:
        payload = {"name": name, "color": color, "org_id": org_id}
        return self._http_client.post(self._endpoints.folders, payload).map(Folder.from_dict)

    def update(self, folder_id: int, name: str | None = None, color: str | None = None) -> CallResult[Folder]:
        payload = {key: value for key, value in {"name": name, "color": color}.items() if value is not None}
        return self._http_client.put(self._endpoints.folder(folder_id), payload).map(Folder.from_dict)

    def delete(self, folder_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.folder(folder_id))

    def links(self, folder_id: int) -> CallResult[list[Link]]:
        result = self._http_client.get(self._endpoints.folder_links(folder_id))
        return result.map(lambda items: [Link.from_dict(item) for item in items])

    def move_links(self, folder_id: int, link_ids: list[int]) -> CallResult[Any]:
        return self._http_client.post(self._endpoints.folder_links(folder_id), {"link_ids": list(link_ids)})
