from __future__ import annotations

from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import Link, Tag
from shortlink_client.results import CallResult


class TagsApi:
    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient):
        self._endpoints = endpoints
        self._http_client = http_client

    def list(self, org_id: int | None = None) -> CallResult[list[Tag]]:
        result = self._http_client.get(self._endpoints.tags, params={"org_id": org_id})
        return result.map(lambda items: [Tag.from_dict(item) for item in items])

    def get(self, tag_id: int) -> CallResult[Tag]:
        return self._http_client.get(self._endpoints.tag(tag_id)).map(Tag.from_dict)

    def create(self, name: str, color: str | None = None, org_id: int | None = None) -> CallResult[Tag]:
        payload = {"name": name, "color": color, "org_id": org_id}
        return self._http_client.post(self._endpoints.tags, payload).map(Tag.from_dict)

    def update(self, tag_id: int, name: str | None = None, color: str | None = None) -> CallResult[Tag]:
        payload = {key: value for key, value in {"name": name, "color": color}.items() if value is not None}
        return self._http_client.put(self._endpoints.tag(tag_id), payload).map(Tag.from_dict)

    def delete(self, tag_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.tag(tag_id))

    def links(self, tag_id: int) -> CallResult[list[Link]]:
        result = self._http_client.get(self._endpoints.tag_links(tag_id))
        return result.map(lambda items: [Link.from_dict(item) for item in items])
