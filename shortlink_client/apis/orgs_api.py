from __future__ import annotations

from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import OrgMember, Organization
from shortlink_client.results import CallResult

MEMBER_ROLES = ("admin", "editor", "viewer")


class OrgsApi:
    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient):
        self._endpoints = endpoints
        self._http_client = http_client

    def list(self) -> CallResult[list[Organization]]:
        result = self._http_client.get(self._endpoints.orgs)
        return result.map(lambda items: [Organization.from_dict(item) for item in items])

    def get(self, org_id: int) -> CallResult[Organization]:
        return self._http_client.get(self._endpoints.org(org_id)).map(Organization.from_dict)

    def create(self, name: str, slug: str) -> CallResult[Organization]:
        payload = {"name": name, "slug": slug}
        return self._http_client.post(self._endpoints.orgs, payload).map(Organization.from_dict)

    def update(self, org_id: int, name: str | None = None, slug: str | None = None) -> CallResult[Organization]:
        payload = {key: value for key, value in {"name": name, "slug": slug}.items() if value is not None}
        return self._http_client.put(self._endpoints.org(org_id), payload).map(Organization.from_dict)

    def delete(self, org_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.org(org_id))

    def members(self, org_id: int) -> CallResult[list[OrgMember]]:
        result = self._http_client.get(self._endpoints.org_members(org_id))
        return result.map(lambda items: [OrgMember.from_dict(item) for item in items])

    def invite(self, org_id: int, email: str, role: str = "viewer") -> CallResult[OrgMember]:
        _check_role(role)
        payload = {"email": email, "role": role}
        return self._http_client.post(self._endpoints.org_members(org_id), payload).map(OrgMember.from_dict)

    def update_member_role(self, org_id: int, member_id: int, role: str) -> CallResult[Any]:
        _check_role(role)
        return self._http_client.put(self._endpoints.org_member(org_id, member_id), {"role": role})

    def remove_member(self, org_id: int, member_id: int) -> CallResult[Any]:
        return self._http_client.delete(self._endpoints.org_member(org_id, member_id))

    def audit_log(self, org_id: int) -> CallResult[Any]:
        return self._http_client.get(self._endpoints.org_audit(org_id))


def _check_role(role: str) -> None:
    if role not in MEMBER_ROLES:
        raise ValueError(f"Member role must be one of: {', '.join(MEMBER_ROLES)}")
