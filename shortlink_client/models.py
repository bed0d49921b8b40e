from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthState:
    is_signed_in: bool
    is_admin: bool = False


@dataclass(frozen=True)
class AuthSession:
    token: str
    user_id: int
    email: str
    email_verified: bool = False
    is_admin: bool = False

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "AuthSession":
        return AuthSession(
            token=str(data["token"]),
            user_id=int(data.get("user_id", 0)),
            email=str(data.get("email", "")),
            email_verified=bool(data.get("email_verified", False)),
            is_admin=bool(data.get("is_admin", False)),
        )


@dataclass(frozen=True)
class Tag:
    id: int
    name: str
    color: str | None = None
    link_count: int = 0

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Tag":
        return Tag(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            color=data.get("color"),
            link_count=int(data.get("link_count") or 0),
        )


@dataclass(frozen=True)
class Link:
    id: int
    code: str
    original_url: str
    short_url: str = ""
    click_count: int = 0
    created_at: str = ""
    expires_at: str | None = None
    has_password: bool = False
    notes: str | None = None
    folder_id: int | None = None
    org_id: int | None = None
    starts_at: str | None = None
    max_clicks: int | None = None
    is_active: bool = True
    is_pinned: bool = False
    tags: tuple[Tag, ...] = ()

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Link":
        return Link(
            id=int(data["id"]),
            code=str(data.get("code", "")),
            original_url=str(data.get("original_url", "")),
            short_url=str(data.get("short_url", "")),
            click_count=int(data.get("click_count") or 0),
            created_at=str(data.get("created_at", "")),
            expires_at=data.get("expires_at"),
            has_password=bool(data.get("has_password", False)),
            notes=data.get("notes"),
            folder_id=data.get("folder_id"),
            org_id=data.get("org_id"),
            starts_at=data.get("starts_at"),
            max_clicks=data.get("max_clicks"),
            is_active=bool(data.get("is_active", True)),
            is_pinned=bool(data.get("is_pinned", False)),
            tags=tuple(Tag.from_dict(tag) for tag in data.get("tags") or []),
        )


@dataclass(frozen=True)
class Folder:
    id: int
    name: str
    color: str | None = None
    user_id: int | None = None
    org_id: int | None = None
    created_at: str = ""
    link_count: int = 0

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Folder":
        return Folder(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            color=data.get("color"),
            user_id=data.get("user_id"),
            org_id=data.get("org_id"),
            created_at=str(data.get("created_at", "")),
            link_count=int(data.get("link_count") or 0),
        )


@dataclass(frozen=True)
class Organization:
    id: int
    name: str
    slug: str
    owner_id: int = 0
    created_at: str = ""
    member_count: int = 0
    link_count: int = 0

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Organization":
        return Organization(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            slug=str(data.get("slug", "")),
            owner_id=int(data.get("owner_id") or 0),
            created_at=str(data.get("created_at", "")),
            member_count=int(data.get("member_count") or 0),
            link_count=int(data.get("link_count") or 0),
        )


@dataclass(frozen=True)
class OrgMember:
    id: int
    user_id: int
    email: str
    role: str
    joined_at: str = ""

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "OrgMember":
        return OrgMember(
            id=int(data["id"]),
            user_id=int(data.get("user_id") or 0),
            email=str(data.get("email", "")),
            role=str(data.get("role", "")),
            joined_at=str(data.get("joined_at", "")),
        )


@dataclass(frozen=True)
class DashboardStats:
    total_links: int = 0
    total_clicks: int = 0
    active_links: int = 0
    clicks_today: int = 0
    clicks_this_week: int = 0
    clicks_this_month: int = 0
    top_links: list[dict[str, Any]] = field(default_factory=list)
    clicks_by_day: list[dict[str, Any]] = field(default_factory=list)
    top_countries: list[dict[str, Any]] = field(default_factory=list)
    top_browsers: list[dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "DashboardStats":
        return DashboardStats(
            total_links=int(data.get("total_links") or 0),
            total_clicks=int(data.get("total_clicks") or 0),
            active_links=int(data.get("active_links") or 0),
            clicks_today=int(data.get("clicks_today") or 0),
            clicks_this_week=int(data.get("clicks_this_week") or 0),
            clicks_this_month=int(data.get("clicks_this_month") or 0),
            top_links=list(data.get("top_links") or []),
            clicks_by_day=list(data.get("clicks_by_day") or []),
            top_countries=list(data.get("top_countries") or []),
            top_browsers=list(data.get("top_browsers") or []),
        )


@dataclass(frozen=True)
class LinkStats:
    link_id: int
    code: str
    original_url: str
    total_clicks: int = 0
    unique_visitors: int = 0
    breakdowns: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "LinkStats":
        breakdowns = {
            key: list(value)
            for key, value in data.items()
            if isinstance(value, list)
        }
        return LinkStats(
            link_id=int(data.get("link_id") or 0),
            code=str(data.get("code", "")),
            original_url=str(data.get("original_url", "")),
            total_clicks=int(data.get("total_clicks") or 0),
            unique_visitors=int(data.get("unique_visitors") or 0),
            breakdowns=breakdowns,
        )
