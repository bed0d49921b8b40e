"""Backend endpoint registry.

Static endpoints are precomputed attributes; parameterized endpoints are
methods taking the numeric or string identifiers they substitute. No
identifier validation is done here, the backend rejects bad ids.
"""

from __future__ import annotations

from shortlink_client.config import DEFAULT_API_URL

Identifier = int | str


class EndpointRegistry:
    def __init__(self, base_url: str = DEFAULT_API_URL):
        base = base_url.rstrip("/")
        self.base = base

        # Auth
        self.register = f"{base}/auth/register"
        self.login = f"{base}/auth/login"
        self.verify_email = f"{base}/auth/verify-email"
        self.resend_verification = f"{base}/auth/resend-verification"
        self.forgot_password = f"{base}/auth/forgot-password"
        self.reset_password = f"{base}/auth/reset-password"
        self.change_password = f"{base}/auth/change-password"
        self.delete_account = f"{base}/auth/delete-account"

        # User
        self.app_settings = f"{base}/auth/settings"
        self.user_profile = f"{base}/auth/me"
        self.update_profile = f"{base}/auth/profile"

        # Links
        self.links = f"{base}/links"
        self.bulk_links = f"{base}/links/bulk"
        self.bulk_delete_links = f"{base}/links/bulk/delete"
        self.bulk_update_links = f"{base}/links/bulk/update"
        self.export_links = f"{base}/links/export"
        self.check_code = f"{base}/links/check-code"
        self.health_check = f"{base}/links/health-check"
        self.build_utm = f"{base}/links/build-utm"
        self.sparklines = f"{base}/links/sparklines"
        self.preview_metadata = f"{base}/links/preview-metadata"

        self.dashboard_stats = f"{base}/analytics/dashboard"
        self.orgs = f"{base}/orgs"
        self.folders = f"{base}/folders"
        self.tags = f"{base}/tags"

        self.contact = f"{base}/contact"
        self.health = f"{base}/health"
        self.swagger = f"{base}/swagger-ui"
        self.openapi = f"{base}/api-docs/openapi.json"

        # Admin
        self.admin_stats = f"{base}/admin/stats"
        self.admin_users = f"{base}/admin/users"
        self.admin_blocked_links = f"{base}/admin/blocked/links"
        self.admin_blocked_domains = f"{base}/admin/blocked/domains"
        self.admin_backup = f"{base}/admin/backup"

    def link_stats(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}/stats"

    def link_qr(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}/qr"

    def link_delete(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}"

    def link_update(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}"

    def link_clone(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}/clone"

    def link_pin(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}/pin"

    def link_tags(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}/tags"

    def link_realtime_clicks(self, link_id: Identifier) -> str:
        return f"{self.links}/{link_id}/clicks/realtime"

    def org(self, org_id: Identifier) -> str:
        return f"{self.orgs}/{org_id}"

    def org_members(self, org_id: Identifier) -> str:
        return f"{self.orgs}/{org_id}/members"

    def org_member(self, org_id: Identifier, member_id: Identifier) -> str:
        return f"{self.orgs}/{org_id}/members/{member_id}"

    def org_audit(self, org_id: Identifier) -> str:
        return f"{self.orgs}/{org_id}/audit"

    def folder(self, folder_id: Identifier) -> str:
        return f"{self.folders}/{folder_id}"

    def folder_links(self, folder_id: Identifier) -> str:
        return f"{self.folders}/{folder_id}/links"

    def tag(self, tag_id: Identifier) -> str:
        return f"{self.tags}/{tag_id}"

    def tag_links(self, tag_id: Identifier) -> str:
        return f"{self.tags}/{tag_id}/links"

    def verify_password(self, code: str) -> str:
        return f"{self.base}/{code}/verify"

    def preview(self, code: str) -> str:
        return f"{self.base}/{code}/preview"

    def admin_user(self, user_id: Identifier) -> str:
        return f"{self.admin_users}/{user_id}"

    def admin_user_hard_delete(self, user_id: Identifier) -> str:
        return f"{self.admin_users}/{user_id}/hard"

    def admin_user_restore(self, user_id: Identifier) -> str:
        return f"{self.admin_users}/{user_id}/restore"

    def admin_user_make_admin(self, user_id: Identifier) -> str:
        return f"{self.admin_users}/{user_id}/make-admin"

    def admin_user_remove_admin(self, user_id: Identifier) -> str:
        return f"{self.admin_users}/{user_id}/remove-admin"

    def admin_blocked_link(self, blocked_id: Identifier) -> str:
        return f"{self.admin_blocked_links}/{blocked_id}"

    def admin_blocked_domain(self, blocked_id: Identifier) -> str:
        return f"{self.admin_blocked_domains}/{blocked_id}"

    def admin_backup_cleanup(self, keep: Identifier) -> str:
        return f"{self.admin_backup}/cleanup/{keep}"
