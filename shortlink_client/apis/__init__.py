from .auth_api import AuthApi
from .links_api import LinksApi
from .folders_api import FoldersApi
from .tags_api import TagsApi
from .orgs_api import OrgsApi
from .analytics_api import AnalyticsApi
from .admin_api import AdminApi

__all__ = ["AuthApi", "LinksApi", "FoldersApi", "TagsApi", "OrgsApi", "AnalyticsApi", "AdminApi"]
