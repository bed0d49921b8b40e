from shortlink_client.config import AppSettings, ConfigurationError
from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.results import ApiCallError, ApiError, CallResult, ErrorKind
from shortlink_client.services import DashboardSnapshot, ShortlinkService
from shortlink_client.session_store import FileSessionStore, MemorySessionStore, SessionStoreError

__all__ = [
    "ApiCallError",
    "ApiError",
    "AppSettings",
    "CallResult",
    "ConfigurationError",
    "DashboardSnapshot",
    "EndpointRegistry",
    "ErrorKind",
    "FileSessionStore",
    "HttpClient",
    "MemorySessionStore",
    "SessionStoreError",
    "ShortlinkService",
]
