from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000"


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class AppSettings:
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = 30
    session_path: str = ""
    login_path: str = "/login"
    rate_limit_fallback_seconds: int = 60
    max_workers: int = 4
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "AppSettings":
        load_env_files()

        api_url = os.getenv("SHORTLINK_API_URL", "").strip() or DEFAULT_API_URL
        api_url = api_url.rstrip("/")

        default_session_path = os.path.join(
            os.getenv("LOCALAPPDATA", str(Path.home())),
            "ShortlinkClient",
            "session.json",
        )
        session_path = os.getenv("SHORTLINK_SESSION_PATH", "").strip() or default_session_path
        login_path = os.getenv("SHORTLINK_LOGIN_PATH", "/login").strip()
        log_level = os.getenv("SHORTLINK_LOG_LEVEL", "INFO").strip().upper()

        try:
            timeout_seconds = float(os.getenv("SHORTLINK_TIMEOUT_SECONDS", "30"))
            rate_limit_fallback_seconds = int(os.getenv("SHORTLINK_RATE_LIMIT_FALLBACK_SECONDS", "60"))
            max_workers = int(os.getenv("SHORTLINK_MAX_WORKERS", "4"))
        except ValueError as error:
            raise ConfigurationError(f"Invalid numeric setting: {error}") from error

        settings = AppSettings(
            api_url=api_url,
            timeout_seconds=timeout_seconds,
            session_path=session_path,
            login_path=login_path,
            rate_limit_fallback_seconds=rate_limit_fallback_seconds,
            max_workers=max_workers,
            log_level=log_level,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        problems = []

        parsed = urlparse(self.api_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            problems.append("SHORTLINK_API_URL must be an absolute http(s) URL")

        if self.timeout_seconds <= 0:
            problems.append("SHORTLINK_TIMEOUT_SECONDS must be greater than 0")

        if self.rate_limit_fallback_seconds < 0:
            problems.append("SHORTLINK_RATE_LIMIT_FALLBACK_SECONDS must be 0 or greater")

        if self.max_workers < 1:
            problems.append("SHORTLINK_MAX_WORKERS must be 1 or greater")

        if not self.login_path.startswith("/"):
            problems.append("SHORTLINK_LOGIN_PATH must start with '/'")

        valid_levels = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if self.log_level not in valid_levels:
            problems.append("SHORTLINK_LOG_LEVEL must be one of: " + ", ".join(sorted(valid_levels)))

        if problems:
            raise ConfigurationError("Invalid settings: " + "; ".join(problems))


ENV_PREFIX = "SHORTLINK_"


def load_env_files(file_name: str = ".env") -> list[Path]:
    """Copy ``SHORTLINK_*`` assignments from .env files into the environment.

    Looks at ``$SHORTLINK_ENV_FILE``, then the working directory, then the
    project root. Values already set (by the shell or an earlier file) are
    kept. Returns the files that were read.
    """
    explicit = os.getenv("SHORTLINK_ENV_FILE", "").strip()
    candidates = [Path(explicit).expanduser()] if explicit else []
    candidates += [Path.cwd() / file_name, Path(__file__).resolve().parent.parent / file_name]

    loaded: list[Path] = []
    for path in dict.fromkeys(candidate.resolve() for candidate in candidates):
        if not path.is_file():
            continue
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as error:
            logger.warning("Skipping unreadable env file %s: %s", path, error)
            continue
        for key, value in _assignments(lines):
            os.environ.setdefault(key, value)
        loaded.append(path)
    return loaded


def _assignments(lines: list[str]):
    for raw_line in lines:
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if key.startswith(ENV_PREFIX):
            yield key, value.strip('"').strip("'")
