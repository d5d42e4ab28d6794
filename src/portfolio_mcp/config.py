"""Runtime configuration for Portfolio MCP server."""

from dataclasses import dataclass
import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class ServerConfig:
    content_path: str | None
    default_session_id: str
    max_sessions: int
    site_url: str | None
    open_browser: bool


def get_server_config() -> ServerConfig:
    """Load server config from environment variables."""
    return ServerConfig(
        content_path=_env_str("PORTFOLIO_MCP_CONTENT_PATH"),
        default_session_id=_env_str("PORTFOLIO_MCP_SESSION_ID") or "default",
        max_sessions=max(1, _env_int("PORTFOLIO_MCP_MAX_SESSIONS", 64)),
        site_url=_env_str("PORTFOLIO_MCP_SITE_URL"),
        open_browser=_env_bool("PORTFOLIO_MCP_OPEN_BROWSER", True),
    )
