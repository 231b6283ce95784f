"""
Shared application state and client factories.
"""

from typing import Callable

from mcp.server.fastmcp import FastMCP

from .config import Config
from .utils.client_secrets import ensure_credentials_dir, load_client_secrets
from .utils.logger import get_logger
from .utils.youtube_auth import YouTubeAuthorizer
from .utils.youtube_client import YouTubeClient

logger = get_logger("app")

# Initialize FastMCP server
mcp = FastMCP(name="youtube-live-creator")


def authorize(config: Config, reset: bool = False, progress: Callable[[str], None] | None = None):
    """
    Bootstrap secrets and return valid credentials for config.user_id.

    With reset=True the cached token is discarded first, forcing consent.
    progress receives user-facing status lines; the CLI passes print, the
    MCP server keeps the default (logger) since stdout carries the protocol.
    """
    progress = progress or logger.info
    ensure_credentials_dir(config)
    secrets = load_client_secrets(config, progress=progress)
    authorizer = YouTubeAuthorizer(config, secrets)
    if reset:
        authorizer.store.clear(config.user_id)
    credentials = authorizer.authorize(config.user_id)
    progress("Authorization successful!")
    return credentials


def connect(config: Config, progress: Callable[[str], None] | None = None) -> YouTubeClient:
    """Authorize and build a YouTube client in one step."""
    credentials = authorize(config, progress=progress)
    return YouTubeClient.from_credentials(credentials, config.application_name)


# Client for the MCP server (initialized on first use)
_youtube_client: YouTubeClient | None = None


def get_youtube_client() -> YouTubeClient:
    """Get or create the YouTube client singleton used by MCP tools."""
    global _youtube_client
    if _youtube_client is None:
        _youtube_client = connect(Config.from_env())
    return _youtube_client


def reset_youtube_client() -> None:
    """Drop the cached client so the next tool call re-authorizes."""
    global _youtube_client
    _youtube_client = None
