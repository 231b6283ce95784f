"""
Run configuration.

Built once at start-up and passed to the components that need it.
"""

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path

# Full read/write access to live streaming; no narrower scope covers insert + bind
YOUTUBE_FORCE_SSL_SCOPE = "https://www.googleapis.com/auth/youtube.force-ssl"

RESOURCES_DIR = Path(__file__).parent / "resources"


@dataclass(frozen=True)
class Config:
    """Immutable settings for one run."""

    application_name: str = "YouTube LiveStream Creator"
    scopes: tuple[str, ...] = (YOUTUBE_FORCE_SSL_SCOPE,)
    credentials_dir: Path = Path("credentials")
    user_id: str = "user"
    client_secrets_filename: str = "client_secret.json"
    resources_dir: Path = RESOURCES_DIR

    @property
    def bundled_client_secrets(self) -> Path:
        """Client secrets shipped inside the package."""
        return self.resources_dir / self.client_secrets_filename

    @classmethod
    def from_env(cls) -> "Config":
        """Defaults, overridden by YOUTUBE_LIVE_* environment variables."""
        overrides = {}
        credentials_dir = os.getenv("YOUTUBE_LIVE_CREDENTIALS_DIR", "").strip()
        if credentials_dir:
            overrides["credentials_dir"] = Path(credentials_dir)
        user_id = os.getenv("YOUTUBE_LIVE_USER", "").strip()
        if user_id:
            overrides["user_id"] = user_id
        return cls(**overrides)

    def with_overrides(self, **changes) -> "Config":
        return dataclasses.replace(self, **changes)
