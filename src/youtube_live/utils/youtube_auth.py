"""
YouTube OAuth2 authorization.

Uses the installed-app flow from google-auth-oauthlib: a local HTTP
listener on an ephemeral port captures the redirect after the user
approves access in the browser. Tokens are cached per user id so later
runs skip the browser entirely.
"""

import json
from pathlib import Path
from typing import Callable

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from ..config import Config
from ..errors import AuthorizationError
from .client_secrets import ClientSecrets
from .logger import get_logger

logger = get_logger("youtube_auth")


class TokenStore:
    """One authorized-user JSON file per user id inside the credentials directory."""

    def __init__(self, directory: Path, scopes: list[str]):
        self.directory = directory
        self.scopes = scopes

    def path_for(self, user_id: str) -> Path:
        return self.directory / f"{user_id}.json"

    def load(self, user_id: str) -> Credentials | None:
        """Load cached credentials, or None if absent or unreadable."""
        path = self.path_for(user_id)
        if not path.exists():
            return None
        try:
            with open(path) as f:
                token_data = json.load(f)
            creds = Credentials.from_authorized_user_info(token_data, self.scopes)
            logger.debug(f"Loaded YouTube token for '{user_id}' from {path}")
            return creds
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load YouTube token file {path}: {e}")
            return None

    def save(self, user_id: str, creds: Credentials) -> None:
        """Save credentials for user_id."""
        path = self.path_for(user_id)
        with open(path, "w") as f:
            f.write(creds.to_json())
        logger.debug(f"YouTube token saved to {path}")

    def clear(self, user_id: str) -> bool:
        """Remove cached credentials. Returns True if a file was removed."""
        path = self.path_for(user_id)
        if path.exists():
            path.unlink()
            logger.info(f"Removed cached YouTube token {path}")
            return True
        return False


FlowFactory = Callable[[dict, list[str]], InstalledAppFlow]


def _default_flow_factory(client_config: dict, scopes: list[str]) -> InstalledAppFlow:
    return InstalledAppFlow.from_client_config(client_config, scopes=scopes)


class YouTubeAuthorizer:
    """Produces valid credentials for a user id, prompting in the browser only when needed."""

    def __init__(
        self,
        config: Config,
        secrets: ClientSecrets,
        flow_factory: FlowFactory = _default_flow_factory,
    ):
        self.config = config
        self.secrets = secrets
        self.scopes = list(config.scopes)
        self.store = TokenStore(config.credentials_dir, self.scopes)
        self._flow_factory = flow_factory

    def _refresh(self, creds: Credentials) -> bool:
        """Refresh in place. Returns True if successful."""
        logger.info("YouTube token expired, refreshing...")
        try:
            creds.refresh(Request())
        except GoogleAuthError as e:
            logger.error(f"YouTube token refresh failed: {e}")
            return False
        logger.info("YouTube token refreshed successfully")
        return True

    def _run_flow(self) -> Credentials:
        """Interactive consent. Blocks until the browser redirect arrives."""
        try:
            flow = self._flow_factory(self.secrets.config, self.scopes)
        except ValueError as e:
            raise AuthorizationError(
                f"Malformed client secrets in {self.secrets.source}: {e}"
            ) from e

        logger.info("Starting YouTube OAuth flow (will open browser)")
        try:
            # run_local_server closes its listener on every exit path
            creds = flow.run_local_server(
                port=0,
                access_type="offline",
                prompt="consent",
            )
        except Exception as e:
            raise AuthorizationError(f"YouTube authorization failed: {e}") from e

        if not creds:
            raise AuthorizationError("YouTube authorization returned no credentials")
        if not creds.refresh_token:
            logger.warning("No refresh token returned; the next run will prompt again")

        logger.info("YouTube OAuth completed successfully")
        return creds

    def authorize(self, user_id: str | None = None) -> Credentials:
        """
        Get valid credentials for user_id.

        Order: cached token, refreshed cached token, interactive flow.
        Whatever is obtained is written back to the token store.

        Raises:
            AuthorizationError: consent was not completed or the token
                exchange failed.
        """
        user_id = user_id or self.config.user_id
        creds = self.store.load(user_id)

        if creds and creds.valid:
            logger.info(f"Using cached YouTube credentials for '{user_id}'")
            return creds

        if creds and creds.refresh_token and self._refresh(creds):
            self.store.save(user_id, creds)
            return creds

        creds = self._run_flow()
        self.store.save(user_id, creds)
        return creds
