"""
Client secrets lookup and credential directory bootstrap.

The OAuth client id/secret come from a client_secret.json downloaded from
Google Cloud Console. It is looked up in the package's bundled resources
first, then in the current working directory.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..config import Config
from ..errors import AuthorizationError, ConfigurationError
from .logger import get_logger

logger = get_logger("client_secrets")

CLIENT_TYPES = ("installed", "web")


@dataclass(frozen=True)
class ClientSecrets:
    """Parsed OAuth client secrets document."""

    client_type: str
    client_id: str
    client_secret: str
    source: Path
    config: dict = field(repr=False, default_factory=dict)

    @classmethod
    def from_document(cls, data: dict, source: Path) -> "ClientSecrets":
        """Parse a Google client secrets document ({"installed": {...}} or {"web": {...}})."""
        if not isinstance(data, dict):
            raise AuthorizationError(f"Malformed client secrets in {source}: expected a JSON object")

        for client_type in CLIENT_TYPES:
            section = data.get(client_type)
            if isinstance(section, dict):
                break
        else:
            raise AuthorizationError(
                f"Malformed client secrets in {source}: missing 'installed' or 'web' section"
            )

        client_id = section.get("client_id", "")
        client_secret = section.get("client_secret", "")
        if not client_id or not client_secret:
            raise AuthorizationError(
                f"Malformed client secrets in {source}: client_id and client_secret are required"
            )

        return cls(
            client_type=client_type,
            client_id=client_id,
            client_secret=client_secret,
            source=source,
            config=data,
        )


def ensure_credentials_dir(config: Config) -> Path:
    """Create the token cache directory if needed. Safe to call repeatedly."""
    path = config.credentials_dir
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as e:
        raise ConfigurationError(
            f"Credentials path {path} exists and is not a directory"
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot create credentials directory {path}: {e}") from e
    logger.debug(f"Credentials directory ready: {path.resolve()}")
    return path


def _read_document(path: Path) -> dict | None:
    """Return the parsed JSON at path, or None if it cannot be read."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise AuthorizationError(f"Malformed client secrets in {path}: {e}") from e


def load_client_secrets(
    config: Config,
    progress: Callable[[str], None] | None = None,
) -> ClientSecrets:
    """
    Locate and parse the client secrets document.

    Checks the bundled resources folder, then the current working directory.

    Raises:
        ConfigurationError: neither location has a readable document.
        AuthorizationError: a document was found but is malformed.
    """
    bundled = config.bundled_client_secrets
    data = _read_document(bundled)
    if data is not None:
        logger.debug(f"Loaded client secrets from {bundled}")
        return ClientSecrets.from_document(data, bundled)

    current_dir = Path.cwd()
    (progress or logger.info)(f"Looking for {config.client_secrets_filename} in: {current_dir}")
    local = current_dir / config.client_secrets_filename
    data = _read_document(local)
    if data is not None:
        logger.debug(f"Loaded client secrets from {local}")
        return ClientSecrets.from_document(data, local)

    raise ConfigurationError(
        f"{config.client_secrets_filename} not found! Please ensure it's either:\n"
        f"1. In the bundled resources folder: {bundled.parent}\n"
        f"2. In the current directory: {current_dir}",
        checked=[str(bundled), str(local)],
    )
