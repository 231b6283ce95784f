"""
Exception types raised by youtube-live-creator.

Each layer raises its own kind; only the entry points (CLI, MCP tools)
catch them.
"""


class YouTubeLiveError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigurationError(YouTubeLiveError):
    """Client secrets or the credential directory are missing or unusable."""

    def __init__(self, message: str, checked: list[str] | None = None):
        super().__init__(message)
        self.checked = checked or []


class AuthorizationError(YouTubeLiveError):
    """OAuth consent, token exchange, or refresh failed."""


class TransportError(YouTubeLiveError):
    """The API client could not be constructed."""


class ApiError(YouTubeLiveError):
    """The YouTube Data API rejected a request."""

    def __init__(self, operation: str, status: int | None, reason: str):
        self.operation = operation
        self.status = status
        self.reason = reason
        super().__init__(f"{operation} failed ({status}): {reason}")
