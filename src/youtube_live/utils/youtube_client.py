"""
YouTube API client for live streaming.

Wraps the YouTube Data API v3 liveStreams and liveBroadcasts endpoints.
Requires OAuth2 credentials with the youtube.force-ssl scope.
"""

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import build_http, set_user_agent

from ..errors import ApiError, TransportError
from .logger import get_logger

logger = get_logger("youtube_client")


def _api_error(operation: str, e: HttpError) -> ApiError:
    status = getattr(e.resp, "status", None)
    reason = getattr(e, "reason", "") or str(e)
    logger.error(f"{operation} failed: {status} - {reason}")
    return ApiError(operation, status, reason)


class YouTubeClient:
    """YouTube API client for live stream operations."""

    def __init__(self, service):
        self._youtube = service

    @classmethod
    def from_credentials(cls, credentials: Credentials, application_name: str) -> "YouTubeClient":
        """
        Build the youtube/v3 service.

        Uses the discovery document bundled with google-api-python-client,
        so nothing goes over the network here.
        """
        try:
            http = set_user_agent(
                AuthorizedHttp(credentials, http=build_http()),
                application_name,
            )
            service = build("youtube", "v3", http=http, cache_discovery=False)
        except Exception as e:
            raise TransportError(f"Could not initialize YouTube API client: {e}") from e

        logger.debug(f"YouTube API client ready for '{application_name}'")
        return cls(service)

    @property
    def youtube(self):
        """The underlying googleapiclient resource."""
        return self._youtube

    def _execute(self, operation: str, request) -> dict:
        """Run a prepared request, mapping every failure to a package error."""
        try:
            return request.execute()
        except HttpError as e:
            raise _api_error(operation, e) from e
        except (httplib2.HttpLib2Error, OSError, GoogleAuthError) as e:
            logger.error(f"{operation} could not reach YouTube: {e}")
            raise TransportError(f"{operation} could not reach YouTube: {e}") from e

    def insert_live_stream(self, body: dict, part: str) -> dict:
        """
        Create a live stream (the ingest endpoint).

        Args:
            body: LiveStream resource
            part: Comma-separated parts to set and return

        Returns:
            The created LiveStream resource
        """
        return self._execute(
            "liveStreams.insert",
            self.youtube.liveStreams().insert(part=part, body=body),
        )

    def insert_live_broadcast(self, body: dict, part: str) -> dict:
        """
        Create a live broadcast (the event viewers see).

        Args:
            body: LiveBroadcast resource
            part: Comma-separated parts to set and return

        Returns:
            The created LiveBroadcast resource
        """
        return self._execute(
            "liveBroadcasts.insert",
            self.youtube.liveBroadcasts().insert(part=part, body=body),
        )

    def bind_live_broadcast(self, broadcast_id: str, stream_id: str, part: str) -> dict:
        """Bind a broadcast to a stream so pushed video is published under it."""
        return self._execute(
            "liveBroadcasts.bind",
            self.youtube.liveBroadcasts().bind(
                id=broadcast_id,
                part=part,
                streamId=stream_id,
            ),
        )
