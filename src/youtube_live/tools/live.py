"""
Live streaming tools.

Provides tools for scheduling YouTube live broadcasts:
- Create a stream + broadcast pair and bind them

Requires OAuth2 setup:
1. Create project in Google Cloud Console
2. Enable YouTube Data API v3
3. Create OAuth2 credentials (Desktop app)
4. Download client secrets JSON as client_secret.json
5. First call will open browser for authorization
"""

from ..app import mcp, get_youtube_client, reset_youtube_client
from ..errors import ApiError, AuthorizationError, ConfigurationError, YouTubeLiveError
from ..provisioner import PRIVACY_STATUSES, StreamRequest, provision_live_stream
from ..utils.logger import get_logger

logger = get_logger("tools.live")


@mcp.tool()
def youtube_create_live_stream(
    title: str,
    scheduled_start_time: str,
    description: str = "",
    privacy: str = "private",
) -> dict:
    """
    Schedule a YouTube live broadcast with its own stream key.

    Creates a live stream, creates a broadcast, and binds them.

    Args:
        title: Title for both the stream and the broadcast
        scheduled_start_time: RFC3339 timestamp, e.g. "2024-11-15T15:00:00.000Z"
        description: Broadcast description
        privacy: "private", "unlisted", or "public" (default: private)

    Returns:
        Dict with stream ID, broadcast ID, and stream key on success.
    """
    privacy = privacy.lower().strip()
    if privacy not in PRIVACY_STATUSES:
        return {
            "status": "error",
            "platform": "youtube",
            "message": f"Unknown privacy: {privacy}. Supported: {', '.join(PRIVACY_STATUSES)}",
        }

    request = StreamRequest(
        title=title,
        description=description,
        scheduled_start_time=scheduled_start_time,
        privacy_status=privacy,
    )

    try:
        client = get_youtube_client()
        result = provision_live_stream(client, request)
    except (ConfigurationError, AuthorizationError) as e:
        reset_youtube_client()
        return {
            "status": "error",
            "platform": "youtube",
            "message": str(e),
        }
    except ApiError as e:
        return {
            "status": "error",
            "platform": "youtube",
            "operation": e.operation,
            "message": f"YouTube API error: {e}",
        }
    except YouTubeLiveError as e:
        logger.error(f"Live stream creation failed: {e}")
        return {
            "status": "error",
            "platform": "youtube",
            "message": f"Live stream creation failed: {e}",
        }
    except Exception as e:
        logger.exception("Unexpected error while creating live stream")
        return {
            "status": "error",
            "platform": "youtube",
            "message": f"Live stream creation failed: {e}",
        }

    return {
        "status": "success",
        "platform": "youtube",
        **result.to_dict(),
        "message": result.format(),
    }
