"""
Live stream provisioning.

Creates a live stream, creates a broadcast, then binds the two. The three
calls run strictly in order and the first failure aborts the rest.
Resources created before a failure are left on YouTube.
"""

from dataclasses import asdict, dataclass
from typing import Protocol

from .utils.logger import get_logger

logger = get_logger("provisioner")

STREAM_PARTS = "snippet,cdn,status"
BROADCAST_PARTS = "snippet,status"
BIND_PARTS = "id,contentDetails"

PRIVACY_STATUSES = ("private", "unlisted", "public")


class LiveStreamingClient(Protocol):
    """What the provisioner needs from the API client."""

    def insert_live_stream(self, body: dict, part: str) -> dict: ...

    def insert_live_broadcast(self, body: dict, part: str) -> dict: ...

    def bind_live_broadcast(self, broadcast_id: str, stream_id: str, part: str) -> dict: ...


@dataclass(frozen=True)
class StreamRequest:
    """What to schedule. scheduled_start_time must be RFC3339; YouTube validates it."""

    title: str
    description: str
    scheduled_start_time: str
    privacy_status: str = "private"


@dataclass(frozen=True)
class ProvisionedStream:
    """IDs and ingest details of a bound stream/broadcast pair."""

    stream_id: str
    broadcast_id: str
    stream_key: str
    ingestion_address: str = ""

    def format(self) -> str:
        lines = [
            "Stream created successfully!",
            f"Stream ID: {self.stream_id}",
            f"Broadcast ID: {self.broadcast_id}",
            f"Stream Key: {self.stream_key}",
        ]
        if self.ingestion_address:
            lines.append(f"Ingestion Address: {self.ingestion_address}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return asdict(self)


def build_stream_body(title: str) -> dict:
    return {
        "snippet": {"title": title},
        "cdn": {
            "ingestionType": "rtmp",
            "resolution": "variable",
            "frameRate": "variable",
        },
        "status": {"streamStatus": "active"},
    }


def build_broadcast_body(request: StreamRequest) -> dict:
    return {
        "snippet": {
            "title": request.title,
            "description": request.description,
            "scheduledStartTime": request.scheduled_start_time,
        },
        "status": {"privacyStatus": request.privacy_status},
    }


def provision_live_stream(client: LiveStreamingClient, request: StreamRequest) -> ProvisionedStream:
    """
    Create a stream and a broadcast and bind them.

    Args:
        client: API client (YouTubeClient or a stand-in)
        request: Title, description, start time, and privacy

    Returns:
        ProvisionedStream with both IDs and the stream key

    Raises:
        ApiError: any of the three calls was rejected. Nothing created
            earlier is rolled back.
    """
    logger.info(f"Creating live stream '{request.title}'")
    stream = client.insert_live_stream(build_stream_body(request.title), STREAM_PARTS)
    stream_id = stream["id"]
    ingestion_info = stream.get("cdn", {}).get("ingestionInfo", {})
    logger.debug(f"Live stream created: {stream_id}")
    if not ingestion_info.get("streamName"):
        logger.warning(f"Live stream {stream_id} came back without a stream key (cdn.ingestionInfo.streamName)")

    logger.info(f"Creating {request.privacy_status} broadcast scheduled for {request.scheduled_start_time}")
    broadcast = client.insert_live_broadcast(build_broadcast_body(request), BROADCAST_PARTS)
    broadcast_id = broadcast["id"]
    logger.debug(f"Live broadcast created: {broadcast_id}")

    logger.info("Binding broadcast to stream")
    client.bind_live_broadcast(broadcast_id, stream_id, BIND_PARTS)

    return ProvisionedStream(
        stream_id=stream_id,
        broadcast_id=broadcast_id,
        stream_key=ingestion_info.get("streamName", ""),
        ingestion_address=ingestion_info.get("ingestionAddress", ""),
    )


def create_live_stream(
    client: LiveStreamingClient,
    title: str,
    description: str,
    scheduled_start_time: str,
    privacy_status: str = "private",
) -> str:
    """Provision a bound stream/broadcast pair and return the summary text."""
    request = StreamRequest(
        title=title,
        description=description,
        scheduled_start_time=scheduled_start_time,
        privacy_status=privacy_status,
    )
    return provision_live_stream(client, request).format()
