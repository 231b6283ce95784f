from unittest.mock import MagicMock

import httplib2
import pytest

from youtube_live.errors import ConfigurationError
from youtube_live.tools import live
from youtube_live.utils.youtube_client import YouTubeClient


@pytest.fixture
def use_client(monkeypatch):
    def _use(client):
        monkeypatch.setattr(live, "get_youtube_client", lambda: client)
        return client

    return _use


def test_create_live_stream_tool(use_client, fake_client):
    use_client(fake_client)

    result = live.youtube_create_live_stream(
        title="Speedrun",
        scheduled_start_time="2025-03-01T18:00:00Z",
        description="Any%",
        privacy="Unlisted",
    )

    assert result["status"] == "success"
    assert result["stream_id"] == "streamId=S1"
    assert result["broadcast_id"] == "broadcastId=B1"
    assert result["stream_key"] == "abcd-1234"
    assert fake_client.calls[1][1]["status"]["privacyStatus"] == "unlisted"


def test_unknown_privacy_makes_no_calls(use_client, fake_client):
    use_client(fake_client)

    result = live.youtube_create_live_stream(
        title="T", scheduled_start_time="2025-03-01T18:00:00Z", privacy="friends"
    )

    assert result["status"] == "error"
    assert fake_client.calls == []


def test_api_error_is_reported(use_client, make_client):
    use_client(make_client(fail_on="stream"))

    result = live.youtube_create_live_stream(title="T", scheduled_start_time="2025-03-01T18:00:00Z")

    assert result["status"] == "error"
    assert result["operation"] == "liveStreams.insert"
    assert "Live streaming is not enabled" in result["message"]


def test_configuration_error_resets_client(monkeypatch):
    resets = []

    def missing():
        raise ConfigurationError("client_secret.json not found!")

    monkeypatch.setattr(live, "get_youtube_client", missing)
    monkeypatch.setattr(live, "reset_youtube_client", lambda: resets.append(True))

    result = live.youtube_create_live_stream(title="T", scheduled_start_time="2025-03-01T18:00:00Z")

    assert result == {
        "status": "error",
        "platform": "youtube",
        "message": "client_secret.json not found!",
    }
    assert resets == [True]


def test_unreachable_server_is_reported(use_client):
    service = MagicMock(name="youtube")
    service.liveStreams.return_value.insert.return_value.execute.side_effect = httplib2.ServerNotFoundError(
        "Unable to find the server at youtube.googleapis.com"
    )
    use_client(YouTubeClient(service))

    result = live.youtube_create_live_stream(title="T", scheduled_start_time="2025-03-01T18:00:00Z")

    assert result["status"] == "error"
    assert "Unable to find the server" in result["message"]


def test_unexpected_error_is_reported(use_client, fake_client, monkeypatch):
    def broken(body, part):
        raise KeyError("id")

    monkeypatch.setattr(fake_client, "insert_live_stream", broken)
    use_client(fake_client)

    result = live.youtube_create_live_stream(title="T", scheduled_start_time="2025-03-01T18:00:00Z")

    assert result["status"] == "error"
    assert result["message"].startswith("Live stream creation failed:")
