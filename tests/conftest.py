import json

import pytest

from youtube_live.config import Config
from youtube_live.errors import ApiError

CLIENT_SECRETS = {
    "installed": {
        "client_id": "1234-test.apps.googleusercontent.com",
        "client_secret": "test-secret",
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": "https://oauth2.googleapis.com/token",
        "redirect_uris": ["http://localhost"],
    }
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def config(tmp_path, workdir):
    return Config(
        credentials_dir=tmp_path / "credentials",
        resources_dir=tmp_path / "resources",
    )


@pytest.fixture
def write_secrets():
    def _write(directory, data=CLIENT_SECRETS, name="client_secret.json"):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


class FakeLiveClient:
    """Records calls in order; fail_on is "stream", "broadcast" or "bind"."""

    def __init__(
        self,
        stream_id="streamId=S1",
        broadcast_id="broadcastId=B1",
        stream_key="abcd-1234",
        ingestion_address="rtmp://a.rtmp.youtube.com/live2",
        fail_on=None,
    ):
        self.stream_id = stream_id
        self.broadcast_id = broadcast_id
        self.stream_key = stream_key
        self.ingestion_address = ingestion_address
        self.fail_on = fail_on
        self.calls = []

    @property
    def call_names(self):
        return [c[0] for c in self.calls]

    def insert_live_stream(self, body, part):
        self.calls.append(("insert_live_stream", body, part))
        if self.fail_on == "stream":
            raise ApiError("liveStreams.insert", 403, "Live streaming is not enabled")
        return {
            "id": self.stream_id,
            "snippet": body["snippet"],
            "status": body["status"],
            "cdn": {
                "ingestionType": "rtmp",
                "ingestionInfo": {
                    k: v
                    for k, v in (("streamName", self.stream_key), ("ingestionAddress", self.ingestion_address))
                    if v is not None
                },
            },
        }

    def insert_live_broadcast(self, body, part):
        self.calls.append(("insert_live_broadcast", body, part))
        if self.fail_on == "broadcast":
            raise ApiError("liveBroadcasts.insert", 400, "Invalid scheduled start time")
        return {"id": self.broadcast_id, "snippet": body["snippet"], "status": body["status"]}

    def bind_live_broadcast(self, broadcast_id, stream_id, part):
        self.calls.append(("bind_live_broadcast", (broadcast_id, stream_id), part))
        if self.fail_on == "bind":
            raise ApiError("liveBroadcasts.bind", 403, "Stream is already bound")
        return {"id": broadcast_id, "contentDetails": {"boundStreamId": stream_id}}


@pytest.fixture
def make_client():
    return FakeLiveClient


@pytest.fixture
def fake_client():
    return FakeLiveClient()
