# -*- coding: utf-8 -*-
import os

import pytest
from pydantic import SecretStr

from app.modules.youtube.dependencies import get_youtube_client
from app.modules.youtube.services import parse_tags, video_summary
from app.shared.integrations import YouTubeAPIError


class FakeYouTubeClient:
    def __init__(self, refresh_token="refresh-123", fail_with=None):
        self.refresh_token = refresh_token
        self.fail_with = fail_with
        self.uploads = []

    def build_auth_url(self):
        return "https://accounts.google.com/o/oauth2/auth?client_id=cid&access_type=offline"

    def exchange_code(self, code):
        if code == "bad":
            raise YouTubeAPIError("Error al intercambiar código por tokens", details="invalid_grant")
        return {"access_token": "at-1", "refresh_token": "rt-1"}

    def upload_video(self, video_path, metadata, mimetype=None):
        with open(video_path, "rb") as fh:
            content = fh.read()
        self.uploads.append({"path": video_path, "content": content, "metadata": metadata, "mimetype": mimetype})
        if self.fail_with:
            raise self.fail_with
        return {
            "id": "vid123",
            "snippet": {
                "title": metadata.title,
                "description": metadata.description,
                "channelId": "UC1",
                "thumbnails": {"default": {"url": "https://i.ytimg.com/vi/vid123/default.jpg"}},
            },
            "status": {"privacyStatus": metadata.privacy_status},
        }


@pytest.fixture
def youtube(app, override_settings, settings_factory, tmp_path):
    """Cliente YouTube simulado + UPLOAD_DIR en tmp_path (límite 1 MB)."""
    upload_dir = tmp_path / "uploads"
    override_settings(settings_factory(upload_dir=str(upload_dir), max_upload_size_mb=1))

    def _install(client=None):
        client = client or FakeYouTubeClient()
        app.dependency_overrides[get_youtube_client] = lambda: client
        return client

    _install.upload_dir = upload_dir
    return _install


def _video(content=b"\x00\x01fake-mp4", name="clip.mp4"):
    return {"video": (name, content, "video/mp4")}


# ─────────────────────────────────────────────────────────────
# Setup OAuth
# ─────────────────────────────────────────────────────────────

@pytest.mark.anyio
async def test_auth_url(async_client, youtube):
    youtube()
    r = await async_client.get("/youtube/setup/auth-url")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert "access_type=offline" in body["auth_url"]
    assert len(body["instructions"]) == 5


@pytest.mark.anyio
async def test_auth_url_without_credentials_returns_500(async_client):
    r = await async_client.get("/youtube/setup/auth-url")
    assert r.status_code == 500
    assert r.json()["success"] is False


@pytest.mark.anyio
async def test_oauth_callback_returns_refresh_token(async_client, youtube):
    youtube()
    r = await async_client.get("/youtube/oauth/callback", params={"code": "good"})
    assert r.status_code == 200
    body = r.json()
    assert body["refresh_token"] == "rt-1"
    assert "YOUTUBE_REFRESH_TOKEN=rt-1" in body["instructions"]


@pytest.mark.anyio
async def test_oauth_callback_without_code_is_400(async_client, youtube):
    youtube()
    r = await async_client.get("/youtube/oauth/callback")
    assert r.status_code == 400
    assert r.json()["success"] is False


@pytest.mark.anyio
async def test_oauth_callback_exchange_failure_is_500(async_client, youtube):
    youtube()
    r = await async_client.get("/youtube/oauth/callback", params={"code": "bad"})
    assert r.status_code == 500
    assert r.json() == {
        "success": False,
        "error": "Error al procesar la autorización",
        "details": "invalid_grant",
    }


@pytest.mark.anyio
async def test_exchange_code_endpoint(async_client, youtube):
    youtube()
    r = await async_client.post("/youtube/setup/exchange-code", json={"code": "good"})
    assert r.status_code == 200
    assert r.json()["access_token"] == "at-1"
    assert r.json()["refresh_token"] == "rt-1"


@pytest.mark.anyio
async def test_exchange_code_missing_code_shows_example(async_client, youtube):
    youtube()
    r = await async_client.post("/youtube/setup/exchange-code", json={})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Código de autorización no proporcionado"
    assert "code" in body["example"]


@pytest.mark.anyio
async def test_exchange_code_failure_includes_help(async_client, youtube):
    youtube()
    r = await async_client.post("/youtube/setup/exchange-code", json={"code": "bad"})
    assert r.status_code == 500
    assert "/youtube/setup/auth-url" in r.json()["help"]


# ─────────────────────────────────────────────────────────────
# Upload
# ─────────────────────────────────────────────────────────────

@pytest.mark.anyio
async def test_upload_success_and_temp_file_removed(async_client, youtube):
    client = youtube()
    r = await async_client.post(
        "/youtube/upload",
        files=_video(),
        data={"title": "Coleta 12", "description": "Central Norte", "tags": "coleta, , norte", "privacyStatus": "unlisted"},
    )

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    video = body["video"]
    assert video["id"] == "vid123"
    assert video["url"] == "https://www.youtube.com/watch?v=vid123"
    assert video["privacy_status"] == "unlisted"

    sent = client.uploads[0]
    assert sent["content"] == b"\x00\x01fake-mp4"
    assert sent["mimetype"] == "video/mp4"
    assert sent["metadata"].tags == ["coleta", "norte"]
    assert sent["metadata"].privacy_status == "unlisted"
    assert not os.path.exists(sent["path"])
    assert list(youtube.upload_dir.iterdir()) == []


@pytest.mark.anyio
async def test_upload_defaults_privacy_to_settings(async_client, youtube):
    client = youtube()
    r = await async_client.post("/youtube/upload", files=_video(), data={"title": "T"})
    assert r.status_code == 200
    assert client.uploads[0]["metadata"].privacy_status == "private"


@pytest.mark.anyio
async def test_upload_without_file_is_400(async_client, youtube):
    youtube()
    r = await async_client.post("/youtube/upload", data={"title": "T"})
    assert r.status_code == 400
    assert r.json()["error"] == "No se envió ningún archivo de video"


@pytest.mark.anyio
async def test_upload_without_title_is_400(async_client, youtube):
    youtube()
    r = await async_client.post("/youtube/upload", files=_video())
    assert r.status_code == 400
    assert r.json()["error"] == "El título del video es obligatorio"


@pytest.mark.anyio
async def test_upload_invalid_privacy_is_400(async_client, youtube):
    youtube()
    r = await async_client.post("/youtube/upload", files=_video(), data={"title": "T", "privacyStatus": "secret"})
    assert r.status_code == 400


@pytest.mark.anyio
async def test_upload_without_refresh_token_is_500(async_client, youtube):
    client = youtube(FakeYouTubeClient(refresh_token=None))
    r = await async_client.post("/youtube/upload", files=_video(), data={"title": "T"})
    assert r.status_code == 500
    assert r.json()["error"] == "Refresh Token de YouTube no configurado"
    assert client.uploads == []


@pytest.mark.anyio
async def test_upload_too_large_is_413_and_leaves_nothing(async_client, youtube):
    client = youtube()
    big = b"x" * (1024 * 1024 + 1)
    r = await async_client.post("/youtube/upload", files=_video(big), data={"title": "T"})
    assert r.status_code == 413
    assert r.json()["success"] is False
    assert client.uploads == []
    assert list(youtube.upload_dir.iterdir()) == []


@pytest.mark.anyio
async def test_upload_api_failure_is_500_and_temp_removed(async_client, youtube):
    error = YouTubeAPIError("quotaExceeded", details={"code": 403, "message": "quotaExceeded"})
    client = youtube(FakeYouTubeClient(fail_with=error))
    r = await async_client.post("/youtube/upload", files=_video(), data={"title": "T"})

    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Failed to upload video to YouTube"
    assert body["details"]["message"] == "quotaExceeded"
    assert not os.path.exists(client.uploads[0]["path"])


# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw,expected",
    [(None, []), ("", []), ("a", ["a"]), (" a , b ,, c ", ["a", "b", "c"]), (",,", [])],
)
def test_parse_tags(raw, expected):
    assert parse_tags(raw) == expected


def test_video_summary_without_thumbnails():
    summary = video_summary({"id": "v1", "snippet": {"title": "T"}})
    assert summary.url == "https://www.youtube.com/watch?v=v1"
    assert summary.thumbnail == ""
    assert summary.privacy_status is None


def test_youtube_client_built_from_settings(settings_factory):
    settings = settings_factory(
        youtube_client_id="cid",
        youtube_client_secret=SecretStr("csecret"),
        youtube_refresh_token=SecretStr("rt"),
    )
    client = get_youtube_client(settings)
    assert (client.client_id, client.client_secret, client.refresh_token) == ("cid", "csecret", "rt")
