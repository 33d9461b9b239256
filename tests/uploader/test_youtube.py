"""Tests for the uploader module.

Tests cover:
- Category id mapping
- Request body building (snippet, status, publishAt)
- Schedule time conversion
- Dry-run uploads (demo ids, no API access)
- Real uploads with a mocked google-api-python-client
- Error wrapping and source validation
"""

from unittest.mock import MagicMock, patch

import pytest

from upload_agent.uploader import (
    CATEGORY_IDS,
    PrivacyStatus,
    UploadError,
    UploadResult,
    VideoUploadRequest,
    YouTubeUploader,
    build_video_metadata,
    get_category_id,
    make_demo_video_id,
)
from upload_agent.uploader.youtube import to_publish_at


# === Fixtures ===


@pytest.fixture
def video_request() -> VideoUploadRequest:
    return VideoUploadRequest(
        title="Top Gaming Content of 2024",
        description="Epic gameplay...",
        tags=["gaming", "en", "2024"],
        video_bytes=b"\x00\x01fake-mp4",
        category_id="20",
        access_token="ya29.token",
    )


@pytest.fixture
def google_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "client-id")
    monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "client-secret")


@pytest.fixture
def mock_youtube():
    """Patch the discovery ``build`` and return the fake client."""
    client = MagicMock()
    client.videos.return_value.insert.return_value.execute.return_value = {"id": "abc123XYZ"}
    with patch("upload_agent.uploader.youtube.build", return_value=client) as build_mock:
        client.build_mock = build_mock
        yield client


# === Test: Category ids ===


class TestCategoryIds:
    @pytest.mark.parametrize(
        "category,expected",
        [
            ("tech", "28"),
            ("vlog", "22"),
            ("shorts", "24"),
            ("gaming", "20"),
            ("tutorial", "27"),
            ("entertainment", "24"),
            ("education", "27"),
        ],
    )
    def test_known(self, category, expected):
        assert get_category_id(category) == expected

    def test_unknown_is_people_and_blogs(self):
        assert get_category_id("cooking") == "22"
        assert get_category_id("") == "22"

    def test_covers_all_form_categories(self):
        assert len(CATEGORY_IDS) == 7


# === Test: Metadata ===


class TestBuildVideoMetadata:
    def test_body_shape(self, video_request):
        body = build_video_metadata(video_request)
        assert body == {
            "snippet": {
                "title": "Top Gaming Content of 2024",
                "description": "Epic gameplay...",
                "tags": ["gaming", "en", "2024"],
                "categoryId": "20",
            },
            "status": {"privacyStatus": "public"},
        }

    def test_privacy_status(self, video_request):
        video_request.privacy_status = PrivacyStatus.UNLISTED
        assert build_video_metadata(video_request)["status"]["privacyStatus"] == "unlisted"

    def test_privacy_status_from_string(self, video_request):
        video_request.privacy_status = "private"
        assert build_video_metadata(video_request)["status"]["privacyStatus"] == "private"

    def test_publish_at_only_when_scheduled(self, video_request):
        video_request.scheduled_time = "2024-06-01T18:30"
        status = build_video_metadata(video_request)["status"]
        assert status["publishAt"] == "2024-06-01T18:30:00.000Z"

    def test_invalid_privacy_status(self, video_request):
        video_request.privacy_status = "friends-only"
        with pytest.raises(ValueError):
            build_video_metadata(video_request)


class TestPublishAt:
    def test_naive_is_utc(self):
        assert to_publish_at("2024-12-31T23:59") == "2024-12-31T23:59:00.000Z"

    def test_offset_converted_to_utc(self):
        assert to_publish_at("2024-06-01T10:00:00+02:00") == "2024-06-01T08:00:00.000Z"

    def test_zulu_suffix(self):
        assert to_publish_at("2024-06-01T10:00:00Z") == "2024-06-01T10:00:00.000Z"

    def test_milliseconds(self):
        assert to_publish_at("2024-06-01T10:00:00.250") == "2024-06-01T10:00:00.250Z"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-06-01T10:00:00.25", "2024-06-01T10:00:00.250Z"),
            ("2024-06-01T10:00:00.5Z", "2024-06-01T10:00:00.500Z"),
            ("2024-06-01T10:00:00.1234+01:00", "2024-06-01T09:00:00.123Z"),
            ("2024-06-01T10:00:00.123456789", "2024-06-01T10:00:00.123Z"),
        ],
    )
    def test_any_fraction_length(self, value, expected):
        assert to_publish_at(value) == expected

    def test_invalid(self):
        with pytest.raises(ValueError):
            to_publish_at("next tuesday")


# === Test: Dry run ===


class TestDryRun:
    def test_demo_id_format(self):
        assert make_demo_video_id(now=1717000000.123) == "demo_1717000000123"

    def test_demo_id_uses_clock(self):
        with patch("upload_agent.uploader.youtube.time.time", return_value=12.5):
            assert make_demo_video_id() == "demo_12500"

    def test_returns_demo_id_without_api(self, video_request, mock_youtube):
        result = YouTubeUploader(dry_run=True).upload(video_request)

        assert result.success is True
        assert result.video_id.startswith("demo_")
        assert result.video_id[len("demo_"):].isdigit()
        mock_youtube.build_mock.assert_not_called()

    def test_url_source_is_enough(self):
        request = VideoUploadRequest(title="t", description="d", video_url="https://example.com/v.mp4")
        assert YouTubeUploader(dry_run=True).upload(request).success

    def test_missing_source(self):
        request = VideoUploadRequest(title="t", description="d")
        with pytest.raises(ValueError, match="video_bytes or video_url"):
            YouTubeUploader(dry_run=True).upload(request)

    def test_bad_schedule_time_surfaces(self, video_request):
        video_request.scheduled_time = "not-a-date"
        with pytest.raises(ValueError):
            YouTubeUploader(dry_run=True).upload(video_request)

    def test_default_comes_from_settings(self):
        with patch("upload_agent.uploader.youtube.settings") as mock_settings:
            mock_settings.uploader.dry_run = False
            assert YouTubeUploader().dry_run is False


# === Test: Real upload ===


class TestRealUpload:
    def test_inserts_video(self, video_request, google_env, mock_youtube):
        result = YouTubeUploader(dry_run=False).upload(video_request)

        assert result == UploadResult(video_id="abc123XYZ", success=True)
        insert = mock_youtube.videos.return_value.insert
        insert.assert_called_once()
        kwargs = insert.call_args.kwargs
        assert kwargs["part"] == "snippet,status"
        assert kwargs["body"] == build_video_metadata(video_request)
        assert kwargs["media_body"] is not None

    def test_client_built_with_token(self, video_request, google_env, mock_youtube):
        YouTubeUploader(dry_run=False).upload(video_request)

        args, kwargs = mock_youtube.build_mock.call_args
        assert args == ("youtube", "v3")
        creds = kwargs["credentials"]
        assert creds.token == "ya29.token"
        assert creds.client_id == "client-id"

    def test_api_failure_wrapped(self, video_request, google_env, mock_youtube):
        mock_youtube.videos.return_value.insert.return_value.execute.side_effect = RuntimeError("quota")

        with pytest.raises(UploadError, match="Failed to upload to YouTube") as exc_info:
            YouTubeUploader(dry_run=False).upload(video_request)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_missing_id_wrapped(self, video_request, google_env, mock_youtube):
        mock_youtube.videos.return_value.insert.return_value.execute.return_value = {}

        with pytest.raises(UploadError):
            YouTubeUploader(dry_run=False).upload(video_request)

    def test_missing_client_config(self, video_request, monkeypatch, mock_youtube):
        monkeypatch.delenv("GOOGLE_CLIENT_ID", raising=False)
        monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "client-secret")

        with pytest.raises(ValueError, match="GOOGLE_CLIENT_ID"):
            YouTubeUploader(dry_run=False).upload(video_request)

    def test_url_only_rejected(self, google_env, mock_youtube):
        request = VideoUploadRequest(title="t", description="d", video_url="https://example.com/v.mp4")

        with pytest.raises(ValueError, match="dry-run"):
            YouTubeUploader(dry_run=False).upload(request)
        mock_youtube.build_mock.assert_not_called()


class TestModels:
    def test_has_source(self):
        assert not VideoUploadRequest(title="t", description="d").has_source
        assert VideoUploadRequest(title="t", description="d", video_bytes=b"x").has_source
