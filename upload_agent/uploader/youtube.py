"""YouTube uploader: wraps the YouTube Data API v3 ``videos.insert`` call.

Dry-run mode (the default, see ``UploaderSettings.dry_run``) builds the
full request body but returns a ``demo_<epoch-millis>`` id without any
network access. With dry-run off the video bytes are sent through
google-api-python-client using the caller's OAuth access token.

Usage:
    uploader = YouTubeUploader()
    result = uploader.upload(VideoUploadRequest(title=..., description=..., video_url=...))
"""

from __future__ import annotations

import io
import re
import time
from datetime import datetime, timezone
from typing import Any, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseUpload

from upload_agent.common.config import (
    get_google_client_id,
    get_google_client_secret,
    settings,
)
from upload_agent.common.logging import setup_logging

from .models import PrivacyStatus, UploadResult, VideoUploadRequest

logger = setup_logging(module_name="uploader.youtube")

TOKEN_URI = "https://oauth2.googleapis.com/token"
UPLOAD_SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
]

DEFAULT_CATEGORY_ID = "22"  # People & Blogs

# Seconds fraction of any length; padded or cut to microseconds before parsing
_FRACTION_RE = re.compile(r"(:\d{2})\.(\d+)")

CATEGORY_IDS = {
    "tech": "28",  # Science & Technology
    "vlog": "22",  # People & Blogs
    "shorts": "24",  # Entertainment
    "gaming": "20",  # Gaming
    "tutorial": "27",  # Education
    "entertainment": "24",  # Entertainment
    "education": "27",  # Education
}


class UploadError(RuntimeError):
    """Raised when the YouTube API call fails."""


def get_category_id(category: str) -> str:
    """Map a form category to a YouTube category id (People & Blogs if unknown)."""
    return CATEGORY_IDS.get(category, DEFAULT_CATEGORY_ID)


def to_publish_at(scheduled_time: str) -> str:
    """Convert a schedule time to the RFC 3339 UTC form YouTube expects.

    Naive values (what a datetime-local input posts) are taken as UTC.

    Raises:
        ValueError: If the value is not an ISO-8601 date/time.
    """
    value = scheduled_time.strip()
    value = _FRACTION_RE.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6]:0<6}", value, count=1)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond // 1000:03d}Z"


def build_video_metadata(request: VideoUploadRequest) -> dict[str, Any]:
    """Build the ``videos.insert`` request body for snippet and status."""
    status: dict[str, Any] = {"privacyStatus": PrivacyStatus(request.privacy_status).value}
    if request.scheduled_time:
        status["publishAt"] = to_publish_at(request.scheduled_time)

    return {
        "snippet": {
            "title": request.title,
            "description": request.description,
            "tags": list(request.tags),
            "categoryId": request.category_id,
        },
        "status": status,
    }


def make_demo_video_id(now: Optional[float] = None) -> str:
    """Mock video id used in dry-run mode: ``demo_<epoch-millis>``."""
    if now is None:
        now = time.time()
    return f"demo_{int(now * 1000)}"


class YouTubeUploader:
    """Submits a video and its metadata to YouTube.

    No retries: a failed call surfaces as ``UploadError``.
    """

    def __init__(self, dry_run: bool | None = None):
        self.dry_run = settings.uploader.dry_run if dry_run is None else dry_run

    def upload(self, request: VideoUploadRequest) -> UploadResult:
        """Upload a video, or return a demo id in dry-run mode.

        Args:
            request: Video source plus title, description, tags and scheduling

        Returns:
            UploadResult with the video id

        Raises:
            ValueError: No video source, bad schedule time, missing OAuth
                        client config, or a URL-only source outside dry-run
            UploadError: The API call failed
        """
        if not request.has_source:
            raise ValueError("Provide video_bytes or video_url")

        metadata = build_video_metadata(request)

        if self.dry_run:
            result = UploadResult(video_id=make_demo_video_id())
            logger.info(
                "Dry-run upload: %r (category %s, %d tags) -> %s",
                request.title,
                request.category_id,
                len(request.tags),
                result.video_id,
            )
            return result

        if not request.video_bytes:
            raise ValueError("YouTube needs the video bytes; URL sources only work in dry-run mode")

        youtube = self._build_client(request.access_token)

        try:
            media = MediaIoBaseUpload(
                io.BytesIO(request.video_bytes),
                mimetype="video/*",
                resumable=False,
            )
            response = youtube.videos().insert(
                part="snippet,status",
                body=metadata,
                media_body=media,
            ).execute()
            video_id = str(response.get("id") or "")
            if not video_id:
                raise RuntimeError(f"Upload succeeded but no video id returned: {response}")
        except Exception as e:
            logger.error("YouTube upload error: %s", e)
            raise UploadError("Failed to upload to YouTube") from e

        logger.info("Uploaded %r as %s", request.title, video_id)
        return UploadResult(video_id=video_id)

    def _build_client(self, access_token: str):
        """Build an authorized YouTube API client from a user access token."""
        creds = Credentials(
            token=access_token,
            token_uri=TOKEN_URI,
            client_id=get_google_client_id(),
            client_secret=get_google_client_secret(),
            scopes=UPLOAD_SCOPES,
        )
        return build("youtube", "v3", credentials=creds, cache_discovery=False)
