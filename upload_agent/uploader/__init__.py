# Uploader: YouTube Data API v3 wrapper (dry-run by default)
"""
Uploader module: builds the YouTube ``videos.insert`` request for a
video and its SEO metadata, and either sends it or returns a demo id.
"""

from .models import PrivacyStatus, UploadResult, VideoUploadRequest
from .youtube import (
    CATEGORY_IDS,
    UploadError,
    YouTubeUploader,
    build_video_metadata,
    get_category_id,
    make_demo_video_id,
)

__all__ = [
    "CATEGORY_IDS",
    "PrivacyStatus",
    "UploadError",
    "UploadResult",
    "VideoUploadRequest",
    "YouTubeUploader",
    "build_video_metadata",
    "get_category_id",
    "make_demo_video_id",
]
