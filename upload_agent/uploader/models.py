"""Data models for the uploader module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PrivacyStatus(str, Enum):
    """YouTube privacy settings."""
    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"


@dataclass
class VideoUploadRequest:
    """Everything needed to submit one video."""
    title: str
    description: str
    tags: list[str] = field(default_factory=list)
    video_bytes: Optional[bytes] = None
    video_url: Optional[str] = None
    category_id: str = "22"  # People & Blogs
    privacy_status: PrivacyStatus = PrivacyStatus.PUBLIC
    scheduled_time: Optional[str] = None  # ISO-like, e.g. "2024-06-01T18:30"
    access_token: str = ""
    monetization: bool = False  # recorded; the Data API has no field for it

    @property
    def has_source(self) -> bool:
        return bool(self.video_bytes) or bool(self.video_url)


@dataclass
class UploadResult:
    """Result of submitting a video."""
    video_id: str
    success: bool = True
