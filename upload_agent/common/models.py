"""Shared Pydantic data models for the upload agent.

These models define the HTTP contract between the form page and the
``/api/upload`` route. Field aliases carry the camelCase names the
browser sends and expects.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class UploadForm(BaseModel):
    """Form fields posted to ``/api/upload`` (the file part is handled separately)."""
    video_url: str = Field(default="", alias="videoUrl")
    category: str = "tech"
    language: str = "en"
    monetization: bool = False
    schedule_time: str = Field(default="", alias="scheduleTime")

    model_config = {"populate_by_name": True}

    @field_validator("monetization", mode="before")
    @classmethod
    def _checkbox_flag(cls, value: object) -> object:
        # Only the literal "true" enables it, anything else posted is off
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value

    @field_validator("video_url", "schedule_time", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value


class UploadResponse(BaseModel):
    """JSON body returned by a successful upload."""
    title: str
    description: str
    tags: list[str]
    hashtags: list[str]
    thumbnail_prompt: str = Field(alias="thumbnailPrompt")
    video_id: str | None = Field(default=None, alias="videoId")
    scheduled_time: str | None = Field(default=None, alias="scheduledTime")

    model_config = {"populate_by_name": True}

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys, leaving out unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
