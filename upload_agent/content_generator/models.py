"""Data models for the content generator module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CategoryProfile:
    """Static SEO building blocks for one video category.

    The description template lives in ``templates/descriptions/{name}.jinja2``.
    """
    name: str
    keywords: tuple[str, ...]
    tags: tuple[str, ...]
    hashtags: tuple[str, ...]
    thumbnail_prompt: str

    @property
    def description_template(self) -> str:
        return f"descriptions/{self.name}.jinja2"


@dataclass
class SEOContentRequest:
    """Input for a single generation call."""
    category: str
    language: str
    video_file_name: Optional[str] = None  # accepted, not used for generation


@dataclass
class SEOContentResult:
    """Generated SEO bundle for one video."""
    title: str
    description: str
    tags: list[str] = field(default_factory=list)
    hashtags: list[str] = field(default_factory=list)
    thumbnail_prompt: str = ""

    def to_dict(self) -> dict:
        """Convert to the JSON shape returned to the browser."""
        return {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "hashtags": list(self.hashtags),
            "thumbnailPrompt": self.thumbnail_prompt,
        }
