# Content Generator: category profiles + templated SEO text
"""
Content generator module for YouTube SEO metadata.

Builds a title, description, tags, hashtags and a thumbnail prompt from
a fixed per-category profile table. Unknown categories use the tech
profile.
"""

from .generator import (
    SEOContentGenerator,
    build_tags,
    build_title_options,
    capitalize,
    generate_seo_content,
)
from .models import CategoryProfile, SEOContentRequest, SEOContentResult
from .profiles import CATEGORY_NAMES, CATEGORY_PROFILES, DEFAULT_CATEGORY, get_profile
from .renderer import DescriptionRenderer, render_description

__all__ = [
    "CATEGORY_NAMES",
    "CATEGORY_PROFILES",
    "DEFAULT_CATEGORY",
    "CategoryProfile",
    "DescriptionRenderer",
    "SEOContentGenerator",
    "SEOContentRequest",
    "SEOContentResult",
    "build_tags",
    "build_title_options",
    "capitalize",
    "generate_seo_content",
    "get_profile",
    "render_description",
]
