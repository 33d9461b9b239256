"""SEO Content Generator: category-driven titles, descriptions and tags.

Maps a category and language to a complete SEO bundle using the static
category profiles. Everything is deterministic except the title, which
is picked at random from five templates.

Usage:
    generator = SEOContentGenerator()
    result = generator.generate(SEOContentRequest(category="gaming", language="en"))
"""

from __future__ import annotations

import random

from upload_agent.common.logging import setup_logging

from .models import SEOContentRequest, SEOContentResult
from .profiles import get_profile
from .renderer import DescriptionRenderer

logger = setup_logging(module_name="content_generator")

TITLE_TEMPLATES = (
    "{category} Content You Need to See",
    "Amazing {category} - Must Watch!",
    "The Ultimate {category} Experience",
    "{category} That Will Blow Your Mind",
    "Top {category} Content of 2024",
)

# Appended after the language code, in this order
TAG_SUFFIXES = ("2024", "viral", "trending", "new")


def capitalize(text: str) -> str:
    """Uppercase the first character only; the rest is left untouched."""
    return text[:1].upper() + text[1:]


def build_title_options(category: str) -> list[str]:
    """Return the five candidate titles for a category."""
    name = capitalize(category)
    return [template.format(category=name) for template in TITLE_TEMPLATES]


def build_tags(profile_tags: tuple[str, ...] | list[str], language: str) -> list[str]:
    """Profile tags, then the language code, then the fixed suffixes."""
    return [*profile_tags, language, *TAG_SUFFIXES]


class SEOContentGenerator:
    """Generates SEO metadata for a video from its category.

    The title echoes the requested category even when it is unknown;
    description, tags, hashtags and thumbnail prompt come from the
    resolved profile (tech for unknown categories).
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        renderer: DescriptionRenderer | None = None,
    ):
        self._rng = rng or random.Random()
        self.renderer = renderer or DescriptionRenderer()

    def generate(self, request: SEOContentRequest) -> SEOContentResult:
        """Build the SEO bundle for one request.

        Args:
            request: Category, language and optional file name

        Returns:
            Fully populated SEOContentResult
        """
        profile = get_profile(request.category)

        title = self._rng.choice(build_title_options(request.category))
        description = self.renderer.render(profile, request.category)

        result = SEOContentResult(
            title=title,
            description=description,
            tags=build_tags(profile.tags, request.language),
            hashtags=list(profile.hashtags),
            thumbnail_prompt=profile.thumbnail_prompt,
        )

        logger.debug(
            "SEO content generated: category=%s profile=%s language=%s title=%r",
            request.category,
            profile.name,
            request.language,
            title,
        )
        return result

    def generate_for(
        self,
        category: str,
        language: str,
        video_file_name: str | None = None,
    ) -> SEOContentResult:
        """Keyword-argument shortcut for ``generate``."""
        return self.generate(
            SEOContentRequest(
                category=category,
                language=language,
                video_file_name=video_file_name,
            )
        )


def generate_seo_content(
    category: str,
    language: str,
    video_file_name: str | None = None,
) -> SEOContentResult:
    """Convenience function using a fresh, OS-seeded generator.

    Args:
        category: Video category (unknown values fall back to tech)
        language: Language code, appended to the tags unchanged
        video_file_name: Accepted for callers that have it; unused

    Returns:
        Generated SEO bundle
    """
    return SEOContentGenerator().generate_for(category, language, video_file_name)
