"""Category profiles: keywords, tags, hashtags and thumbnail prompts.

Profiles are module constants built at import time and never mutated.
Unknown categories resolve to the ``tech`` profile.
"""

from __future__ import annotations

from types import MappingProxyType

from .models import CategoryProfile

DEFAULT_CATEGORY = "tech"

_PROFILES = (
    CategoryProfile(
        name="tech",
        keywords=(
            "technology", "software", "coding", "programming", "development",
            "innovation", "digital", "tech review", "gadgets", "AI",
        ),
        tags=(
            "technology", "tech", "software", "innovation", "digital",
            "gadgets", "techreview", "coding", "programming", "development",
        ),
        hashtags=("#Technology", "#Tech", "#Innovation", "#Digital", "#Software"),
        thumbnail_prompt=(
            "High-tech futuristic design with bold text overlay, vibrant blue and "
            "purple gradient, modern gadgets or code in background, professional "
            "and sleek aesthetic"
        ),
    ),
    CategoryProfile(
        name="vlog",
        keywords=(
            "vlog", "daily vlog", "lifestyle", "daily life", "personal",
            "day in the life", "behind the scenes", "journey", "experience", "story",
        ),
        tags=(
            "vlog", "dailyvlog", "lifestyle", "dayinthelife", "behindthescenes",
            "vlogger", "daily", "life", "personal", "journey",
        ),
        hashtags=("#Vlog", "#DailyVlog", "#Lifestyle", "#DayInTheLife", "#Vlogger"),
        thumbnail_prompt=(
            "Bright and colorful lifestyle shot with expressive face, warm natural "
            "lighting, candid moment, high contrast with bold text, inviting and "
            "personal vibe"
        ),
    ),
    CategoryProfile(
        name="shorts",
        keywords=(
            "shorts", "short video", "quick", "viral", "trending",
            "short form", "bite-sized", "clip", "fast", "snappy",
        ),
        tags=(
            "shorts", "shortvideo", "viral", "trending", "quick",
            "shortform", "youtubeshorts", "viralshorts", "trendingshorts", "clip",
        ),
        hashtags=("#Shorts", "#YouTubeShorts", "#Viral", "#Trending", "#ShortVideo"),
        thumbnail_prompt=(
            "Eye-catching vertical design with bold colors, dynamic action shot, "
            "large text with high contrast, energetic and attention-grabbing "
            "composition"
        ),
    ),
    CategoryProfile(
        name="gaming",
        keywords=(
            "gaming", "gameplay", "game", "gamer", "playthrough",
            "walkthrough", "lets play", "game review", "esports", "gaming tips",
        ),
        tags=(
            "gaming", "gameplay", "gamer", "playthrough", "letsplay",
            "walkthrough", "gamereview", "esports", "videogames", "games",
        ),
        hashtags=("#Gaming", "#Gameplay", "#Gamer", "#LetsPlay", "#VideoGames"),
        thumbnail_prompt=(
            "Epic gaming scene with character action shot, vibrant neon colors, "
            "game logo prominent, intense expression, dark background with "
            "glowing effects"
        ),
    ),
    CategoryProfile(
        name="tutorial",
        keywords=(
            "tutorial", "how to", "guide", "learn", "step by step",
            "beginner", "tips", "tricks", "education", "teach",
        ),
        tags=(
            "tutorial", "howto", "guide", "learn", "education",
            "tips", "tricks", "stepbystep", "beginner", "teaching",
        ),
        hashtags=("#Tutorial", "#HowTo", "#Learn", "#Guide", "#Education"),
        thumbnail_prompt=(
            "Clean educational layout with step numbers, bright background, "
            "before/after comparison, clear title text, professional and "
            "trustworthy design"
        ),
    ),
    CategoryProfile(
        name="entertainment",
        keywords=(
            "entertainment", "fun", "funny", "comedy", "hilarious",
            "laugh", "entertaining", "humor", "amusing", "viral",
        ),
        tags=(
            "entertainment", "funny", "comedy", "fun", "humor",
            "hilarious", "entertaining", "laugh", "viral", "amusing",
        ),
        hashtags=("#Entertainment", "#Funny", "#Comedy", "#Fun", "#Viral"),
        thumbnail_prompt=(
            "Expressive reaction face with bright colors, bold text, high energy "
            "composition, funny or surprising expression, yellow and red accents"
        ),
    ),
    CategoryProfile(
        name="education",
        keywords=(
            "education", "learning", "knowledge", "educational", "teach",
            "lesson", "academic", "informative", "science", "facts",
        ),
        tags=(
            "education", "learning", "educational", "knowledge", "teach",
            "lesson", "informative", "science", "facts", "academic",
        ),
        hashtags=("#Education", "#Learning", "#Knowledge", "#Educational", "#Science"),
        thumbnail_prompt=(
            "Professional educational design with icons or diagrams, clean "
            "white/blue background, bold readable text, academic but "
            "approachable aesthetic"
        ),
    ),
)

CATEGORY_PROFILES: MappingProxyType[str, CategoryProfile] = MappingProxyType(
    {p.name: p for p in _PROFILES}
)

# Ordered as the form lists them
CATEGORY_NAMES: tuple[str, ...] = tuple(p.name for p in _PROFILES)


def get_profile(category: str) -> CategoryProfile:
    """Return the profile for ``category``, or the tech profile if unknown."""
    return CATEGORY_PROFILES.get(category, CATEGORY_PROFILES[DEFAULT_CATEGORY])


def is_known_category(category: str) -> bool:
    return category in CATEGORY_PROFILES
