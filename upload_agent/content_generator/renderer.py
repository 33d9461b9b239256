"""
Description renderer for SEO content.
Handles Jinja2 template loading and rendering of per-category descriptions.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import CategoryProfile


class DescriptionRenderer:
    """
    Renders video descriptions from per-category Jinja2 templates.

    Usage:
        renderer = DescriptionRenderer()
        text = renderer.render(profile, category="gaming")
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the description renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, profile: CategoryProfile, category: str) -> str:
        """
        Render the description for a profile.

        The profile picks the template and keywords; ``category`` is the
        caller's raw string, which some templates echo back verbatim.

        Args:
            profile: Resolved category profile
            category: Category as requested

        Returns:
            Rendered description text
        """
        template = self.env.get_template(profile.description_template)
        return template.render(keywords=profile.keywords, category=category)


def render_description(profile: CategoryProfile, category: str) -> str:
    """
    Convenience function to render a description.

    Args:
        profile: Resolved category profile
        category: Category as requested

    Returns:
        Rendered description text
    """
    renderer = DescriptionRenderer()
    return renderer.render(profile, category)
