"""Shared test fixtures for the upload agent."""

import random
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without an install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from upload_agent.common.config import Settings, UploaderSettings, WebSettings
from upload_agent.content_generator import SEOContentGenerator
from upload_agent.uploader import YouTubeUploader
from upload_agent.web import create_app


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def seeded_generator() -> SEOContentGenerator:
    """Generator whose title pick is reproducible."""
    return SEOContentGenerator(rng=random.Random(1234))


@pytest.fixture
def test_settings() -> Settings:
    """Settings with dry-run uploads and a small upload limit."""
    return Settings(
        web=WebSettings(max_upload_mb=1),
        uploader=UploaderSettings(dry_run=True),
    )


@pytest.fixture
def app(seeded_generator, test_settings):
    """Flask app wired with a seeded generator and a dry-run uploader."""
    flask_app = create_app(
        generator=seeded_generator,
        uploader=YouTubeUploader(dry_run=True),
        settings=test_settings,
    )
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
