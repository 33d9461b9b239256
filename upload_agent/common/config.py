"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class WebSettings(BaseModel):
    """Settings for the Flask form app."""
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    max_upload_mb: int = 512


class UploaderSettings(BaseModel):
    """YouTube upload settings."""
    dry_run: bool = True  # return a demo_<millis> id instead of calling the API
    default_privacy_status: Literal["public", "private", "unlisted"] = "public"


class Settings(BaseModel):
    """Top-level application settings."""
    web: WebSettings = Field(default_factory=WebSettings)
    uploader: UploaderSettings = Field(default_factory=UploaderSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = path or CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


def get_google_client_id() -> str:
    """Get Google OAuth client id from environment."""
    key = os.getenv("GOOGLE_CLIENT_ID", "")
    if not key:
        raise ValueError("GOOGLE_CLIENT_ID not set in environment")
    return key


def get_google_client_secret() -> str:
    """Get Google OAuth client secret from environment."""
    key = os.getenv("GOOGLE_CLIENT_SECRET", "")
    if not key:
        raise ValueError("GOOGLE_CLIENT_SECRET not set in environment")
    return key


# Singleton settings instance
settings = Settings.load()
