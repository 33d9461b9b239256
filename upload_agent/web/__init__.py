# Web: Flask form page and /api/upload route
from .app import create_app

__all__ = ["create_app"]
