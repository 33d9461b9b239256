# Common utilities and shared modules
"""
Shared components used by the generator, uploader and web layers:
- Project configuration
- Logging configuration
- HTTP contract models (Pydantic schemas)
"""

from .config import settings, PROJECT_ROOT, CONFIG_DIR
from .logging import redirect_logging, setup_logging
from .models import UploadForm, UploadResponse

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "setup_logging",
    "redirect_logging",
    "UploadForm",
    "UploadResponse",
]
