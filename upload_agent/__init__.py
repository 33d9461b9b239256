# YouTube Upload Agent
"""
Demo upload agent that turns a video category and language into
YouTube SEO metadata:
- content_generator: category profiles + templated SEO bundle
- uploader: YouTube Data API v3 wrapper (dry-run by default)
- web: Flask form page and upload route
"""

__version__ = "0.1.0"
