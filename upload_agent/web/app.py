"""
YouTube Upload Agent: form page and upload route.

Serves a single-page form that collects a video (file or URL), its
category, language, monetization flag and an optional schedule time,
then returns generated SEO metadata plus the uploader's video id.

Run standalone:  python -m upload_agent.web.app
"""

from __future__ import annotations

from flask import Flask, jsonify, render_template, request
from pydantic import ValidationError

from upload_agent.common.config import Settings, settings as default_settings
from upload_agent.common.logging import setup_logging
from upload_agent.common.models import UploadForm, UploadResponse
from upload_agent.content_generator import CATEGORY_NAMES, SEOContentGenerator, capitalize
from upload_agent.uploader import (
    PrivacyStatus,
    VideoUploadRequest,
    YouTubeUploader,
    get_category_id,
)

logger = setup_logging(module_name="web.app")

MISSING_SOURCE_ERROR = "Please provide a video file or URL"

LANGUAGE_CHOICES = [
    ("en", "English"),
    ("es", "Spanish"),
    ("fr", "French"),
    ("de", "German"),
    ("ja", "Japanese"),
    ("ko", "Korean"),
    ("zh", "Chinese"),
    ("hi", "Hindi"),
    ("ar", "Arabic"),
]

CATEGORY_CHOICES = [(name, capitalize(name)) for name in CATEGORY_NAMES]


def _bearer_token(header: str | None) -> str:
    """Pull the OAuth access token out of an ``Authorization: Bearer`` header."""
    if not header:
        return ""
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def create_app(
    generator: SEOContentGenerator | None = None,
    uploader: YouTubeUploader | None = None,
    settings: Settings | None = None,
) -> Flask:
    """Build the Flask app with its generator and uploader collaborators."""
    settings = settings or default_settings
    generator = generator or SEOContentGenerator()
    uploader = uploader or YouTubeUploader(dry_run=settings.uploader.dry_run)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.web.max_upload_mb * 1024 * 1024

    @app.route("/")
    def index():
        return render_template(
            "index.html",
            categories=CATEGORY_CHOICES,
            languages=LANGUAGE_CHOICES,
        )

    @app.route("/api/upload", methods=["POST"])
    def upload():
        video_file = request.files.get("video")
        if video_file is not None and not video_file.filename:
            video_file = None

        try:
            form = UploadForm.model_validate(request.form.to_dict())
        except ValidationError as e:
            return jsonify({"error": e.errors()[0]["msg"]}), 400

        if video_file is None and not form.video_url:
            return jsonify({"error": MISSING_SOURCE_ERROR}), 400

        try:
            seo = generator.generate_for(
                form.category,
                form.language,
                video_file.filename if video_file else None,
            )

            upload_request = VideoUploadRequest(
                title=seo.title,
                description=seo.description,
                tags=seo.tags,
                video_bytes=video_file.read() if video_file else None,
                video_url=form.video_url or None,
                category_id=get_category_id(form.category),
                privacy_status=PrivacyStatus(settings.uploader.default_privacy_status),
                scheduled_time=form.schedule_time or None,
                access_token=_bearer_token(request.headers.get("Authorization")),
                monetization=form.monetization,
            )
            result = uploader.upload(upload_request)

            response = UploadResponse(
                **seo.to_dict(),
                videoId=result.video_id,
                scheduledTime=form.schedule_time or None,
            )
        except Exception as e:
            logger.exception("Upload error")
            return jsonify({"error": str(e) or "Upload failed"}), 500

        logger.info(
            "Upload handled: category=%s language=%s monetization=%s video_id=%s",
            form.category,
            form.language,
            form.monetization,
            result.video_id,
        )
        return jsonify(response.to_json_dict())

    @app.errorhandler(413)
    def too_large(_error):
        limit = settings.web.max_upload_mb
        return jsonify({"error": f"Video is larger than {limit} MB"}), 413

    return app


def main() -> None:
    app = create_app()
    logger.info("Upload agent listening on http://%s:%d", default_settings.web.host, default_settings.web.port)
    app.run(
        host=default_settings.web.host,
        port=default_settings.web.port,
        debug=default_settings.web.debug,
    )


if __name__ == "__main__":
    main()
