"""API routes used by the web app and the browser extension."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from flask import jsonify, request

from hoarder.bookmarks import build_bookmark
from hoarder.config_loader import load_tag_vocabulary
from hoarder.models import BookmarkSource, PageMetadata, SaveContext
from hoarder.platforms import coerce_platform
from hoarder.resolver import MetadataResolver
from hoarder.settings import HoarderSettings
from hoarder.tagging import generate_tags

logger = logging.getLogger(__name__)


def _error(message: str, status: int = 400):
    return jsonify({"status": "error", "error": message}), status


def register_routes(app, settings: HoarderSettings):
    """Register all API routes with the Flask app.

    Args:
        app: Flask app instance.
        settings: Pipeline settings shared by every request.
    """

    def vocabulary():
        return load_tag_vocabulary(settings.tags_config_path)

    @app.route("/api/metadata")
    def api_metadata():
        url = (request.args.get("url") or "").strip()
        if not url:
            return _error("Missing 'url' query parameter")
        logger.info("Resolving metadata for %s", url)
        with MetadataResolver(settings=settings) as resolver:
            metadata = resolver.resolve(url)
        tags = generate_tags(
            metadata.title,
            metadata.description,
            metadata.platform,
            vocabulary=vocabulary(),
            limit=settings.max_tags,
        )
        return jsonify({"status": "success", "metadata": metadata.to_dict(), "tags": tags})

    @app.route("/api/tags", methods=["POST"])
    def api_tags():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _error("Expected a JSON object body")
        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            return _error("Missing 'title'")
        description = payload.get("description")
        tags = generate_tags(
            title,
            description if isinstance(description, str) else None,
            coerce_platform(payload.get("platform")),
            vocabulary=vocabulary(),
            limit=settings.max_tags,
        )
        return jsonify({"status": "success", "tags": tags})

    @app.route("/api/bookmarks/preview", methods=["POST"])
    def api_bookmark_preview():
        """Build the record a caller would persist, without persisting it."""
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _error("Expected a JSON object body")
        url = payload.get("url")
        user_id = payload.get("user_id")
        if not isinstance(url, str) or not url.strip():
            return _error("Missing 'url'")
        if not isinstance(user_id, str) or not user_id.strip():
            return _error("Missing 'user_id'")
        try:
            source = BookmarkSource(payload.get("source") or BookmarkSource.WEB.value)
        except ValueError:
            return _error(f"Unknown source '{payload.get('source')}'")

        context = SaveContext(user_id=user_id.strip(), source=source)
        page = PageMetadata.from_payload(payload.get("page"))
        with MetadataResolver(settings=settings) as resolver:
            record = build_bookmark(url, context, resolver=resolver, page=page, vocabulary=vocabulary())
        return jsonify({"status": "success", "bookmark": record.to_row()})

    @app.route("/api/health")
    def api_health():
        return jsonify(
            {
                "status": "ok",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "config": {
                    "unfurl_endpoint": settings.unfurl_endpoint,
                    "unfurl_api_key_configured": bool(settings.unfurl_api_key),
                    "proxy_enabled": settings.enable_proxy,
                    "fetch_timeout": settings.fetch_timeout,
                    "fetch_retries": settings.fetch_retries,
                    "max_tags": settings.max_tags,
                },
            }
        )
