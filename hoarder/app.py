"""Flask application factory for the Hoarder link API."""
from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from hoarder.api_routes import register_routes
from hoarder.settings import HoarderSettings, load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def create_app(settings: Optional[HoarderSettings] = None) -> Flask:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    # The extension popup and the web bundle call this API cross-origin.
    CORS(app)
    register_routes(app, settings)
    logger.info("Hoarder API ready (unfurl=%s, proxy=%s)", settings.unfurl_endpoint, settings.enable_proxy)
    return app
