"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from finplan.app.api.routes import api_bp

DEFAULT_CONFIG = {
    "CORS_ORIGINS": ["http://localhost:5173", "http://127.0.0.1:5173"],
    "LOG_LEVEL": "INFO",
}


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from DEFAULT_CONFIG, then ``FINPLAN_*`` environment
    variables, then ``test_config``.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("FINPLAN")
    if test_config is not None:
        app.config.from_mapping(test_config)
    app.json.sort_keys = False

    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("finplan").setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
