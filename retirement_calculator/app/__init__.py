"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from retirement_calculator.app.api.routes import api_bp
from retirement_calculator.app.config import Config

logger = logging.getLogger(__name__)


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from ``Config``, then ``RETIREMENT_CALC_*`` environment
    variables, then ``test_config`` if given.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("RETIREMENT_CALC")
    if test_config is not None:
        app.config.from_mapping(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.debug("API mounted at /api, CORS origins %s", app.config["CORS_ORIGINS"])
    return app
