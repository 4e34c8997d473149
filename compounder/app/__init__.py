"""Application factory and app-wide configuration."""

import logging

from flask import Flask
from flask_cors import CORS

from compounder.app.api.routes import api_bp
from compounder.app.config import Config
from compounder.utils_logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(config_class: type = Config) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("API ready, CORS origins: %s", ", ".join(app.config["CORS_ORIGINS"]))
    return app
