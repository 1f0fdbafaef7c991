"""Application factory and app-wide configuration."""

#setup: pip install -e ".[test]"
#setup: flask --app backend.app:create_app run --port 5000 --debug

from typing import Optional

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.config import Settings, configure_logging, load_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.config["TESTING"] = settings.testing

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.logger.debug("CORS origins: %s", ", ".join(settings.cors_origins))
    return app
