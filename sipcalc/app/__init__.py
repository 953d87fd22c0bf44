"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from sipcalc.app.api.routes import api_bp
from sipcalc.app.cli import register_cli
from sipcalc.config import Settings, load_settings
from sipcalc.utils.logging import setup_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    # keep summary fields in engine order
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    register_cli(app)
    return app
