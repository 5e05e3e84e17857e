from __future__ import annotations

from flask import Flask

from hello_server.config import Settings, get_settings
from hello_server.logging_config import configure_logging
from .routes import bp as main_bp, not_found


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.DEBUG
    app.config["HELLO_SERVER_SETTINGS"] = settings

    app.register_blueprint(main_bp)
    app.register_error_handler(404, not_found)
    app.register_error_handler(405, not_found)
    return app
