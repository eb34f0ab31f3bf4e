import os
import logging
from flask import Flask
from .config import config_by_name
from .utils.log_context import ContextFilter, LOG_FORMAT

def create_app(config_name=None, config_overrides=None):
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'default')

    app = Flask(__name__)

    app.config.from_object(config_by_name[config_name])

    if config_overrides:
        app.config.update(config_overrides)

    # --- Logging setup ---
    app.logger.addFilter(ContextFilter())
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Register blueprints
    from .routes.main import main_bp
    app.register_blueprint(main_bp)
    from .routes.convert import convert_bp
    app.register_blueprint(convert_bp)

    app.logger.info("Flask application initialization complete.")

    return app
