import os
import logging
from flask import Flask
from .config import config_by_name
from .utils.log_context import ContextFilter

def create_app(config_name=None, config_overrides=None):
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'default')

    app = Flask(__name__)

    app.config.from_object(config_by_name[config_name])

    if config_overrides:
        app.config.update(config_overrides)

    # Flask 2.3+ reads this from the JSON provider rather than app.config
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    # --- Logging setup ---
    app.logger.addFilter(ContextFilter())
    log_format = '[%(asctime)s] %(levelname)s in %(module)s: %(context)s%(message)s'
    formatter = logging.Formatter(log_format)
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Register blueprints
    from .routes.main import main_bp
    app.register_blueprint(main_bp)
    from .routes.coordinates import coordinates_bp
    app.register_blueprint(coordinates_bp)

    from .commands import coord_cli
    app.cli.add_command(coord_cli)

    app.logger.info("Flask application initialization complete.")
    return app
