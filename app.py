# app.py
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from flask import Flask
from config import config


def _configure_logging(app, is_debug):
    log_level = logging.DEBUG if is_debug else logging.INFO # Use INFO for prod, DEBUG for dev
    log_format = '%(asctime)s %(levelname)s: %(message)s [%(pathname)s:%(lineno)d]'

    # Clear default handlers Flask might add
    app.logger.handlers.clear()
    app.logger.propagate = False

    handlers = []

    # Always log to stderr for visibility in PaaS logs
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(log_format))
    stream_handler.setLevel(log_level)
    handlers.append(stream_handler)

    # Additionally, file logging for production if not debugging/testing
    if not is_debug and not app.testing:
        try:
            log_dir = app.config['LOG_DIR']
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(os.path.join(log_dir, 'pin_parser.log'),
                                               maxBytes=10*1024*1024, backupCount=5) # 10MB * 5 files
            file_handler.setFormatter(logging.Formatter(log_format))
            file_handler.setLevel(logging.INFO)
            handlers.append(file_handler)
        except OSError as log_e:
            # Stream handler is still available, keep running without the file
            print(f"ERROR: Failed to configure file logging: {log_e}", file=sys.stderr)

    for handler in handlers:
        app.logger.addHandler(handler)
    app.logger.setLevel(log_level)

    # Route the decoder's diagnostics (unknown attributes, skipped fragments) to the same handlers
    parser_logger = logging.getLogger('pin_parser')
    parser_logger.handlers.clear()
    parser_logger.propagate = False
    for handler in handlers:
        parser_logger.addHandler(handler)
    parser_logger.setLevel(app.config.get('PIN_PARSER_LOG_LEVEL', 'WARNING'))

    app.logger.info(f'Logging initialized. Debug: {is_debug}, Level: {logging.getLevelName(log_level)}')


def create_app(config_name=None):
    """Application Factory Function"""
    app = Flask(__name__)

    # --- Load Config FIRST ---
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'production')

    if config_name not in config:
        print(f"WARNING: Invalid FLASK_ENV or config name '{config_name}'. Defaulting to 'production'.", file=sys.stderr)
        config_name = 'production'

    app.config.from_object(config[config_name])
    if config_name == 'production':
        config[config_name].check_production_settings()

    _configure_logging(app, app.debug)

    # --- Register Routes ---
    from routes import register_routes
    register_routes(app)
    app.logger.info("Routes registered successfully.")

    app.logger.info(f"Application setup complete. Config: {config_name}")
    return app


# --- Development Server Execution ---
if __name__ == '__main__':
    dev_app = create_app('development')
    dev_app.run(host='0.0.0.0', port=5001, debug=dev_app.debug)
