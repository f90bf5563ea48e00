# config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('FLASK_SECRET_KEY', 'default-fallback-secret-key-change-me')
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_SIZE', 5 * 1024 * 1024)) # 5MB of pasted Blueprint text
    DEBUG = False
    TESTING = False

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR', os.path.join(os.path.dirname(os.path.abspath(__file__)), 'logs'))
    PIN_PARSER_LOG_LEVEL = os.environ.get('PIN_PARSER_LOG_LEVEL', 'WARNING') # Level for the pin_parser package logger

    @staticmethod
    def check_production_settings():
        if not Config.SECRET_KEY or Config.SECRET_KEY == 'default-fallback-secret-key-change-me':
            raise ValueError("SECRET_KEY is not set or is using the default fallback in production!")


class DevelopmentConfig(Config):
    DEBUG = True
    PIN_PARSER_LOG_LEVEL = os.environ.get('PIN_PARSER_LOG_LEVEL', 'INFO') # Show unknown-attribute diagnostics

class ProductionConfig(Config):
    DEBUG = False

class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    MAX_CONTENT_LENGTH = 64 * 1024

# Select config based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
