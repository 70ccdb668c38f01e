"""
Configuration Management Module

All configuration is loaded from environment variables with sensible defaults.
A local .env file is read first when present.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_bool('DEBUG')

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    MAX_TRIES = int(os.getenv('MAX_TRIES', 6))
    WORD_LIST_FILE = os.getenv('WORD_LIST_FILE')
    EVALUATOR = os.getenv('EVALUATOR', 'membership')

    # History Settings
    HISTORY_BACKEND = os.getenv('HISTORY_BACKEND', 'json')
    HISTORY_FILE = os.path.expanduser(
        os.getenv('HISTORY_FILE', os.path.join('~', '.daily_wordle', 'history.json'))
    )
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'daily_wordle')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    HISTORY_BACKEND = 'json'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
