"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import (
    DEFAULT_MAX_ROUNDS,
    ROOM_CODE_LENGTH,
    WORDS_ALLOWED_FILE,
    WORDS_ANSWERS_FILE,
)

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3000))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', DEFAULT_MAX_ROUNDS))
    ROOM_CODE_LENGTH = int(os.getenv('ROOM_CODE_LENGTH', ROOM_CODE_LENGTH))

    # Word lists
    WORDS_ALLOWED_PATH = os.getenv('WORDS_ALLOWED_PATH', WORDS_ALLOWED_FILE)
    WORDS_ANSWERS_PATH = os.getenv('WORDS_ANSWERS_PATH', WORDS_ANSWERS_FILE)

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


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
