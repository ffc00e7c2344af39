"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    AUTO_OWNER_TOKEN,
    COLOR_PALETTE,
    DEFAULT_MAX_ROUNDS,
    DEFAULT_WORDS,
    SLOT_COUNT,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'AUTO_OWNER_TOKEN', 'COLOR_PALETTE', 'DEFAULT_MAX_ROUNDS', 'DEFAULT_WORDS', 'SLOT_COUNT'
]
