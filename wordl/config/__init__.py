"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_LANGUAGE, DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_LENGTH,
    MAX_ATTEMPTS_RANGE, WORD_LENGTH_RANGE, validate_settings
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_LANGUAGE', 'DEFAULT_MAX_ATTEMPTS', 'DEFAULT_WORD_LENGTH',
    'MAX_ATTEMPTS_RANGE', 'WORD_LENGTH_RANGE', 'validate_settings'
]
