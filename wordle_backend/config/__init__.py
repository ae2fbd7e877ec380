"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, modes and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LISTS, WORD_SIZES, MIN_MAX_TRIES, MAX_MAX_TRIES, DEFAULT_TIME_LIMIT_SECONDS,
    GameMode, ModeRules, MODE_RULES, get_mode_rules,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LISTS', 'WORD_SIZES', 'MIN_MAX_TRIES', 'MAX_MAX_TRIES', 'DEFAULT_TIME_LIMIT_SECONDS',
    'GameMode', 'ModeRules', 'MODE_RULES', 'get_mode_rules',
    'validate_word_list_integrity', 'get_word_statistics'
]
