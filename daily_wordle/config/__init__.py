"""
Configuration Package

- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, constants and word list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, WORD_LIST, MAX_TRIES, load_word_list, parse_word_list,
    validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'WORD_LIST', 'MAX_TRIES', 'load_word_list', 'parse_word_list',
    'validate_word_list_integrity'
]
