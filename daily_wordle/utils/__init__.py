"""
Utilities Package

Contains error types and the structured game logger.
"""

from .errors import (
    WordleError, InvalidInput, PersistenceUnavailable,
    PersistenceWriteFailed, DateParseError
)
from .game_logger import GameLogger, game_logger

__all__ = [
    'WordleError', 'InvalidInput', 'PersistenceUnavailable',
    'PersistenceWriteFailed', 'DateParseError',
    'GameLogger', 'game_logger'
]
