"""
Services Package

Contains the game engine and the service classes built on it.
"""

from .word_selector import select_word, date_to_seed, utc_today, make_word_validator
from .guess_evaluator import GuessEvaluator, MembershipEvaluator, StandardEvaluator, get_evaluator
from .game_state import GameState
from .history_store import HistoryStore, JsonHistoryStore, MongoHistoryStore, create_history_store
from .streak_ledger import StreakLedger
from .game_service import DailyGameService, GuessOutcome, get_game_service, initialize_game_service

__all__ = [
    'select_word', 'date_to_seed', 'utc_today', 'make_word_validator',
    'GuessEvaluator', 'MembershipEvaluator', 'StandardEvaluator', 'get_evaluator',
    'GameState',
    'HistoryStore', 'JsonHistoryStore', 'MongoHistoryStore', 'create_history_store',
    'StreakLedger',
    'DailyGameService', 'GuessOutcome', 'get_game_service', 'initialize_game_service'
]
