"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import Guess, GameSnapshot, LetterStatus, Outcome
from .history import HistoryRecord, parse_date

__all__ = ['Guess', 'GameSnapshot', 'LetterStatus', 'Outcome', 'HistoryRecord', 'parse_date']
