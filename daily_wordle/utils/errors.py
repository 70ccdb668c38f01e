"""
Game Errors

Exception types raised by the daily game engine and its persistence layer.
"""


class WordleError(Exception):
    """Base class for all daily game errors."""


class InvalidInput(WordleError):
    """Malformed guess, mismatched word lengths or an empty word list."""


class PersistenceUnavailable(WordleError):
    """History store is missing or unreadable. Callers treat this as no history."""


class PersistenceWriteFailed(WordleError):
    """
    History could not be written.

    The record that was computed before the failed write is kept on the
    exception so callers can still display the result.
    """

    def __init__(self, message: str, record=None):
        super().__init__(message)
        self.record = record


class DateParseError(WordleError):
    """A stored date string is not a valid ISO-8601 calendar date."""
