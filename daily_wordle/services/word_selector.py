"""
Word Selector

Picks the secret word for a calendar day. The choice depends only on the
UTC calendar date and the word list, so every process on every machine
agrees on today's word.
"""

import random
from datetime import date, datetime, timezone
from typing import Callable, Iterable, Sequence, Union

from ..config.game_settings import WORD_LENGTH, normalize_word
from ..utils.errors import InvalidInput

DateLike = Union[date, datetime]


def to_utc_date(value: DateLike) -> date:
    """
    Normalize a date or datetime to a UTC calendar date.

    Aware datetimes are converted to UTC first; naive datetimes are taken
    to already be in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInput(f"Expected a date, got {type(value).__name__}")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def date_to_seed(value: DateLike) -> int:
    """Unix timestamp, in seconds, of UTC midnight on the given day."""
    day = to_utc_date(value)
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return int(midnight.timestamp())


def select_word(words: Sequence[str], value: DateLike) -> str:
    """
    Return the secret word for a calendar day.

    Args:
        words: Non-empty ordered list of candidate words
        value: The day; only its UTC calendar date is used

    Raises:
        InvalidInput: If the word list is empty
    """
    if not words:
        raise InvalidInput("Cannot select a word from an empty word list")

    generator = random.Random(date_to_seed(value))
    return words[generator.randrange(len(words))]


def make_word_validator(words: Iterable[str]) -> Callable[[str], bool]:
    """Build the membership check used to accept or reject guesses."""
    allowed = frozenset(normalize_word(word) for word in words)

    def is_valid_word(text: str) -> bool:
        word = normalize_word(text)
        return len(word) == WORD_LENGTH and word in allowed

    return is_valid_word
