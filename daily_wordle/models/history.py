"""
History Data Models

One persisted outcome per calendar day.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from ..utils.errors import DateParseError


def parse_date(value: str) -> date:
    """Parse a 'YYYY-MM-DD' string, raising DateParseError when malformed."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise DateParseError(f"Invalid calendar date {value!r}: {e}") from e


def _require(data: Dict[str, Any], key: str, kind: type):
    value = data[key]
    # bool is an int subclass, so reject it explicitly for integer fields
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"Field '{key}' must be {kind.__name__}, got {value!r}")
    return value


@dataclass
class HistoryRecord:
    """
    Outcome of one daily game.

    Attributes:
        date: Calendar day of the game (UTC)
        word: The secret word for that day
        guess_count: Number of guesses submitted
        won: Whether the word was found
        streak: Consecutive-win streak as of this day
        guesses: Submitted words, so a finished board can be shown again
    """
    date: date
    word: str
    guess_count: int
    won: bool
    streak: int
    guesses: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date.isoformat(),
            'word': self.word,
            'guessCount': self.guess_count,
            'won': self.won,
            'streak': self.streak,
            'guesses': list(self.guesses),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryRecord':
        """
        Build a record from its stored form.

        Raises:
            DateParseError: If the date field is missing or malformed
            KeyError: If another required field is missing
            ValueError: If a field has the wrong JSON type
        """
        guesses = data.get('guesses') or []
        if not isinstance(guesses, list) or not all(isinstance(g, str) for g in guesses):
            raise ValueError(f"Field 'guesses' must be a list of strings, got {guesses!r}")

        return cls(
            date=parse_date(data.get('date')),
            word=_require(data, 'word', str),
            guess_count=_require(data, 'guessCount', int),
            won=_require(data, 'won', bool),
            streak=_require(data, 'streak', int),
            guesses=list(guesses),
        )
