"""
Game Data Models

Contains the game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class LetterStatus(Enum):
    """Per-position classification of a guessed letter."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class Outcome(Enum):
    """Session outcome. PLAYING is the only non-terminal state."""
    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.PLAYING


@dataclass(frozen=True)
class Guess:
    """One evaluated attempt. Positions in neither tuple are absent."""
    text: str
    correct: bool
    correct_positions: Tuple[int, ...] = ()
    present_positions: Tuple[int, ...] = ()

    def status_at(self, index: int) -> LetterStatus:
        if index in self.correct_positions:
            return LetterStatus.CORRECT
        if index in self.present_positions:
            return LetterStatus.PRESENT
        return LetterStatus.ABSENT

    def statuses(self) -> List[LetterStatus]:
        return [self.status_at(i) for i in range(len(self.text))]

    def to_dict(self) -> dict:
        return {
            'guess': self.text,
            'correct': self.correct,
            'letters': [
                {'letter': letter, 'status': status.value}
                for letter, status in zip(self.text, self.statuses())
            ]
        }


@dataclass
class GameSnapshot:
    """Read-only view of a daily session, ready for JSON serialization."""
    date: str
    outcome: str
    max_tries: int
    remaining_attempts: int
    guesses: List[dict] = field(default_factory=list)
    answer: Optional[str] = None  # Only included when the game is over
