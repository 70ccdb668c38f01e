"""
Game Service

Runs the daily game: picks today's word, resumes or gates today's session
from the history, and records the result when the game ends.
"""

import threading
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..config.game_settings import MAX_TRIES, WORD_LIST, load_word_list
from ..models.game import GameSnapshot, Outcome
from ..utils.errors import PersistenceWriteFailed
from ..utils.game_logger import game_logger
from .game_state import GameState
from .guess_evaluator import GuessEvaluator, get_evaluator
from .history_store import create_history_store
from .streak_ledger import StreakLedger
from .word_selector import make_word_validator, select_word, utc_today


@dataclass
class GuessOutcome:
    """Result of submitting one guess through the service."""
    accepted: bool
    snapshot: GameSnapshot
    persisted: bool = True
    error: Optional[str] = None


class DailyGameService:
    """
    Owns the session for the current UTC day.

    A session is created the first time a day is seen and superseded as soon
    as a call arrives for a later day.
    """

    def __init__(self,
                 ledger: StreakLedger,
                 words: Sequence[str] = WORD_LIST,
                 max_tries: int = MAX_TRIES,
                 evaluator: Optional[GuessEvaluator] = None):
        self.ledger = ledger
        self.words = list(words)
        self.max_tries = max_tries
        self.evaluator = evaluator or get_evaluator()
        self.is_valid_word = make_word_validator(self.words)
        self._session: Optional[GameState] = None
        self._lock = threading.Lock()

    def _start_session(self, today: date) -> GameState:
        record = self.ledger.record_for(today)
        if record is not None:
            game_logger.log_game_event('session_resumed', today.isoformat(),
                                       won=record.won, guess_count=record.guess_count)
            return GameState.restore(
                record.word, today, record.guesses,
                max_tries=self.max_tries,
                is_valid_word=self.is_valid_word,
                evaluator=self.evaluator,
                outcome=Outcome.WIN if record.won else Outcome.LOSE,
                guess_count=record.guess_count,
            )

        secret = select_word(self.words, today)
        game_logger.log_game_event('session_started', today.isoformat(), max_tries=self.max_tries)
        return GameState(
            secret, today,
            max_tries=self.max_tries,
            is_valid_word=self.is_valid_word,
            evaluator=self.evaluator,
        )

    def _session_for(self, today: date) -> GameState:
        # Caller holds self._lock
        if self._session is None or self._session.session_date != today:
            self._session = self._start_session(today)
        return self._session

    def current_session(self, today: Optional[date] = None) -> GameState:
        with self._lock:
            return self._session_for(today or utc_today())

    def submit_guess(self, text: str, today: Optional[date] = None) -> GuessOutcome:
        """
        Submit a guess for today's game.

        When the guess ends the game the result is written to the history.
        A failed write is logged and reported with ``persisted=False``; the
        finished game stays as it is.
        """
        with self._lock:
            session = self._session_for(today or utc_today())
            was_over = session.is_over
            accepted = session.submit_guess(text)
            result = GuessOutcome(accepted=accepted, snapshot=session.snapshot())

            if accepted and not was_over and session.is_over:
                self._record(session, result)

        return result

    def _record(self, session: GameState, result: GuessOutcome) -> None:
        won = session.current_state() is Outcome.WIN
        guesses = session.guesses()
        day = session.session_date.isoformat()

        game_logger.log_game_event(
            'game_won' if won else 'game_lost', day,
            guess_count=len(guesses), target_word=session.secret
        )

        try:
            self.ledger.record_result(
                session.session_date, session.secret, len(guesses), won,
                guesses=[g.text for g in guesses],
            )
        except PersistenceWriteFailed as e:
            result.persisted = False
            result.error = str(e)
            game_logger.log_game_event('history_write_failed', day, error=str(e))

    def already_played(self, today: Optional[date] = None) -> bool:
        return self.ledger.has_played_today(today or utc_today())

    def streak(self, today: Optional[date] = None) -> int:
        return self.ledger.current_streak(today or utc_today())

    def statistics(self, today: Optional[date] = None) -> Dict:
        return self.ledger.statistics(today or utc_today(), self.max_tries)

    def history(self) -> List[Dict]:
        return [record.to_dict() for record in self.ledger.records()]


# Global service instance
_game_service = None


def get_game_service() -> Optional[DailyGameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class) -> DailyGameService:
    """Initialize the global game service instance from a configuration class."""
    global _game_service

    words = load_word_list(config_class.WORD_LIST_FILE) if config_class.WORD_LIST_FILE else WORD_LIST
    ledger = StreakLedger(create_history_store(config_class))

    _game_service = DailyGameService(
        ledger,
        words=words,
        max_tries=config_class.MAX_TRIES,
        evaluator=get_evaluator(config_class.EVALUATOR),
    )
    return _game_service
