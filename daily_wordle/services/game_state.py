"""
Game State

State machine for one day's game: guesses go in, the outcome moves from
playing to win or lose and never back.
"""

from datetime import date
from typing import Callable, Iterable, Optional, Tuple

from ..config.game_settings import MAX_TRIES, WORD_LENGTH, normalize_word
from ..models.game import GameSnapshot, Guess, Outcome
from ..utils.errors import InvalidInput
from .guess_evaluator import GuessEvaluator, MembershipEvaluator


class GameState:
    """
    One daily session.

    Args:
        secret: The word to find
        session_date: UTC calendar day this session belongs to
        max_tries: Number of guesses before the game is lost
        is_valid_word: Membership callback; every well-formed guess is
            accepted when omitted
        evaluator: Letter classification rule
    """

    def __init__(self,
                 secret: str,
                 session_date: date,
                 max_tries: int = MAX_TRIES,
                 is_valid_word: Optional[Callable[[str], bool]] = None,
                 evaluator: Optional[GuessEvaluator] = None):
        secret = normalize_word(secret)
        if len(secret) != WORD_LENGTH or not secret.isalpha():
            raise InvalidInput(f"Secret word must be {WORD_LENGTH} letters, got '{secret}'")
        if max_tries < 1:
            raise InvalidInput("max_tries must be at least 1")

        self._secret = secret
        self.session_date = session_date
        self.max_tries = max_tries
        self._is_valid_word = is_valid_word
        self._evaluator = evaluator or MembershipEvaluator()
        self._guesses = []
        self._used_attempts = 0
        self._state = Outcome.PLAYING

    @classmethod
    def restore(cls,
                secret: str,
                session_date: date,
                guesses: Iterable[str],
                max_tries: int = MAX_TRIES,
                is_valid_word: Optional[Callable[[str], bool]] = None,
                evaluator: Optional[GuessEvaluator] = None,
                outcome: Optional[Outcome] = None,
                guess_count: Optional[int] = None) -> 'GameState':
        """
        Rebuild a session from previously submitted words.

        Stored guesses are replayed without the membership check, since the
        word list may have changed since they were accepted. A terminal
        ``outcome`` freezes the session even when the stored guesses do not
        reach it on their own. ``guess_count`` sets the attempts used when the
        stored guesses are incomplete.
        """
        session = cls(secret, session_date, max_tries, is_valid_word, evaluator)
        for text in guesses:
            if session.is_over:
                break
            text = normalize_word(text)
            if len(text) == WORD_LENGTH and text.isalpha():
                session._apply(text)
        if outcome is not None and outcome.is_terminal:
            session._state = outcome
        if guess_count is not None:
            session._used_attempts = min(max(guess_count, session._used_attempts), max_tries)
        return session

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    @property
    def remaining_attempts(self) -> int:
        return self.max_tries - self._used_attempts

    def current_state(self) -> Outcome:
        return self._state

    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    def submit_guess(self, text: str) -> bool:
        """
        Submit a guess.

        Returns False, leaving the session untouched, when the game is
        already over, the guess is not WORD_LENGTH letters or the word
        is not in the word list.
        """
        if self.is_over:
            return False

        guess = normalize_word(text or "")
        if len(guess) != WORD_LENGTH or not guess.isalpha():
            return False
        if self._is_valid_word is not None and not self._is_valid_word(guess):
            return False

        self._apply(guess)
        return True

    def _apply(self, guess: str) -> None:
        result = self._evaluator.evaluate(self._secret, guess)
        self._guesses.append(result)
        self._used_attempts = len(self._guesses)

        if result.correct:
            self._state = Outcome.WIN
        elif len(self._guesses) >= self.max_tries:
            self._state = Outcome.LOSE

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            date=self.session_date.isoformat(),
            outcome=self._state.value,
            max_tries=self.max_tries,
            remaining_attempts=self.remaining_attempts,
            guesses=[g.to_dict() for g in self._guesses],
            answer=self._secret if self.is_over else None,
        )
