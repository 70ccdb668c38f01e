"""
Guess Evaluator

Classifies each letter of a guess against the secret word.
"""

from collections import Counter
from typing import Dict, List, Type

from ..config.game_settings import WORD_LENGTH, normalize_word
from ..models.game import Guess
from ..utils.errors import InvalidInput


class GuessEvaluator:
    """
    Base evaluator. Handles normalization and the exact-match case;
    subclasses decide how letters outside their position are classified.
    """

    name = "base"

    def evaluate(self, secret: str, guess: str) -> Guess:
        """
        Evaluate a guess against the secret word.

        Raises:
            InvalidInput: If either word is not WORD_LENGTH characters long
        """
        secret = normalize_word(secret)
        guess = normalize_word(guess)

        if len(secret) != WORD_LENGTH or len(guess) != WORD_LENGTH:
            raise InvalidInput(
                f"Guess and secret must both be {WORD_LENGTH} letters "
                f"(got {len(guess)} and {len(secret)})"
            )

        if guess == secret:
            return Guess(
                text=guess,
                correct=True,
                correct_positions=tuple(range(WORD_LENGTH)),
            )

        correct, present = self._classify(secret, guess)
        return Guess(
            text=guess,
            correct=False,
            correct_positions=tuple(correct),
            present_positions=tuple(present),
        )

    def _classify(self, secret: str, guess: str):
        raise NotImplementedError


class MembershipEvaluator(GuessEvaluator):
    """
    A letter off its position is "present" whenever it occurs anywhere in
    the secret. Repeated guess letters are all marked present even when
    the secret holds the letter once, e.g. "eerie" against "apple" marks
    both leading e's present alongside the correct final e.
    """

    name = "membership"

    def _classify(self, secret: str, guess: str):
        correct: List[int] = []
        present: List[int] = []
        for i, letter in enumerate(guess):
            if letter == secret[i]:
                correct.append(i)
            elif letter in secret:
                present.append(i)
        return correct, present


class StandardEvaluator(GuessEvaluator):
    """
    Each secret letter is consumed at most once: exact matches first, then
    present letters from left to right.
    """

    name = "standard"

    def _classify(self, secret: str, guess: str):
        correct = [i for i in range(WORD_LENGTH) if guess[i] == secret[i]]

        remaining = Counter(secret[i] for i in range(WORD_LENGTH) if i not in correct)

        present: List[int] = []
        for i, letter in enumerate(guess):
            if i in correct:
                continue
            if remaining[letter] > 0:
                present.append(i)
                remaining[letter] -= 1
        return correct, present


EVALUATORS: Dict[str, Type[GuessEvaluator]] = {
    MembershipEvaluator.name: MembershipEvaluator,
    StandardEvaluator.name: StandardEvaluator,
}


def get_evaluator(name: str = MembershipEvaluator.name) -> GuessEvaluator:
    """
    Return an evaluator instance by name.

    Raises:
        InvalidInput: If no evaluator has that name
    """
    try:
        return EVALUATORS[name.strip().lower()]()
    except KeyError:
        raise InvalidInput(
            f"Unknown evaluator '{name}'. Choose one of: {', '.join(sorted(EVALUATORS))}"
        ) from None


def evaluate(secret: str, guess: str) -> Guess:
    """Evaluate with the default membership rule."""
    return MembershipEvaluator().evaluate(secret, guess)
