import threading
from datetime import date
from unittest.mock import MagicMock

from daily_wordle.config import TestingConfig
from daily_wordle.models.game import Outcome
from daily_wordle.services import game_service as game_service_module
from daily_wordle.services.game_service import DailyGameService, initialize_game_service, get_game_service
from daily_wordle.services.guess_evaluator import StandardEvaluator
from daily_wordle.services.history_store import HistoryStore
from daily_wordle.services.streak_ledger import StreakLedger
from daily_wordle.services.word_selector import select_word
from daily_wordle.utils.errors import PersistenceUnavailable, PersistenceWriteFailed

from conftest import WORDS

DAY_1 = date(2024, 1, 1)
DAY_2 = date(2024, 1, 2)


def _wrong_words(secret, count):
    return [w for w in WORDS if w != secret][:count]


def test_session_uses_word_of_the_day(service):
    session = service.current_session(DAY_1)
    assert session.secret == select_word(WORDS, DAY_1)
    assert service.current_session(DAY_1) is session


def test_win_is_recorded(service, ledger):
    secret = service.current_session(DAY_1).secret
    result = service.submit_guess(secret, DAY_1)

    assert result.accepted
    assert result.persisted
    assert result.snapshot.outcome == "win"
    assert ledger.has_played_today(DAY_1)
    record = ledger.record_for(DAY_1)
    assert record.word == secret
    assert record.guess_count == 1
    assert record.guesses == [secret]
    assert service.streak(DAY_1) == 1


def test_loss_is_recorded_once(service, ledger):
    secret = service.current_session(DAY_1).secret
    for word in _wrong_words(secret, 6):
        service.submit_guess(word, DAY_1)

    result = service.submit_guess(secret, DAY_1)
    assert not result.accepted
    assert result.snapshot.outcome == "lose"
    assert len(ledger.load()) == 1
    assert ledger.record_for(DAY_1).won is False
    assert service.streak(DAY_1) == 0


def test_invalid_guess_not_counted(service):
    result = service.submit_guess("zzzzz", DAY_1)
    assert not result.accepted
    assert result.snapshot.remaining_attempts == service.max_tries


def test_played_day_is_restored_frozen(ledger):
    first = DailyGameService(ledger, words=WORDS)
    secret = first.current_session(DAY_1).secret
    first.submit_guess(secret, DAY_1)

    # A fresh process sees today's result and does not allow replay
    second = DailyGameService(ledger, words=WORDS)
    session = second.current_session(DAY_1)
    assert session.current_state() is Outcome.WIN
    assert [g.text for g in session.guesses()] == [secret]
    assert second.already_played(DAY_1)
    assert not second.submit_guess(secret, DAY_1).accepted


def test_new_day_supersedes_session(service):
    day_one = service.current_session(DAY_1)
    service.submit_guess(day_one.secret, DAY_1)

    day_two = service.current_session(DAY_2)
    assert day_two is not day_one
    assert day_two.session_date == DAY_2
    assert day_two.current_state() is Outcome.PLAYING

    service.submit_guess(day_two.secret, DAY_2)
    assert service.streak(DAY_2) == 2


def test_write_failure_keeps_game_result():
    store = MagicMock(spec=HistoryStore)
    store.load.side_effect = PersistenceUnavailable("no file")
    store.save_record.side_effect = PersistenceWriteFailed("read-only filesystem")
    service = DailyGameService(StreakLedger(store), words=WORDS)

    secret = service.current_session(DAY_1).secret
    result = service.submit_guess(secret, DAY_1)

    assert result.accepted
    assert result.persisted is False
    assert "read-only" in result.error
    assert service.current_session(DAY_1).current_state() is Outcome.WIN


def test_statistics_and_history(service):
    service.submit_guess(service.current_session(DAY_1).secret, DAY_1)
    stats = service.statistics(DAY_1)
    assert stats['games_played'] == 1
    assert stats['guess_distribution']['1'] == 1
    assert service.history()[0]['date'] == "2024-01-01"


def test_initialize_game_service(tmp_path, monkeypatch):
    monkeypatch.setattr(game_service_module, "_game_service", None)
    words_file = tmp_path / "words.txt"
    words_file.write_text("# daily words\napple\n\ntable\n")

    class Config(TestingConfig):
        HISTORY_FILE = str(tmp_path / "history.json")
        WORD_LIST_FILE = str(words_file)
        EVALUATOR = 'standard'
        MAX_TRIES = 4

    service = initialize_game_service(Config)
    assert get_game_service() is service
    assert service.words == ["apple", "table"]
    assert service.max_tries == 4
    assert isinstance(service.evaluator, StandardEvaluator)


def test_guess_resolves_session_in_one_critical_section(service):
    class CountingLock:
        def __init__(self):
            self.lock = threading.Lock()
            self.acquired = 0

        def __enter__(self):
            self.lock.acquire()
            self.acquired += 1
            return self

        def __exit__(self, *exc):
            self.lock.release()

    service.current_session(DAY_1)
    service._lock = CountingLock()

    # Session lookup and the guess share one acquisition
    result = service.submit_guess("zzzzz", DAY_2)
    assert service._lock.acquired == 1
    assert result.snapshot.date == "2024-01-02"
    assert service.current_session(DAY_2).session_date == DAY_2


def test_restored_record_without_guesses_keeps_attempts_used(ledger):
    ledger.record_result(DAY_1, "apple", 4, True)
    service = DailyGameService(ledger, words=WORDS)

    snapshot = service.current_session(DAY_1).snapshot()
    assert snapshot.outcome == "win"
    assert snapshot.guesses == []
    assert snapshot.remaining_attempts == 2
