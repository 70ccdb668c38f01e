import os
import tempfile
from datetime import date

import pytest

# Keep test runs from writing log files into the working directory
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='daily-wordle-logs-'))

from daily_wordle import create_app  # noqa: E402
from daily_wordle.config import TestingConfig  # noqa: E402
from daily_wordle.controllers import game_controller  # noqa: E402
from daily_wordle.services import game_service as game_service_module  # noqa: E402
from daily_wordle.services.game_service import DailyGameService  # noqa: E402
from daily_wordle.services.history_store import JsonHistoryStore  # noqa: E402
from daily_wordle.services.streak_ledger import StreakLedger  # noqa: E402

WORDS = ["about", "penne", "apple", "table", "hello", "world", "globe", "water", "earth", "space", "music"]
TODAY = date(2024, 1, 1)


@pytest.fixture
def history_path(tmp_path):
    return str(tmp_path / "history.json")


@pytest.fixture
def store(history_path):
    return JsonHistoryStore(history_path)


@pytest.fixture
def ledger(store):
    return StreakLedger(store)


@pytest.fixture
def service(ledger):
    return DailyGameService(ledger, words=WORDS)


@pytest.fixture
def client(service, monkeypatch):
    monkeypatch.setattr(game_service_module, '_game_service', service)
    monkeypatch.setattr(game_controller, 'utc_today', lambda: TODAY)
    app = create_app(TestingConfig)
    return app.test_client()
