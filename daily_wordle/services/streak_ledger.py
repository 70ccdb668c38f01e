"""
Streak Ledger

Reconstructs daily outcomes across process runs and computes the
consecutive-win streak.
"""

import logging
import threading
from collections import OrderedDict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from ..config.game_settings import MAX_TRIES
from ..models.history import HistoryRecord
from ..utils.errors import PersistenceUnavailable, PersistenceWriteFailed
from .history_store import HistoryStore

logger = logging.getLogger(__name__)


class StreakLedger:
    """
    History of daily results backed by a HistoryStore.

    Reads that fail are treated as an empty history so a broken or missing
    file never stops a game from starting.
    """

    def __init__(self, store: HistoryStore):
        self.store = store
        self._lock = threading.Lock()

    def load(self) -> List[HistoryRecord]:
        """
        Read all records, ordered by date.

        Raises:
            PersistenceUnavailable: If the store is missing or unreadable
        """
        return self.store.load()

    def records(self) -> List[HistoryRecord]:
        try:
            return self.load()
        except PersistenceUnavailable as e:
            logger.warning("History unavailable, starting from empty history: %s", e)
            return []

    def record_for(self, day: date) -> Optional[HistoryRecord]:
        for record in self.records():
            if record.date == day:
                return record
        return None

    @staticmethod
    def compute_streak(records: Iterable[HistoryRecord], day: date, won: bool) -> int:
        """0 for a loss, previous day's streak + 1 for a win, otherwise 1."""
        if not won:
            return 0

        yesterday = day - timedelta(days=1)
        for record in records:
            if record.date == yesterday:
                return record.streak + 1
        return 1

    def record_result(self,
                      day: date,
                      word: str,
                      guess_count: int,
                      won: bool,
                      guesses: Optional[List[str]] = None) -> HistoryRecord:
        """
        Store the outcome for ``day``, replacing any record already kept for it.

        Raises:
            PersistenceWriteFailed: If the history could not be saved. The
                computed record is available as ``error.record``.
        """
        with self._lock:
            records = self.records()
            record = HistoryRecord(
                date=day,
                word=word,
                guess_count=guess_count,
                won=won,
                streak=self.compute_streak(records, day, won),
                guesses=list(guesses or []),
            )

            updated = [r for r in records if r.date != day]
            updated.append(record)
            updated.sort(key=lambda r: r.date)

            try:
                self.store.save_record(record, updated)
            except PersistenceWriteFailed as e:
                e.record = record
                raise

            return record

    def has_played_today(self, day: date) -> bool:
        return self.record_for(day) is not None

    def current_streak(self, day: date) -> int:
        """Streak as of the latest record on or before ``day``; 0 without history."""
        latest = None
        for record in self.records():
            if record.date <= day:
                latest = record
        return latest.streak if latest else 0

    def statistics(self, day: date, max_tries: int = MAX_TRIES) -> Dict:
        """
        Summary over all records up to ``day``.

        Returns:
            dict with games_played, wins, win_percentage, current_streak,
            max_streak and guess_distribution (wins keyed by guess count)
        """
        records = [r for r in self.records() if r.date <= day]
        wins = [r for r in records if r.won]

        distribution = OrderedDict((str(n), 0) for n in range(1, max_tries + 1))
        for record in wins:
            key = str(record.guess_count)
            distribution[key] = distribution.get(key, 0) + 1

        return {
            'games_played': len(records),
            'wins': len(wins),
            'win_percentage': round(100 * len(wins) / len(records)) if records else 0,
            'current_streak': records[-1].streak if records else 0,
            'max_streak': max((r.streak for r in records), default=0),
            'guess_distribution': dict(distribution),
        }
