"""
History Stores

Load and save the list of daily history records. The JSON file store is
the default; the MongoDB store keeps one document per day.
"""

import json
import logging
import os
import tempfile
from typing import Any, Iterable, List

from pymongo import ReplaceOne
from pymongo.errors import PyMongoError

from ..models.history import HistoryRecord
from ..utils.errors import DateParseError, PersistenceUnavailable, PersistenceWriteFailed

logger = logging.getLogger(__name__)


def records_from_documents(documents: Iterable[Any]) -> List[HistoryRecord]:
    """
    Convert stored documents to records sorted by date.

    Documents with a malformed date or missing fields are skipped, and only
    the last record seen for a date is kept.
    """
    by_date = {}
    for document in documents:
        if not isinstance(document, dict):
            logger.warning("Skipping history entry that is not an object: %r", document)
            continue
        try:
            record = HistoryRecord.from_dict(document)
        except DateParseError as e:
            logger.warning("Skipping history entry: %s", e)
            continue
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed history entry %r: %s", document, e)
            continue
        by_date[record.date] = record
    return [by_date[day] for day in sorted(by_date)]


class HistoryStore:
    """Persistence interface for history records."""

    def load(self) -> List[HistoryRecord]:
        """
        Raises:
            PersistenceUnavailable: If the store is missing or unreadable
        """
        raise NotImplementedError

    def save(self, records: List[HistoryRecord]) -> None:
        """
        Replace the stored history with ``records``.

        Raises:
            PersistenceWriteFailed: If the records could not be written
        """
        raise NotImplementedError

    def save_record(self, record: HistoryRecord, records: List[HistoryRecord]) -> None:
        """
        Persist a single new or replaced ``record``. ``records`` is the full
        updated history, for stores that can only rewrite everything.

        Raises:
            PersistenceWriteFailed: If the record could not be written
        """
        self.save(records)


class JsonHistoryStore(HistoryStore):
    """History kept as a JSON array of objects in a single file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[HistoryRecord]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise PersistenceUnavailable(f"History file not found: {self.path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceUnavailable(f"Cannot read history file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise PersistenceUnavailable(f"Invalid JSON in history file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise PersistenceUnavailable(f"History file {self.path} must contain an array")

        return records_from_documents(data)

    def save(self, records: List[HistoryRecord]) -> None:
        payload = [record.to_dict() for record in records]
        directory = os.path.dirname(os.path.abspath(self.path))

        try:
            os.makedirs(directory, exist_ok=True)
            # Write to a sibling temp file and rename so readers never see half a file
            fd, tmp_path = tempfile.mkstemp(prefix='.history-', suffix='.json', dir=directory)
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise PersistenceWriteFailed(f"Cannot write history file {self.path}: {e}") from e


class MongoHistoryStore(HistoryStore):
    """History kept in a MongoDB collection, one document per date."""

    def __init__(self, collection):
        self.collection = collection
        try:
            self.collection.create_index("date", unique=True)
        except PyMongoError as e:
            logger.warning("Could not create history index: %s", e)

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str = 'daily_wordle') -> 'MongoHistoryStore':
        from pymongo.mongo_client import MongoClient
        from pymongo.server_api import ServerApi

        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        return cls(client[db_name].history)

    def load(self) -> List[HistoryRecord]:
        try:
            documents = list(self.collection.find({}, {'_id': 0}).sort('date', 1))
        except PyMongoError as e:
            raise PersistenceUnavailable(f"Cannot read history collection: {e}") from e
        return records_from_documents(documents)

    def save(self, records: List[HistoryRecord]) -> None:
        if not records:
            return
        operations = [
            ReplaceOne({'date': document['date']}, document, upsert=True)
            for document in (record.to_dict() for record in records)
        ]
        try:
            self.collection.bulk_write(operations, ordered=True)
        except PyMongoError as e:
            raise PersistenceWriteFailed(f"Cannot write history collection: {e}") from e

    def save_record(self, record: HistoryRecord, records: List[HistoryRecord]) -> None:
        document = record.to_dict()
        try:
            self.collection.replace_one({'date': document['date']}, document, upsert=True)
        except PyMongoError as e:
            raise PersistenceWriteFailed(f"Cannot write history record {document['date']}: {e}") from e


def create_history_store(config_class) -> HistoryStore:
    """
    Build the history store named by ``config_class.HISTORY_BACKEND``.

    Raises:
        PersistenceUnavailable: If the MongoDB backend is chosen without a URI
        ValueError: If the backend name is unknown
    """
    backend = (getattr(config_class, 'HISTORY_BACKEND', 'json') or 'json').lower()

    if backend == 'json':
        return JsonHistoryStore(config_class.HISTORY_FILE)
    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise PersistenceUnavailable("HISTORY_BACKEND is 'mongo' but MONGO_URI is not set")
        return MongoHistoryStore.from_uri(config_class.MONGO_URI, config_class.MONGO_DB)

    raise ValueError(f"Unknown history backend '{backend}'")
