"""Date collection use cases (read, replace, merge, clear, range-insert)."""

from __future__ import annotations

import logging
import threading
from datetime import date
from enum import Enum
from typing import Iterable

from datestore.domain.dates import date_range, merge_unique
from datestore.repositories import DateStorage

logger = logging.getLogger(__name__)


class Collection(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"

    @property
    def key(self) -> str:
        """Document/body field holding this collection."""
        return f"{self.value}Dates"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class DateService:
    """
    Read-modify-write operations over the stored date document.

    Inputs arrive already validated (see datestore.schemas). Every mutation
    loads the full document, changes one collection and saves it back. A
    single lock serializes these cycles so concurrent requests cannot
    overwrite each other's changes.
    """

    def __init__(self, storage: DateStorage) -> None:
        self.storage = storage
        self._lock = threading.Lock()

    def get_all(self) -> dict:
        return self.storage.load()

    def replace(self, collection: Collection, dates: Iterable[str]) -> list[str]:
        """Set the collection to dates (real YYYY-MM-DD days only), dropping repeats but keeping first occurrences."""
        with self._lock:
            document = self.storage.load()
            document[collection.key] = merge_unique([], dates)
            self.storage.save(document)
        logger.debug("Replaced %s with %d dates", collection.key, len(document[collection.key]))
        return document[collection.key]

    def merge(self, collection: Collection, dates: Iterable[str]) -> list[str]:
        return self._merge_into(collection, list(dates))

    def clear(self, collection: Collection) -> list[str]:
        with self._lock:
            document = self.storage.load()
            document[collection.key] = []
            self.storage.save(document)
        logger.debug("Cleared %s", collection.key)
        return []

    def add_range(self, collection: Collection, start: date, end: date) -> list[str]:
        return self._merge_into(collection, date_range(start, end))

    def _merge_into(self, collection: Collection, dates: list[str]) -> list[str]:
        with self._lock:
            document = self.storage.load()
            document[collection.key] = merge_unique(document[collection.key], dates)
            self.storage.save(document)
        logger.debug("Merged %d dates into %s", len(dates), collection.key)
        return document[collection.key]
