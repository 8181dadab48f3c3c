"""Storage interface shared by the JSON and in-memory adapters."""
from __future__ import annotations

from typing import Any, Protocol

COLLECTION_KEYS = ("availableDates", "occupiedDates")


class StorageError(Exception):
    """Raised when the document cannot be read or written."""


class DateStorage(Protocol):
    def load(self) -> dict:
        ...

    def save(self, document: dict) -> None:
        ...


def empty_document() -> dict:
    return {key: [] for key in COLLECTION_KEYS}


def normalize_document(raw: Any) -> dict:
    """
    Check the document shape and return it with both collections present.

    Missing collection keys default to an empty list; anything that is not
    a JSON object, or a collection that is not a list, is a StorageError.
    """
    if not isinstance(raw, dict):
        raise StorageError("Document must be a JSON object")
    document = dict(raw)
    for key in COLLECTION_KEYS:
        value = document.setdefault(key, [])
        if not isinstance(value, list):
            raise StorageError(f"{key} must be an array")
    return document


def ordered_document(document: dict) -> dict:
    """Copy with the collection keys first, in their fixed order."""
    ordered = {key: list(document.get(key) or []) for key in COLLECTION_KEYS}
    for key, value in document.items():
        ordered.setdefault(key, value)
    return ordered
