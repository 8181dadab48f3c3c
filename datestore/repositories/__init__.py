"""
Persistence adapters.

Services depend on the DateStorage interface rather than touching the JSON
file, so the file can be swapped for memory (tests) or another backend.
"""

from .storage import COLLECTION_KEYS, DateStorage, StorageError, empty_document
from .json_storage import JsonDateStorage
from .memory_storage import InMemoryDateStorage

__all__ = [
    "COLLECTION_KEYS",
    "DateStorage",
    "StorageError",
    "empty_document",
    "JsonDateStorage",
    "InMemoryDateStorage",
]
