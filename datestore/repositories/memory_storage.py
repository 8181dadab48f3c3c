"""In-process storage with the same contract as the JSON adapter."""
from __future__ import annotations

import copy

from .storage import empty_document, normalize_document


class InMemoryDateStorage:
    def __init__(self, document: dict | None = None) -> None:
        self._document = normalize_document(copy.deepcopy(document)) if document is not None else empty_document()

    def load(self) -> dict:
        return copy.deepcopy(self._document)

    def save(self, document: dict) -> None:
        self._document = copy.deepcopy(document)
