"""
JSON-file persistence adapter.

The whole document is read on every load and rewritten on every save.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from .storage import StorageError, empty_document, normalize_document, ordered_document

logger = logging.getLogger(__name__)


class JsonDateStorage:
    """Reads/writes the date document from a single JSON file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> dict:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            raise StorageError(f"Could not read {self.path}") from exc
        try:
            return normalize_document(raw)
        except StorageError as exc:
            logger.warning("Malformed document in %s: %s", self.path, exc)
            raise

    def save(self, document: dict) -> None:
        payload = json.dumps(ordered_document(document), ensure_ascii=False, indent=2)
        directory = self.path.parent
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write {self.path}") from exc

    def initialize(self, *, force: bool = False) -> bool:
        """Create an empty document. Returns False when the file already exists."""
        if self.path.exists() and not force:
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not create {self.path.parent}") from exc
        self.save(empty_document())
        return True
