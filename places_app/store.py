"""
places_app/store.py

Record Store: one JSON document holding every place.

    {"places": [{"id": ..., "title": ..., "imageUrl": ..., ...}, ...]}

Usage pattern (every request):
    collection = store.load()     # fresh snapshot from disk
    ... mutate collection ...
    store.persist(collection)     # overwrite the whole file

IMPORTANT:
- No locking. Two writers that load the same snapshot race and the last persist wins.
- persist() overwrites the file in place; a crash mid-write can truncate it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Union

from .errors import PersistError, StoreError
from .models import PlaceCollection

logger = logging.getLogger(__name__)


class PlaceStore:
    """Flat-file store backed by a single JSON document."""

    def __init__(self, path: Union[str, os.PathLike]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> PlaceCollection:
        """Read the whole document. A missing or empty file is an empty collection."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            return PlaceCollection()

        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Could not read {self.path}: {exc}") from exc

        if not isinstance(document, dict):
            raise StoreError(f"{self.path} does not hold a JSON object")

        try:
            return PlaceCollection.from_document(document)
        except (KeyError, TypeError) as exc:
            raise StoreError(f"Malformed place record in {self.path}: {exc}") from exc

    def persist(self, collection: PlaceCollection) -> None:
        """Serialize the full collection and overwrite the backing file."""
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(collection.to_document(), f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistError(f"Could not write {self.path}: {exc}") from exc

        logger.debug("Persisted %d place(s) to %s", len(collection), self.path)

    def init(self) -> bool:
        """Create an empty store file. Returns False if one already exists."""
        if self.exists():
            return False
        self.persist(PlaceCollection())
        return True
