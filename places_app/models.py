"""
places_app/models.py

Domain model for the places catalogue.

A Place is a titled record with an image hosted by the remote media service.
PlaceCollection is the in-memory snapshot of the whole store: the service mutates
a snapshot it got from PlaceStore.load() and hands it back to PlaceStore.persist().

IMPORTANT:
- Insertion order is display order. Never sort the collection.
- JSON keys are camelCase to stay compatible with existing db.json files.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_place_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------
# Place
# ---------------------------------------------------------------------
@dataclass
class Place:
    id: str
    title: str
    image_url: Optional[str] = None
    image_public_id: Optional[str] = None
    # None only for legacy records stored without a createdAt
    created_at: Optional[str] = field(default_factory=utcnow_iso)
    updated_at: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_public_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the on-disk representation (updatedAt omitted until first edit)."""
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "imageUrl": self.image_url,
            "imagePublicId": self.image_public_id,
            "createdAt": self.created_at,
        }
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Place":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            image_url=data.get("imageUrl"),
            image_public_id=data.get("imagePublicId"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def __repr__(self):
        return f"<Place {self.id} {self.title!r}>"


# ---------------------------------------------------------------------
# Collection snapshot
# ---------------------------------------------------------------------
class PlaceCollection:
    """Ordered, id-indexed list of places loaded from the store."""

    def __init__(self, places: Optional[List[Place]] = None):
        self._places: List[Place] = list(places or [])

    def __iter__(self) -> Iterator[Place]:
        return iter(self._places)

    def __len__(self) -> int:
        return len(self._places)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlaceCollection):
            return NotImplemented
        return self._places == other._places

    def ids(self) -> List[str]:
        return [p.id for p in self._places]

    def find(self, place_id: str) -> Optional[Place]:
        for place in self._places:
            if place.id == place_id:
                return place
        return None

    def append(self, place: Place) -> None:
        if self.find(place.id) is not None:
            raise ValueError(f"Duplicate place id {place.id!r}")
        self._places.append(place)

    def remove(self, place_id: str) -> Optional[Place]:
        """Remove and return the place with this id, or None if absent."""
        for index, place in enumerate(self._places):
            if place.id == place_id:
                return self._places.pop(index)
        return None

    def to_list(self) -> List[Place]:
        return list(self._places)

    def to_document(self) -> Dict[str, Any]:
        return {"places": [p.to_dict() for p in self._places]}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PlaceCollection":
        return cls([Place.from_dict(item) for item in document.get("places") or []])
