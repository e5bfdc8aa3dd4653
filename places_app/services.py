"""
places_app/services.py

Place Service: the create / edit / delete workflow.

Every operation follows the same unit of work:
    1) reload the store (fresh snapshot, never long-lived memory)
    2) talk to the media service if an image is involved
    3) mutate the snapshot
    4) persist the snapshot

Remote image policy:
- A replaced or removed image is discarded only AFTER the store write succeeded, and
  discarding is best-effort (see discard_image): failures are logged and ignored.
- If the store write fails after a fresh upload, the fresh upload is discarded
  (best-effort) before PersistError propagates, so no orphaned image is left behind.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .audit import log_action, snapshot
from .errors import InvalidPlaceError, NotFoundError, PersistError, RemoteServiceError
from .media import MediaClient, UploadResult
from .models import Place, PlaceCollection, new_place_id, utcnow_iso
from .store import PlaceStore

logger = logging.getLogger(__name__)


def _clean_title(title: Optional[str]) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise InvalidPlaceError("Title is required.")
    return cleaned


class PlaceService:
    """Coordinates the media client and the record store."""

    def __init__(self, store: PlaceStore, media: MediaClient):
        self.store = store
        self.media = media

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list(self) -> List[Place]:
        """All places in stored (insertion) order."""
        return self.store.load().to_list()

    def get(self, place_id: str) -> Place:
        place = self.store.load().find(place_id)
        if place is None:
            raise NotFoundError(place_id)
        return place

    # ------------------------------------------------------------------
    # Remote image helpers
    # ------------------------------------------------------------------
    def discard_image(self, public_id: Optional[str]) -> bool:
        """
        Best-effort removal of a remote image.

        Returns True only if the service confirmed the deletion. A RemoteServiceError
        or a "not found" answer is logged and swallowed; there is no retry.
        """
        if not public_id:
            return False
        try:
            deleted = self.media.delete(public_id)
        except RemoteServiceError as exc:
            logger.warning("Could not delete remote image %s: %s", public_id, exc)
            return False
        if not deleted:
            logger.warning("Remote image %s was already gone", public_id)
        return deleted

    def _persist_or_compensate(self, collection: PlaceCollection, fresh: Optional[UploadResult]) -> None:
        try:
            self.store.persist(collection)
        except PersistError:
            if fresh is not None:
                logger.error("Store write failed; discarding freshly uploaded image %s", fresh.public_id)
                self.discard_image(fresh.public_id)
            raise

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, title: str, image: bytes, mime_type: str) -> Place:
        """
        Upload the image and append a new place.

        Raises:
            InvalidPlaceError: empty title or no image bytes
            UploadError: the upload failed, nothing was written
            PersistError: the write failed, the upload was discarded
        """
        title = _clean_title(title)
        if not image:
            raise InvalidPlaceError("An image is required.")

        collection = self.store.load()
        uploaded = self.media.upload(image, mime_type)

        place = Place(
            id=new_place_id(),
            title=title,
            image_url=uploaded.url,
            image_public_id=uploaded.public_id,
            created_at=utcnow_iso(),
        )
        collection.append(place)
        self._persist_or_compensate(collection, uploaded)

        log_action(place, "CREATE", after=snapshot(place))
        return place

    def edit(
        self,
        place_id: str,
        title: str,
        image: Optional[bytes] = None,
        mime_type: Optional[str] = None,
    ) -> Place:
        """
        Retitle a place and optionally replace its image.

        Without image bytes imageUrl / imagePublicId are left untouched.
        """
        title = _clean_title(title)

        collection = self.store.load()
        place = collection.find(place_id)
        if place is None:
            raise NotFoundError(place_id)

        before = snapshot(place)
        replaced_public_id: Optional[str] = None
        uploaded: Optional[UploadResult] = None

        if image:
            uploaded = self.media.upload(image, mime_type or "application/octet-stream")
            replaced_public_id = place.image_public_id
            place.image_url = uploaded.url
            place.image_public_id = uploaded.public_id

        place.title = title
        place.updated_at = utcnow_iso()

        self._persist_or_compensate(collection, uploaded)

        if replaced_public_id and replaced_public_id != place.image_public_id:
            self.discard_image(replaced_public_id)

        log_action(place, "UPDATE", before=before, after=snapshot(place))
        return place

    def delete(self, place_id: str) -> Place:
        """Remove a place, then discard its remote image (best-effort)."""
        collection = self.store.load()
        place = collection.remove(place_id)
        if place is None:
            raise NotFoundError(place_id)

        self.store.persist(collection)

        if place.has_image:
            self.discard_image(place.image_public_id)

        log_action(place, "DELETE", before=snapshot(place))
        return place
