"""
places_app/errors.py

Error kinds raised by the store, the media client and the place service.

The route layer maps NotFoundError to a 404 page; everything else collapses to a
generic 500 page after being logged.
"""


class PlaceError(Exception):
    """Base class for every error raised by this application."""


class NotFoundError(PlaceError):
    """The requested place id does not resolve to a record."""

    def __init__(self, place_id: str):
        super().__init__(f"Place {place_id!r} not found")
        self.place_id = place_id


class InvalidPlaceError(PlaceError):
    """Submitted place data is incomplete (empty title, missing image)."""


class RemoteServiceError(PlaceError):
    """A call to the hosted media service failed or was rejected."""


class UploadError(RemoteServiceError):
    """An image upload failed; no record was created or changed."""


class StoreError(PlaceError):
    """The JSON store could not be read."""


class PersistError(StoreError):
    """Writing the JSON store failed."""
