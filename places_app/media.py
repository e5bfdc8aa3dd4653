"""
places_app/media.py

Media Store Client for the hosted image service, built on the Cloudinary SDK.

Provides:
- upload(data, mime_type) -> UploadResult(url, public_id)
- delete(public_id) -> bool

The in-memory buffer is sent as a base64 data URI into a fixed folder with
resource_type="auto"; the SDK handles signing and transport.

IMPORTANT:
- Credentials are read from app config at construction time but only checked at call time,
  so the app boots without them and uploads fail with RemoteServiceError.
- delete() of an unknown id returns False. Callers treat deletion as best-effort.
- Every SDK or transport failure surfaces as RemoteServiceError (UploadError for uploads).
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader

from .errors import RemoteServiceError, UploadError

logger = logging.getLogger(__name__)

# SDK failures plus raw socket/urllib3 errors the SDK lets through
REMOTE_ERRORS = (cloudinary.exceptions.Error, OSError)


@dataclass(frozen=True)
class UploadResult:
    url: str
    public_id: str


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encode an in-memory buffer as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class MediaClient:
    """Upload / destroy wrapper around cloudinary.uploader."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "places",
        timeout: float = 30,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "MediaClient":
        client = cls(
            cloud_name=config.get("CLOUDINARY_CLOUD_NAME", ""),
            api_key=config.get("CLOUDINARY_API_KEY", ""),
            api_secret=config.get("CLOUDINARY_API_SECRET", ""),
            folder=config.get("MEDIA_FOLDER", "places"),
            timeout=config.get("MEDIA_TIMEOUT", 30),
        )
        cloudinary.config(
            cloud_name=client.cloud_name,
            api_key=client.api_key,
            api_secret=client.api_secret,
            secure=True,
        )
        return client

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_credentials(self) -> None:
        missing = [
            name
            for name, value in (
                ("CLOUDINARY_CLOUD_NAME", self.cloud_name),
                ("CLOUDINARY_API_KEY", self.api_key),
                ("CLOUDINARY_API_SECRET", self.api_secret),
            )
            if not value
        ]
        if missing:
            raise RemoteServiceError(f"Media service credentials missing: {', '.join(missing)}")

    def _options(self) -> Dict[str, Any]:
        # Per-call credentials so several clients can coexist in one process (tests)
        return {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "timeout": self.timeout,
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def upload(self, data: bytes, mime_type: str) -> UploadResult:
        """Upload a buffer into the configured folder. Raises UploadError on any failure."""
        try:
            self._check_credentials()
            payload = cloudinary.uploader.upload(
                to_data_uri(data, mime_type),
                folder=self.folder,
                resource_type="auto",
                **self._options(),
            )
        except RemoteServiceError as exc:
            raise UploadError(str(exc)) from exc
        except REMOTE_ERRORS as exc:
            raise UploadError(f"Media service upload failed: {exc}") from exc

        url = payload.get("secure_url") if isinstance(payload, dict) else None
        public_id = payload.get("public_id") if isinstance(payload, dict) else None
        if not url or not public_id:
            raise UploadError("Media service response lacks secure_url/public_id")

        logger.info("Uploaded image %s (%d bytes)", public_id, len(data))
        return UploadResult(url=url, public_id=public_id)

    def delete(self, public_id: str) -> bool:
        """Destroy a remote image. True if it was removed, False for any other answer."""
        self._check_credentials()
        try:
            payload = cloudinary.uploader.destroy(public_id, **self._options())
        except REMOTE_ERRORS as exc:
            raise RemoteServiceError(f"Media service destroy failed: {exc}") from exc

        result = payload.get("result") if isinstance(payload, dict) else None
        if result != "ok":
            logger.info("Media service did not delete %s (answer=%r)", public_id, payload)
            return False

        logger.info("Deleted image %s", public_id)
        return True
