"""
Utility functions shared across the app. This includes:
- read_upload: Pull bytes and MIME type out of an uploaded file, fully in memory.
- format_timestamp: Jinja filter that renders stored ISO timestamps for humans.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple

from werkzeug.datastructures import FileStorage


def read_upload(file: Optional[FileStorage]) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Return (data, mime_type) for an uploaded file, or (None, None) when nothing was sent.

    An empty file input still produces a FileStorage with no filename; treat it as absent.
    """
    if file is None or not getattr(file, "filename", None):
        return None, None

    data = file.read()
    if not data:
        return None, None
    return data, file.mimetype or "application/octet-stream"


def format_timestamp(value: Optional[str]) -> str:
    """Render '2025-01-31T10:15:00.000Z' as '2025-01-31 10:15'."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime("%Y-%m-%d %H:%M")
