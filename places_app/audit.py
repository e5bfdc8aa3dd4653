"""
places_app/audit.py

Audit logging helpers.

Goals:
- Record WHAT happened to WHICH place, with BEFORE/AFTER snapshots.
- Record the client IP address for traceability when running inside a request.

Entries go to the "places_app.audit" logger, one line per mutation:

    action=UPDATE entity=Place id=... ip=... before={...} after={...}

IMPORTANT:
- Call log_action only after the store write succeeded; a failed persist is not audited.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from flask import has_request_context, request

audit_logger = logging.getLogger("places_app.audit")

AUDIT_ACTIONS = {"CREATE", "UPDATE", "DELETE"}


def snapshot(entity: Any) -> Dict[str, Any]:
    """
    Convert an entity to a JSON-safe dict.

    Uses entity.to_dict() when available and falls back to str() for exotic values.
    """
    to_dict = getattr(entity, "to_dict", None)
    data = to_dict() if callable(to_dict) else dict(vars(entity))
    return {key: value if isinstance(value, (str, int, float, bool, type(None))) else str(value)
            for key, value in data.items()}


def log_action(
    entity: Any,
    action: str,
    *,
    before: Optional[Dict[str, Any]] = None,
    after: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Emit one audit line for a mutation.

    Parameters:
        entity: object with an .id attribute
        action: CREATE / UPDATE / DELETE
        before: snapshot prior to the change (optional)
        after: snapshot after the change (optional)
    """
    if action not in AUDIT_ACTIONS:
        raise ValueError(f"Unknown audit action {action!r}")

    entity_id = getattr(entity, "id", None)
    if entity_id is None:
        raise ValueError("log_action entity must have an 'id' attribute.")

    ip_address = request.remote_addr if has_request_context() else None

    audit_logger.info(
        "action=%s entity=%s id=%s ip=%s before=%s after=%s",
        action,
        entity.__class__.__name__,
        entity_id,
        ip_address or "-",
        json.dumps(before, ensure_ascii=False) if before else "-",
        json.dumps(after, ensure_ascii=False) if after else "-",
    )
