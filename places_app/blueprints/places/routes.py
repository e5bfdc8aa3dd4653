"""
places_app/blueprints/places/routes.py

Place routes.

Provides:
- GET  /                     list
- POST /places               create (multipart: title, image)
- GET  /places/<id>/edit     edit form
- POST /places/<id>/edit     update (multipart: title, optional image)
- POST /places/<id>/delete   delete

Error policy:
- NotFoundError -> 404 page.
- Anything else -> logged with context, generic 500 page. No detail reaches the client.
- Werkzeug HTTP exceptions (413 upload too large, 400 CSRF) pass through untouched.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

from flask import Blueprint, current_app, flash, redirect, render_template, url_for
from werkzeug.exceptions import HTTPException

from ...errors import InvalidPlaceError, NotFoundError
from ...forms import DeleteForm, PlaceEditForm, PlaceForm
from ...services import PlaceService
from ...utils import read_upload

logger = logging.getLogger(__name__)

places_bp = Blueprint("places", __name__)


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _service() -> PlaceService:
    return current_app.extensions["place_service"]


def _form_errors(form) -> str:
    return "; ".join(f"{name}: {', '.join(errors)}" for name, errors in form.errors.items())


def handle_place_errors(operation: str) -> Callable:
    """Wrap a view so every failure ends as a 404 or a generic 500 page."""

    def decorator(view: Callable) -> Callable:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except NotFoundError as exc:
                logger.info("%s: place %s not found", operation, exc.place_id)
                return render_template("errors/404.html"), 404
            except Exception:
                logger.exception("%s failed (place_id=%s)", operation, kwargs.get("place_id", "-"))
                return render_template("errors/500.html"), 500

        return wrapper

    return decorator


# ---------------------------------------------------------------------
# LIST
# ---------------------------------------------------------------------
@places_bp.route("/")
@handle_place_errors("list places")
def index():
    """Show every place in stored order, plus the create form."""
    places = _service().list()
    return render_template(
        "places/list.html",
        places=places,
        form=PlaceForm(),
        delete_form=DeleteForm(),
    )


# ---------------------------------------------------------------------
# CREATE
# ---------------------------------------------------------------------
@places_bp.route("/places", methods=["POST"])
@handle_place_errors("create place")
def create():
    form = PlaceForm()
    if not form.validate_on_submit():
        raise InvalidPlaceError(_form_errors(form))

    data, mime_type = read_upload(form.image.data)
    if data is None:
        raise InvalidPlaceError("image: empty upload")

    place = _service().create(form.title.data, data, mime_type)
    flash(f"Added “{place.title}”.", "success")
    return redirect(url_for("places.index"))


# ---------------------------------------------------------------------
# EDIT
# ---------------------------------------------------------------------
@places_bp.route("/places/<place_id>/edit", methods=["GET"])
@handle_place_errors("load edit form")
def edit_form(place_id: str):
    place = _service().get(place_id)
    form = PlaceEditForm(data={"title": place.title})
    return render_template("places/edit.html", place=place, form=form)


@places_bp.route("/places/<place_id>/edit", methods=["POST"])
@handle_place_errors("update place")
def update(place_id: str):
    # Unknown ids are a 404 whatever the submitted form looks like
    _service().get(place_id)

    form = PlaceEditForm()
    if not form.validate_on_submit():
        raise InvalidPlaceError(_form_errors(form))

    data, mime_type = read_upload(form.image.data)
    place = _service().edit(place_id, form.title.data, data, mime_type)
    flash(f"Updated “{place.title}”.", "success")
    return redirect(url_for("places.index"))


# ---------------------------------------------------------------------
# DELETE
# ---------------------------------------------------------------------
@places_bp.route("/places/<place_id>/delete", methods=["POST"])
@handle_place_errors("delete place")
def delete(place_id: str):
    _service().get(place_id)

    form = DeleteForm()
    if not form.validate_on_submit():
        raise InvalidPlaceError(_form_errors(form))

    place = _service().delete(place_id)
    flash(f"Deleted “{place.title}”.", "success")
    return redirect(url_for("places.index"))
