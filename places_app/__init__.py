"""
places_app/__init__.py

Flask application factory for the Places catalogue.

Wiring:
- config.Config (or a subclass / mapping passed by the caller)
- CSRF protection for every POST form
- PlaceStore (flat JSON file) + MediaClient (hosted images) -> PlaceService,
  stored in app.extensions["place_service"] for the blueprint
- Jinja filters, error pages and CLI commands

The store is read once at boot to report how many places exist; every request
reloads it again before acting.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import click
from flask import Flask, render_template

from .extensions import csrf
from .logging_config import setup_logging
from .media import MediaClient
from .services import PlaceService
from .store import PlaceStore
from .utils import format_timestamp

logger = logging.getLogger(__name__)


def create_app(config_object: Any = "config.Config", media_client: Optional[MediaClient] = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    setup_logging(app.config.get("LOG_LEVEL", "INFO"), app.config.get("LOG_FILE"))

    # Extensions
    csrf.init_app(app)

    # ----------------------------------------------------------------------
    # Place service (store + media client)
    # ----------------------------------------------------------------------
    store = PlaceStore(app.config["PLACES_DB_PATH"])
    media = media_client or MediaClient.from_config(app.config)
    app.extensions["place_service"] = PlaceService(store, media)

    logger.info("Loaded %d place(s) from %s", len(store.load()), store.path)

    # ----------------------------------------------------------------------
    # Blueprints
    # ----------------------------------------------------------------------
    from .blueprints.places import places_bp

    app.register_blueprint(places_bp)

    # ----------------------------------------------------------------------
    # Templates
    # ----------------------------------------------------------------------
    app.jinja_env.filters["timestamp"] = format_timestamp

    @app.context_processor
    def inject_globals():
        return {"app_name": app.config.get("APP_NAME", "Places")}

    @app.errorhandler(404)
    def not_found(_error):
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def server_error(_error):
        return render_template("errors/500.html"), 500

    # ----------------------------------------------------------------------
    # CLI
    # ----------------------------------------------------------------------
    @app.cli.command("places-init")
    def places_init_command():
        """Create an empty places store if none exists."""
        if store.init():
            click.echo(f"Created empty store at {store.path}.")
        else:
            click.echo(f"Store already exists at {store.path}; left untouched.")

    @app.cli.command("places-list")
    def places_list_command():
        """Print every stored place."""
        places = store.load().to_list()
        if not places:
            click.echo("No places stored.")
            return
        for place in places:
            click.echo(f"{place.id}\t{place.title}\t{place.image_url or '-'}")

    return app
