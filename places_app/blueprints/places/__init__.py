"""
Places blueprint package.

This file just exposes the Blueprint object to be imported in places_app.__init__.
The actual routes and logic are in routes.py.
"""

from .routes import places_bp  # noqa: F401
