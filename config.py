"""
Application configuration.
This module defines the configuration settings for the Flask application: the hosted media
service credentials, the JSON store location, and the upload ceiling. Every value can be
overridden with an environment variable of the same name. In production, make sure to set
the media credentials and a real secret key.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration shared by all environments."""

    # IMPORTANT: change this in production
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me-please")

    # CSRF protection for forms
    WTF_CSRF_ENABLED = _env_bool("WTF_CSRF_ENABLED", True)

    # Hosted media service credentials. Missing values only fail at upload time.
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET", "")

    # Remote folder every upload lands in
    MEDIA_FOLDER = os.environ.get("MEDIA_FOLDER", "places")
    MEDIA_TIMEOUT = float(os.environ.get("MEDIA_TIMEOUT", "30"))

    # Flat JSON store, relative to the process working directory
    PLACES_DB_PATH = os.environ.get("PLACES_DB_PATH", "db.json")

    # Uploads are held in memory; anything larger is rejected with 413
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))

    PORT = int(os.environ.get("PORT", "3000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    # Optional file that receives the same log lines as the console
    LOG_FILE = os.environ.get("LOG_FILE") or None

    # App UI name (used in templates)
    APP_NAME = "Places"


class TestingConfig(Config):
    """Configuration used by the test suite."""

    TESTING = True
    WTF_CSRF_ENABLED = False
    SECRET_KEY = "testing"
    PLACES_DB_PATH = "test-db.json"
    CLOUDINARY_CLOUD_NAME = "demo"
    CLOUDINARY_API_KEY = "123456"
    CLOUDINARY_API_SECRET = "shh"
