"""
Entry point for Flask.

Usage (from project root):

    python run.py

or:

    flask --app run.py run --port 3000

`python run.py` logs the listening address itself and serves on PORT from config.
Under `flask run` the Flask CLI prints the address ("Running on http://...") and
picks the port from its own --port option, so the app does not log it a second time.

The media service credentials come from CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and
CLOUDINARY_API_SECRET; places are stored in db.json in the working directory.
"""

import logging

from places_app import create_app

logger = logging.getLogger(__name__)

# WSGI application object. `flask run` looks for this `app` variable.
app = create_app()


def main() -> None:
    port = app.config["PORT"]
    logger.info("Server listening on http://localhost:%d", port)
    app.run(port=port)


if __name__ == "__main__":
    main()
