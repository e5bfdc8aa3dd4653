"""
Logging setup for the places app.

setup_logging() is called from create_app with LOG_LEVEL and LOG_FILE from config.
It only touches the root logger when nothing has configured it yet, so repeated
create_app calls (tests, reloader) don't stack handlers.
"""

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> bool:
    """Attach console (and optional file) handlers to the root logger.

    Returns False when the root logger already had handlers and was left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return True
