"""File-backed logging for the viewer.

Records go to a rotating file under the platform log directory. Nothing is
ever written to the terminal, which belongs to the frame renderer.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME, DEFAULT_LOG_LEVEL

LOG_FILENAME = "twinview.log"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)-18s - %(message)s"


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_path: Path | None = None) -> logging.Handler:
    """Attach one handler to the ``twinview`` logger and return it.

    Falls back to a ``NullHandler`` when the log file cannot be opened, since
    a missing log must never stop the viewer.
    """
    path = LOG_PATH if log_path is None else log_path
    package_logger = logging.getLogger(APP_NAME)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()

    handler: logging.Handler
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError:
        handler = logging.NullHandler()

    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level, logging.WARNING))
    # Keep records away from any root handler that might print to the screen.
    package_logger.propagate = False
    return handler
