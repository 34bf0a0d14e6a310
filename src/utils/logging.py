"""Shared application logger."""

import logging
import sys

from ..constants import PROJECT_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(module)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_logger() -> logging.Logger:
    """Create the project logger with a single stdout handler."""
    app_logger = logging.getLogger(PROJECT_NAME)

    # Streamlit reruns import modules again, avoid stacking handlers
    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        app_logger.addHandler(handler)

    app_logger.setLevel(logging.INFO)
    app_logger.propagate = False
    return app_logger


logger = _build_logger()


def set_log_level(level: str):
    """Change the log level of the shared logger (e.g. "DEBUG")."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
