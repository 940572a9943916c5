"""Logging setup for the application. Modules only ever call logging.getLogger(__name__)."""

import logging

from src.core.config import Settings

ROOT_LOGGER_NAME = "src"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a stream handler to the package logger (once) and apply the configured level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger
