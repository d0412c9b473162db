"""Logging configuration for relay server events."""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LOG_BACKUP_COUNT, LOG_FILE, LOG_LEVEL, LOG_MAX_BYTES

LOGGER_NAME = "relay_chat_server"


def configure_logging(log_file: Optional[Path] = None) -> logging.Logger:
    """Return the relay logger, attaching its rotating file handler on first use.

    Records are single-line ``EVENT key=value`` entries, e.g.
    ``USER_JOINED id=Zt3q... name=Alice``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(LOG_LEVEL)
    if not logger.handlers:
        handler = RotatingFileHandler(
            log_file or LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
    return logger
