"""Logging setup shared by every desktop_recentf module.

Modules only create named loggers under ``desktop_recentf``; handlers are
attached here, once.
"""
import logging
import logging.handlers
from typing import Optional

from src.app.config import get_settings

ROOT_LOGGER = "desktop_recentf"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the desktop_recentf logger tree.

    Console output at the configured level, plus a rotating file
    (5MB x 3) at settings.log_path. Safe to call more than once.
    """
    settings = get_settings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel((level or settings.log_level).upper())
    if logger.handlers:
        return logger

    fmt = logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    try:
        settings.log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_path,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError as e:
        logger.warning("File logging disabled (%s): %s", settings.log_path, e)
    else:
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    return logger
