"""
Logging configuration utility for tdrequest.

The level comes from TDREQUEST_LOG_LEVEL (read from the environment or .env)
unless given explicitly.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from dotenv import load_dotenv
from tdrequest._utils.get_path import get_path

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(threadName)s : %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

# Third-party loggers kept at WARNING unless tdrequest itself runs at DEBUG
QUIET_LOGGERS = ("werkzeug", "urllib3")


def resolve_log_level(level=None):
    """
    Turn a level name or number into a logging level.
    """
    if level is None:
        level = os.getenv("TDREQUEST_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    if isinstance(level, int) and not isinstance(level, bool):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def setup_logging(level=None):
    """Configure the root logger with rotating file and console handlers."""
    level = resolve_log_level(level)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        get_path("log"), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    console_handler = logging.StreamHandler()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    root_logger.handlers = []

    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    quiet_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    return root_logger
