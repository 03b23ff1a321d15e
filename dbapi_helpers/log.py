"""
Default logger for helpers that are not handed one explicitly.
"""

import logging
import sys
from typing import Optional

from dbapi_helpers.config import HelperSettings, get_settings

LOGGER_NAME = "dbapi_helpers"


def default_logger(settings: Optional[HelperSettings] = None) -> logging.Logger:
    """
    Return the package logger, writing to stdout.

    A stdout handler is attached the first time only. The logger still
    propagates, so host applications keep control over where records end up.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())

    return logger
