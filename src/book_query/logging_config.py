"""
Logging setup for applications that use Book Query.

The library itself only creates module loggers; call ``setup_logging``
from an application entry point to get console output.
"""

import logging

from book_query.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger with a console handler.

    Does nothing if the root logger already has handlers.

    Args:
        level: Level name, case insensitive. Defaults to ``Settings.log_level``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or get_settings().log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
