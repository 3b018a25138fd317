"""
Disaster Reporter - Logging Configuration
Logging setup for the command line and host applications.
"""

import logging
import sys
from typing import Iterable, Optional

from src.core.config import settings

# Every module logs through logging.getLogger(__name__) below this package
PACKAGE_LOGGER = "src"

NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> logging.Logger:
    """
    Configure stdout logging and return the package logger.

    Args:
        level: Log level name, defaults to settings.log_level
        format_string: Custom format string for log messages
        quiet: Third-party loggers held at WARNING

    Returns:
        Logger that parents every module logger of the package
    """
    log_level = getattr(logging, (level or settings.log_level).upper())

    logging.basicConfig(
        level=log_level,
        format=format_string or "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    return package_logger
