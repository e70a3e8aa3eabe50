"""
Logging configuration for the application.

One consistent line format for every module logger.
Logging must not change program behavior.
Never logs request bodies or fault diagnostics in client responses;
diagnostics go to the server log only.
"""

import logging
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "slowapi")


def configure_logging(
    level: str = "INFO", noisy_loggers: Iterable[str] = NOISY_LOGGERS
) -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        noisy_loggers: Third-party loggers capped at WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
