"""
Logging configuration for easyresults_web.

Installs a single stdout handler with a pipe-separated format. The
package logger can run at its own level, so dispatch decisions (logged
at DEBUG by the dispatcher) can be traced without turning on DEBUG for
FastAPI and uvicorn. Outcome messages and payloads are never logged.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "easyresults_web"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: str = "INFO", package_level: Optional[str] = None) -> None:
    """Configure logging for the application.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR).
        package_level: Level for the easyresults_web loggers. Follows
            ``level`` when not given.
    """
    logging.basicConfig(
        level=_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_level is None:
        package_logger.setLevel(logging.NOTSET)
    else:
        package_logger.setLevel(_level(package_level))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
