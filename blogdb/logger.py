"""
Logging setup for the blogdb package.

Modules call `get_logger(__name__)`. The `blogdb` logger gets its level from
LOG_LEVEL and a stdout handler that only writes while the application has not
configured the root logger; once it has, records reach the root handlers
through normal propagation and are printed there only.
"""

import logging
import os
import sys

PACKAGE_LOGGER = "blogdb"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


class FallbackHandler(logging.StreamHandler):
    """Stream handler that stays silent while the root logger has handlers."""

    def emit(self, record: logging.LogRecord) -> None:
        if logging.getLogger().handlers:
            return
        super().emit(record)


def level_from_env() -> int:
    """LOG_LEVEL as a logging level; unknown names fall back to INFO."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _configure_package_logger() -> None:
    global _configured
    if _configured:
        return
    handler = FallbackHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level_from_env())
    package_logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _configure_package_logger()
    return logging.getLogger(name)
