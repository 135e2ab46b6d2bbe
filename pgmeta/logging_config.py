"""
Centralized logging configuration for pgmeta.

Library code obtains loggers through ``get_logger(__name__)`` so every record
lands in the ``pgmeta`` hierarchy. The level, format and optional log file are
taken from the environment. Nothing is configured on import; applications
opt in with ``setup_logging()`` or their own configuration.
"""

import asyncio
import functools
import logging
import logging.config
import os
import sys
import time
from typing import Dict, Any, Optional


class ContextFilter(logging.Filter):
    """Attach static context (e.g. target version, database) to log records."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


def get_log_level() -> str:
    return os.getenv("PGMETA_LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    env = os.getenv("PGMETA_ENV", "development").lower()

    if env == "production":
        return "%(asctime)s | %(name)s | %(levelname)s | %(message)s | %(pathname)s:%(lineno)d"
    return "%(asctime)s | %(name)-28s | %(levelname)-8s | %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """Build the ``dictConfig`` mapping from the current environment."""
    log_level = get_log_level()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": get_log_format(),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "pgmeta": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            "asyncpg": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }

    log_file = os.getenv("PGMETA_LOG_FILE")
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 5,
        }
        config["loggers"]["pgmeta"]["handlers"].append("file")

    return config


def setup_logging() -> None:
    """Install pgmeta's console (and optional file) handlers. Never called on import."""
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger("pgmeta.logging")
    logger.debug("Logging configured with level: %s", get_log_level())
    if os.getenv("PGMETA_LOG_FILE"):
        logger.debug("File logging enabled: %s", os.getenv("PGMETA_LOG_FILE"))


def get_logger(name: str, context: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Get a logger inside the ``pgmeta`` hierarchy.

    Args:
        name: Logger name (typically ``__name__`` of the module)
        context: Optional context dictionary added to every record

    Returns:
        Configured logger instance
    """
    if not name.startswith("pgmeta"):
        if name == "__main__":
            name = "pgmeta.main"
        else:
            name = f"pgmeta.{name}"

    logger = logging.getLogger(name)

    if context:
        logger.addFilter(ContextFilter(context))

    return logger


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator timing ``operation`` at DEBUG and logging failures at ERROR.

    Works for both coroutine functions and plain functions; exceptions are
    re-raised unchanged.
    """

    def decorator(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error("Operation '%s' failed after %.3fs: %s", operation, duration, e)
                raise
            logger.debug("Operation '%s' completed in %.3fs", operation, time.perf_counter() - start_time)
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error("Operation '%s' failed after %.3fs: %s", operation, duration, e)
                raise
            logger.debug("Operation '%s' completed in %.3fs", operation, time.perf_counter() - start_time)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


# Silent until the application configures logging or calls setup_logging().
logging.getLogger("pgmeta").addHandler(logging.NullHandler())
