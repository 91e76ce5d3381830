"""
Logging configuration for the application.

Every module logs through get_logger(), under the "profile_builder" namespace. The
namespace level is set explicitly so LOG_LEVEL still applies when uvicorn has already
configured the root logger (basicConfig is then a no-op).
"""
import logging
import sys

from profile_builder.app.core.config import settings

LOGGER_NAMESPACE = "profile_builder"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(level: str | None = None) -> int:
    """LOG_LEVEL name to a logging level; unknown names fall back to INFO."""
    level_val = (level or settings.log_level or "INFO").upper()
    resolved = logging.getLevelName(level_val)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging and the package log level. Returns the package logger."""
    level_val = resolve_level(level)
    logging.basicConfig(
        level=level_val,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(level_val)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, e.g. get_logger("api.resume") -> profile_builder.api.resume."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
