"""Logging configuration for GenoShare.

Every module logs through a child of the ``genoshare`` logger.
The level can be set via:
1. Environment variable: GENOSHARE_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
2. Programmatically: set_log_level("DEBUG")
3. CLI flag: --log-level DEBUG

Default level is INFO.
"""

import logging
import os
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]

ENV_VAR = "GENOSHARE_LOG_LEVEL"
ROOT_NAME = "genoshare"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LOG_LEVEL = "INFO"

_logger: logging.Logger | None = None
_current_level: str = DEFAULT_LOG_LEVEL


def _get_level_from_env() -> str:
    env_level = os.environ.get(ENV_VAR, "").upper()
    if env_level in _LEVEL_MAP:
        return env_level
    return DEFAULT_LOG_LEVEL


def _create_logger(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Create the root ``genoshare`` logger with a single stderr handler."""
    logger = logging.getLogger(ROOT_NAME)
    logger.handlers.clear()
    logger.setLevel(_LEVEL_MAP.get(level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_LEVEL_MAP.get(level.upper(), logging.INFO))
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(handler)

    # Keep our output out of whatever the host application configured
    logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the given module.

    Args:
        name: Module name (e.g., "genoshare.store.memory").
              If None, returns the root genoshare logger.

    Returns:
        Logger instance attached to the genoshare hierarchy.

    Example:
        from genoshare.config.debug import get_logger
        logger = get_logger(__name__)
        logger.info("Imported %d SNPs", count)
    """
    global _logger, _current_level

    if _logger is None:
        _current_level = _get_level_from_env()
        _logger = _create_logger(_current_level)

    if name is None or name == ROOT_NAME:
        return _logger

    if name.startswith(f"{ROOT_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")


def set_log_level(level: LogLevel) -> None:
    """Set the log level for all GenoShare loggers.

    Raises:
        ValueError: If the level is not one of DEBUG, INFO, WARN, ERROR.
    """
    global _logger, _current_level

    level_upper = level.upper()
    if level_upper not in _LEVEL_MAP:
        raise ValueError(f"Invalid log level: {level}. Must be one of: DEBUG, INFO, WARN, ERROR")

    _current_level = level_upper

    if _logger is not None:
        _logger.setLevel(_LEVEL_MAP[level_upper])
        for handler in _logger.handlers:
            handler.setLevel(_LEVEL_MAP[level_upper])
    else:
        _logger = _create_logger(level_upper)

    os.environ[ENV_VAR] = level_upper


def get_log_level() -> str:
    return _current_level


def is_debug() -> bool:
    return get_log_level() == "DEBUG"


def reset_logger() -> None:
    """Drop the configured logger (used by tests)."""
    global _logger, _current_level
    if _logger is not None:
        _logger.handlers.clear()
    _logger = None
    _current_level = DEFAULT_LOG_LEVEL


def debug(msg: str, *args, **kwargs) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs) -> None:
    get_logger().info(msg, *args, **kwargs)


def warn(msg: str, *args, **kwargs) -> None:
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs) -> None:
    get_logger().error(msg, *args, **kwargs)
