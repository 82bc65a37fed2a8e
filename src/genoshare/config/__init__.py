"""Configuration module for GenoShare.

Constants are available via: from genoshare.config.constants import ...
Debug/logging: from genoshare.config.debug import get_logger, set_log_level
"""

from genoshare.config.debug import (
    get_logger,
    set_log_level,
    get_log_level,
    is_debug,
    debug,
    info,
    warn,
    error,
)

__all__ = [
    "get_logger",
    "set_log_level",
    "get_log_level",
    "is_debug",
    "debug",
    "info",
    "warn",
    "error",
]
