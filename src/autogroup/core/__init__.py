"""Core autogroup utilities.

This module exports core utilities for use throughout the package.
"""

from autogroup.core.config import Settings, get_settings
from autogroup.core.logging import LoggingContext, configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
]
