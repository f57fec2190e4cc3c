"""Configuration module using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from cowshare.config import CowSettings, reset_settings

    reset_settings(CowSettings(log_level="DEBUG"))
"""

from cowshare.config.log import configure_logging
from cowshare.config.settings import CowSettings, get_settings, reset_settings

__all__ = [
    "CowSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
]
