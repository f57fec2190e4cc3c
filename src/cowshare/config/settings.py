"""Configuration settings using Pydantic Settings.

Usage:
    from cowshare.config import CowSettings, get_settings

    # Load from environment variables (COWSHARE_*)
    settings = get_settings()

    # Or override with explicit values
    settings = CowSettings(log_level="DEBUG")
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CowSettings(BaseSettings):  # type: ignore[misc]
    """Process-wide configuration for cowshare.

    Nothing here changes how handles copy values: SharedValue always
    duplicates deeply unless a handle is given its own duplicator.

    Attributes:
        log_level: Level applied by configure_logging().

    Environment Variables:
        COWSHARE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="COWSHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


# Module-level settings instance, created on first use
_settings: CowSettings | None = None


def get_settings() -> CowSettings:
    """Access the process-wide settings, loading them on first call.

    Returns:
        The shared CowSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = CowSettings()
    return _settings


def reset_settings(settings: CowSettings | None = None) -> None:
    """Replace the process-wide settings.

    Args:
        settings: New settings, or None to reload from the environment on
            next access.
    """
    global _settings
    _settings = settings
