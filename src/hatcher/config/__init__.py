"""Configuration management for hatcher.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- HatchConfig: Angle and spacing of the hatch lines
- RectangleConfig: Region to hatch
- SvgConfig: Drawing scale, canvas and stroke styles
- LoggingConfig: Logging settings
- HatcherSettings: Main application settings
"""

from hatcher.config.settings import (
    HatchConfig,
    HatcherSettings,
    LoggingConfig,
    RectangleConfig,
    SvgConfig,
    get_default_settings,
)

__all__ = [
    "HatchConfig",
    "HatcherSettings",
    "LoggingConfig",
    "RectangleConfig",
    "SvgConfig",
    "get_default_settings",
]
