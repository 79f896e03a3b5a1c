"""Configuration management for iconfont.

This module provides configuration management using Pydantic models.
Every model is frozen, so a settings object can be shared between the
pipeline stages (and shipped to worker processes) without copies.

Key classes:
- GeometryConfig: Curve tolerance and winding settings
- MetricsConfig: Static font metrics
- NamingConfig: Name table entries
- ProcessingConfig: Pipeline settings
- LoggingConfig: Logging settings
- IconFontSettings: Main application settings
"""

from iconfont.config.settings import (
    PRIVATE_USE_AREA_START,
    GeometryConfig,
    IconFontSettings,
    LoggingConfig,
    MetricsConfig,
    NamingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "PRIVATE_USE_AREA_START",
    "GeometryConfig",
    "IconFontSettings",
    "LoggingConfig",
    "MetricsConfig",
    "NamingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
