"""Utility functions for iconfont.

This module provides utility functions including:

- Logging setup and configuration
- Build statistics tracking
"""

from iconfont.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
