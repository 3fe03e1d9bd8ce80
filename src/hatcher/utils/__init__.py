"""Utility functions for hatcher.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics
"""

from hatcher.utils.logging import (
    HatchStats,
    RunLogger,
    configure_logging,
)

__all__ = [
    "HatchStats",
    "RunLogger",
    "configure_logging",
]
