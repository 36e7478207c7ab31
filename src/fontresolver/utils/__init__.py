"""Utility functions for fontresolver.

This module provides:

- Logging setup and configuration
- Logger construction for library modules
- Resolution statistics tracking
"""

from fontresolver.utils.logging import (
    ResolutionLogger,
    ResolutionStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "ResolutionLogger",
    "ResolutionStats",
    "configure_logging",
    "get_logger",
]
