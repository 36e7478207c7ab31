"""Configuration management for fontresolver.

This module provides configuration management using Pydantic models.

Key classes:
- ScannerConfig: Font discovery settings
- ResolverConfig: Font matching settings
- LoggingConfig: Logging settings
- FontResolverSettings: Main settings
"""

from fontresolver.config.settings import (
    FontResolverSettings,
    LoggingConfig,
    ResolverConfig,
    ScannerConfig,
    get_default_settings,
)

__all__ = [
    "FontResolverSettings",
    "LoggingConfig",
    "ResolverConfig",
    "ScannerConfig",
    "get_default_settings",
]
