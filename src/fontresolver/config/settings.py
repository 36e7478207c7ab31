"""Configuration settings for fontresolver."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_FAMILY = "Calibri"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ScannerConfig(BaseModel):
    """Configuration for font discovery."""

    font_root: Path | None = Field(
        default=None,
        description="Directory to scan instead of the platform font directory",
    )
    extensions: tuple[str, ...] = Field(
        default=(".ttf",),
        min_length=1,
        description="File extensions treated as font files (case-insensitive)",
    )
    follow_symlinks: bool = Field(
        default=False,
        description="Descend into symlinked directories while scanning",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = []
        for ext in value:
            if not ext.startswith("."):
                raise ValueError(f"extension must start with '.': {ext!r}")
            normalized.append(ext.lower())
        return tuple(normalized)


class ResolverConfig(BaseModel):
    """Configuration for font matching."""

    default_family: str = Field(
        default=DEFAULT_FAMILY,
        min_length=1,
        description="Family callers should request when none is known",
    )
    strip_chars: str = Field(
        default="-_",
        description="Characters trimmed from the end of a file stem before matching",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontResolverSettings(BaseModel):
    """Main settings."""

    scanner: ScannerConfig = Field(default_factory=ScannerConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontResolverSettings:
    """Get default settings."""
    return FontResolverSettings()
