"""Exception hierarchy for fontresolver."""

from pathlib import Path


class FontResolverError(Exception):
    """Base exception for all fontresolver errors."""

    pass


class UnsupportedPlatformError(FontResolverError):
    """The host platform has no known font directory."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Font resolution is not implemented for platform '{platform}'")


class NoFontFilesError(FontResolverError):
    """No font files were discovered, so no bytes can be served."""

    def __init__(self, root: Path | None, reason: str | None = None) -> None:
        self.root = root
        self.reason = reason
        message = "No font files found"
        if root is not None:
            message += f" under '{root}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
