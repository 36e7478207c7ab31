"""Font discovery for fontresolver.

Discovery runs once: a host font-root provider picks the directory for the
current platform and the scanner walks it, producing an immutable
FontFileIndex.

Key classes:
- FontRootProvider: Base class for platform font directories
- FontDirectoryScanner: Walks the font root and builds the index
"""

from fontresolver.discovery.platforms import (
    FixedFontRoot,
    FontRootProvider,
    LinuxFontRoot,
    MacOSFontRoot,
    UnsupportedPlatformFontRoot,
    WindowsFontRoot,
    select_font_root_provider,
)
from fontresolver.discovery.scanner import FontDirectoryScanner

__all__ = [
    "FixedFontRoot",
    "FontDirectoryScanner",
    "FontRootProvider",
    "LinuxFontRoot",
    "MacOSFontRoot",
    "UnsupportedPlatformFontRoot",
    "WindowsFontRoot",
    "select_font_root_provider",
]
