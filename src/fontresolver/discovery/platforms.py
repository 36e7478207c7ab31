"""Host font-root providers.

Each supported platform has one provider naming the directory its system
fonts live in. Unknown platforms get UnsupportedPlatformFontRoot, which
fails as soon as the root is asked for.
"""

import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from fontresolver.exceptions import UnsupportedPlatformError


class FontRootProvider(ABC):
    """Names the directory to scan for font files."""

    platform: ClassVar[str]

    @abstractmethod
    def font_root(self) -> Path:
        """Return the directory to scan.

        Raises:
            UnsupportedPlatformError: If no font directory is known
        """


class MacOSFontRoot(FontRootProvider):
    """macOS system font directory."""

    platform = "darwin"

    def font_root(self) -> Path:
        return Path("/Library/Fonts/")


class LinuxFontRoot(FontRootProvider):
    """Linux system TrueType directory."""

    platform = "linux"

    def font_root(self) -> Path:
        return Path("/usr/share/fonts/truetype/")


class WindowsFontRoot(FontRootProvider):
    """Windows fonts directory under %SystemRoot%."""

    platform = "win32"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def font_root(self) -> Path:
        system_root = self._environ.get("SystemRoot") or self._environ.get("SYSTEMROOT")
        if not system_root:
            system_root = r"C:\Windows"
        return Path(system_root) / "Fonts"


class FixedFontRoot(FontRootProvider):
    """An explicitly configured font directory, independent of the platform."""

    platform = "any"

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    def font_root(self) -> Path:
        return self._root


class UnsupportedPlatformFontRoot(FontRootProvider):
    """Placeholder for platforms without a known font directory."""

    platform = "unsupported"

    def __init__(self, platform_name: str) -> None:
        self.platform_name = platform_name

    def font_root(self) -> Path:
        raise UnsupportedPlatformError(self.platform_name)


def select_font_root_provider(platform_name: str | None = None) -> FontRootProvider:
    """Pick the font-root provider for a platform.

    Args:
        platform_name: A ``sys.platform`` value (defaults to the running host)

    Returns:
        Provider for the platform, or UnsupportedPlatformFontRoot
    """
    if platform_name is None:
        platform_name = sys.platform

    if platform_name == "darwin":
        return MacOSFontRoot()
    if platform_name.startswith("linux"):
        return LinuxFontRoot()
    if platform_name == "win32":
        return WindowsFontRoot()
    return UnsupportedPlatformFontRoot(platform_name)
