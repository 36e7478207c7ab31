"""Font directory scanner.

Walks the platform font root once and builds the FontFileIndex shared by
every resolution afterwards.
"""

import os
import threading
from collections.abc import Iterator
from pathlib import Path

from fontresolver.config import ScannerConfig
from fontresolver.discovery.platforms import (
    FixedFontRoot,
    FontRootProvider,
    select_font_root_provider,
)
from fontresolver.domain import FontFileIndex
from fontresolver.utils import get_logger


class FontDirectoryScanner:
    """Discovers the font files available on the host.

    The scan happens at most once per scanner; later calls to scan() return
    the same index. A missing root is not an error here: it yields an empty
    index and the failure surfaces when bytes are first requested.

    Example:
        scanner = FontDirectoryScanner()
        index = scanner.scan()
        print(len(index), "fonts under", index.root)
    """

    def __init__(
        self,
        config: ScannerConfig | None = None,
        provider: FontRootProvider | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            config: Scanner settings (defaults apply if None)
            provider: Font-root provider; chosen from config.font_root or the
                running platform when None
        """
        self._config = config or ScannerConfig()
        if provider is None:
            if self._config.font_root is not None:
                provider = FixedFontRoot(self._config.font_root)
            else:
                provider = select_font_root_provider()
        self._provider = provider
        self._index: FontFileIndex | None = None
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    @property
    def provider(self) -> FontRootProvider:
        """Font-root provider in use."""
        return self._provider

    @property
    def has_scanned(self) -> bool:
        """True once scan() has completed."""
        return self._index is not None

    def scan(self) -> FontFileIndex:
        """Discover font files, once.

        Returns:
            Index of discovered files, possibly empty

        Raises:
            UnsupportedPlatformError: If the platform has no known font root
        """
        if self._index is not None:
            return self._index

        with self._lock:
            if self._index is None:
                self._index = self._build_index()
            return self._index

    def _build_index(self) -> FontFileIndex:
        root = self._provider.font_root()
        self._logger.info(
            "Scanning for fonts",
            root=str(root),
            platform=self._provider.platform,
            extensions=list(self._config.extensions),
        )

        try:
            if not root.exists():
                self._logger.warning("Font directory does not exist", root=str(root))
                return FontFileIndex(root=root)
            paths = list(self._iter_font_files(root))
        except OSError as e:
            self._logger.warning("Font directory is not readable", root=str(root), error=str(e))
            return FontFileIndex(root=root, scan_error=e)

        self._logger.info("Font scan complete", root=str(root), count=len(paths))
        return FontFileIndex.from_paths(paths, root=root)

    def _iter_font_files(self, root: Path) -> Iterator[Path]:
        """Yield font files under root, sorted by name within each directory.

        Raises:
            OSError: If root itself cannot be listed
        """
        root = root.absolute()
        # os.walk reports errors through onerror only, so probe the root first
        os.listdir(root)

        extensions = self._config.extensions
        for dirpath, dirnames, filenames in os.walk(
            root,
            onerror=self._log_walk_error,
            followlinks=self._config.follow_symlinks,
        ):
            dirnames.sort()
            for name in sorted(filenames):
                if os.path.splitext(name)[1].lower() in extensions:
                    yield Path(dirpath) / name

    def _log_walk_error(self, error: OSError) -> None:
        self._logger.warning(
            "Skipping unreadable font directory",
            path=error.filename,
            error=error.strerror or str(error),
        )
