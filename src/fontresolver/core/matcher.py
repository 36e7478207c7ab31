"""Font matcher.

Resolves (family, bold, italic) requests to discovered font files and
serves their bytes. Resolutions are cached per family and style flags for
the life of the matcher; the first answer for a key is final.
"""

import threading
from pathlib import Path

import structlog

from fontresolver.config import FontResolverSettings
from fontresolver.core.heuristics import Candidate, filter_candidates, select_face
from fontresolver.discovery import FontDirectoryScanner
from fontresolver.domain import FaceHandle, FaceRequest, FontFileIndex, normalize_font_name
from fontresolver.exceptions import NoFontFilesError
from fontresolver.utils import ResolutionLogger, ResolutionStats, get_logger


class FontMatcher:
    """Resolves logical fonts to discovered font files.

    The matcher starts uninitialized and becomes ready once its index is
    available: either injected at construction, or built by the scanner on
    setup() or on the first resolve()/fetch_bytes() call. It never goes back.

    The resolution cache is guarded by a single lock held across the
    check-then-insert sequence, so concurrent requests for the same key
    compute it once. The index is read-only and fetches take no lock.

    Example:
        matcher = FontMatcher()
        handle = matcher.resolve("Lato Regular", bold=False, italic=False)
        font_data = matcher.fetch_bytes(handle)
    """

    def __init__(
        self,
        index: FontFileIndex | None = None,
        scanner: FontDirectoryScanner | None = None,
        settings: FontResolverSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            index: Prebuilt font index; makes the matcher ready immediately
            scanner: Scanner used to build the index on setup (a default
                scanner is created from settings when neither is given)
            settings: Settings (defaults apply if None)
            logger: Structured logger (a module logger is used if None)

        Raises:
            ValueError: If both index and scanner are given
        """
        if index is not None and scanner is not None:
            raise ValueError("Pass either an index or a scanner, not both")

        self._settings = settings or FontResolverSettings()
        self._scanner = scanner
        self._index: FontFileIndex | None = None
        self._names: tuple[Candidate, ...] = ()
        self._setup_lock = threading.Lock()

        self._cache: dict[str, str | None] = {}
        self._cache_lock = threading.Lock()

        self.resolution_logger = ResolutionLogger(logger or get_logger(__name__))

        if index is not None:
            self._publish(index)

    @property
    def default_font_name(self) -> str:
        """Family to request when no specific family is known."""
        return self._settings.resolver.default_family

    @property
    def is_ready(self) -> bool:
        """True once the font index is available."""
        return self._index is not None

    @property
    def index(self) -> FontFileIndex:
        """The font index, building it if needed."""
        return self.setup()

    @property
    def stats(self) -> ResolutionStats:
        """Resolution and fetch statistics."""
        return self.resolution_logger.stats

    def setup(self) -> FontFileIndex:
        """Build the font index if it has not been built yet.

        Returns:
            The font index

        Raises:
            UnsupportedPlatformError: If discovery cannot run on this host
        """
        if self._index is not None:
            return self._index

        with self._setup_lock:
            if self._index is None:
                if self._scanner is None:
                    self._scanner = FontDirectoryScanner(self._settings.scanner)
                self._publish(self._scanner.scan())
            return self._index  # type: ignore[return-value]

    def _publish(self, index: FontFileIndex) -> None:
        # Normalized names are computed before the index becomes visible.
        strip_chars = self._settings.resolver.strip_chars
        self._names = tuple(
            (name, normalize_font_name(name, strip_chars)) for name in index.names()
        )
        self._index = index

    def resolve(self, family_name: str, bold: bool = False, italic: bool = False) -> FaceHandle:
        """Resolve a logical font to a discovered font file.

        Never fails for lack of a match: when no file matches the family the
        first discovered file is used. With no discovered files at all the
        handle has an empty file name, and fetch_bytes() reports the problem.

        Args:
            family_name: Requested family, optionally followed by a style
                ("Lato Regular")
            bold: Whether a bold face is wanted
            italic: Whether an italic face is wanted

        Returns:
            Handle naming the chosen file
        """
        index = self.setup()
        request = FaceRequest.parse(family_name, bold=bold, italic=italic)
        key = request.cache_key

        with self._cache_lock:
            if key in self._cache:
                file_name = self._cache[key]
                self.resolution_logger.log_cache_hit(key, file_name)
            else:
                candidates = filter_candidates(self._names, request.family)
                file_name, rule = select_face(candidates, request)
                self._cache[key] = file_name
                self.resolution_logger.log_resolved(key, file_name, len(candidates), rule.value)

        if file_name is None:
            file_name = index.first_name() or ""
            self.resolution_logger.log_fallback(request.family, file_name)
        return FaceHandle(file_name)

    def fetch_bytes(self, face: FaceHandle | str) -> bytes:
        """Read the font file behind a handle or raw file name.

        Unknown names are served the first discovered file.

        Args:
            face: Handle from resolve(), or a file name

        Returns:
            Full file contents

        Raises:
            NoFontFilesError: If no font files were discovered
            OSError: If the file can no longer be read
        """
        index = self.setup()
        requested = face.file_name if isinstance(face, FaceHandle) else str(face)

        path = index.path_for(requested)
        if path is None:
            if index.is_empty:
                self.resolution_logger.log_no_fonts(requested, index.root)
                reason = str(index.scan_error) if index.scan_error else None
                raise NoFontFilesError(index.root, reason) from index.scan_error
            path = index.entries[0].path

        data = Path(path).read_bytes()
        self.resolution_logger.log_fetch(requested, path, len(data))
        return data

    def cached_faces(self) -> dict[str, str | None]:
        """Snapshot of the resolution cache, keyed by cache key."""
        with self._cache_lock:
            return dict(self._cache)

    def is_cached(self, family_name: str, bold: bool = False, italic: bool = False) -> bool:
        """Check whether a request would be answered from the cache."""
        key = FaceRequest.parse(family_name, bold=bold, italic=italic).cache_key
        with self._cache_lock:
            return key in self._cache
