"""fontresolver - Resolve logical fonts to font files installed on the host.

fontresolver is the font-acquisition layer of a document rendering pipeline.
It discovers the TrueType files installed under the platform's font directory
once, maps a requested (family, bold, italic) triple to the best-matching file
using file-name heuristics, and returns the raw bytes of that file.

Example:
    >>> from fontresolver import FontMatcher
    >>> matcher = FontMatcher()
    >>> handle = matcher.resolve("Lato", bold=True, italic=False)
    >>> data = matcher.fetch_bytes(handle)
"""

from fontresolver.core import FontMatcher
from fontresolver.discovery import FontDirectoryScanner
from fontresolver.domain import DEFAULT_FONT_FAMILY_NAME, FaceHandle, FontFileIndex

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FONT_FAMILY_NAME",
    "FaceHandle",
    "FontDirectoryScanner",
    "FontFileIndex",
    "FontMatcher",
    "__version__",
]
