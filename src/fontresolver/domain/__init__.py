"""Domain models for fontresolver.

All models are immutable value types, safe to share between threads once
constructed.

Key classes:
- FontFileEntry: A discovered font file
- FontFileIndex: The ordered, read-only set of discovered font files
- FaceRequest: A parsed (family, style, bold, italic) request
- FaceHandle: The resolved face, used later to fetch bytes
"""

from fontresolver.domain.face import DEFAULT_FONT_FAMILY_NAME, FaceHandle, FaceRequest
from fontresolver.domain.font_file import FontFileEntry, FontFileIndex, normalize_font_name

__all__: list[str] = [
    "DEFAULT_FONT_FAMILY_NAME",
    "FaceHandle",
    "FaceRequest",
    "FontFileEntry",
    "FontFileIndex",
    "normalize_font_name",
]
