"""Discovered font files and the index built over them.

A FontFileIndex is produced once by the scanner and then only read. It
remembers discovery order, since "first entry" is the fallback of last
resort for both resolution and byte fetching.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


def normalize_font_name(file_name: str, strip_chars: str = "-_") -> str:
    """Normalize a font file name for matching.

    Drops the extension, lowercases, and trims trailing separators:
    "Lato-Bold_.ttf" becomes "lato-bold".

    Args:
        file_name: File name with or without extension
        strip_chars: Characters trimmed from the end of the stem

    Returns:
        Normalized name
    """
    return Path(file_name).stem.lower().rstrip(strip_chars)


@dataclass(frozen=True)
class FontFileEntry:
    """A font file found on disk.

    Attributes:
        path: Absolute path to the file
    """

    path: Path

    @property
    def file_name(self) -> str:
        """File name including extension, the key used for lookups."""
        return self.path.name

    @property
    def stem(self) -> str:
        """File name without extension."""
        return self.path.stem


@dataclass(frozen=True)
class FontFileIndex:
    """Ordered, read-only mapping of file name to discovered font file.

    When two discovered paths share a file name, the later path is served
    for that name but the name keeps the position of its first occurrence
    in ``names()``.

    Attributes:
        entries: Discovered files in discovery order
        root: Directory that was scanned, if any
        scan_error: I/O error hit while reading the root, if any
    """

    entries: tuple[FontFileEntry, ...] = ()
    root: Path | None = None
    scan_error: OSError | None = None
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions: dict[str, int] = {}
        for idx, entry in enumerate(self.entries):
            positions[entry.file_name] = idx
        object.__setattr__(self, "_positions", MappingProxyType(positions))

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[Path | str],
        root: Path | None = None,
        scan_error: OSError | None = None,
    ) -> "FontFileIndex":
        """Build an index from file paths in discovery order."""
        entries = tuple(FontFileEntry(Path(p)) for p in paths)
        return cls(entries=entries, root=root, scan_error=scan_error)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, file_name: object) -> bool:
        return file_name in self._positions

    @property
    def is_empty(self) -> bool:
        """True when discovery found no font files."""
        return not self.entries

    def paths(self) -> tuple[Path, ...]:
        """Discovered file paths in discovery order."""
        return tuple(entry.path for entry in self.entries)

    def names(self) -> Iterator[str]:
        """Iterate over distinct file names in index order."""
        return iter(self._positions)

    def first_name(self) -> str | None:
        """Return the first file name in index order, or None if empty."""
        return next(iter(self._positions), None)

    def position_of(self, file_name: str) -> int | None:
        """Return the position of a file name in the discovered list."""
        return self._positions.get(file_name)

    def path_for(self, file_name: str) -> Path | None:
        """Return the path registered for a file name, or None if unknown."""
        idx = self._positions.get(file_name)
        if idx is None:
            return None
        return self.entries[idx].path
