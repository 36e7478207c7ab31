"""Face requests and resolved face handles."""

from dataclasses import dataclass

from fontresolver.config.settings import DEFAULT_FAMILY

DEFAULT_FONT_FAMILY_NAME = DEFAULT_FAMILY


@dataclass(frozen=True)
class FaceRequest:
    """A logical font request, normalized for matching.

    Attributes:
        family: Lowercased family name used for substring matching
        style: Extra style token taken from the requested name (e.g. "regular")
        bold: Whether a bold face was requested
        italic: Whether an italic face was requested
    """

    family: str
    style: str | None
    bold: bool = False
    italic: bool = False

    @classmethod
    def parse(cls, family_name: str, bold: bool = False, italic: bool = False) -> "FaceRequest":
        """Parse a requested family name.

        The name is lowercased and split on its first space: "Lato Regular"
        yields family "lato" and style "regular".

        Args:
            family_name: Family name as requested by the caller
            bold: Bold flag
            italic: Italic flag

        Returns:
            Parsed request
        """
        family = family_name.lower()
        style = None
        if " " in family:
            family, remainder = family.split(" ", 1)
            style = remainder.strip() or None
        return cls(family=family, style=style, bold=bold, italic=italic)

    @property
    def cache_key(self) -> str:
        """Family followed by "b" when bold and "i" when italic, in that order."""
        key = self.family
        if self.bold:
            key += "b"
        if self.italic:
            key += "i"
        return key


@dataclass(frozen=True)
class FaceHandle:
    """Resolved face, passed back to fetch the font bytes.

    Attributes:
        file_name: Name of the chosen font file, empty when nothing was discovered
    """

    file_name: str

    def __str__(self) -> str:
        return self.file_name
