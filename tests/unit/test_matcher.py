"""Unit tests for the FontMatcher service."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from fontresolver.config import FontResolverSettings, ResolverConfig
from fontresolver.core import FontMatcher
from fontresolver.core.heuristics import filter_candidates
from fontresolver.discovery import FontDirectoryScanner, UnsupportedPlatformFontRoot
from fontresolver.domain import DEFAULT_FONT_FAMILY_NAME, FaceHandle, FontFileIndex
from fontresolver.exceptions import NoFontFilesError, UnsupportedPlatformError


class TestResolve:
    """Tests for FontMatcher.resolve."""

    @pytest.mark.parametrize(
        ("bold", "italic", "expected"),
        [
            (True, True, "Lato-BoldItalic.ttf"),
            (True, False, "Lato-Bold.ttf"),
            (False, True, "Lato-Italic.ttf"),
            (False, False, "Lato-Regular.ttf"),
        ],
    )
    def test_lato_faces(self, lato_index: FontFileIndex, bold: bool, italic: bool, expected: str) -> None:
        """Test each Lato face resolves to its file."""
        matcher = FontMatcher(index=lato_index)
        assert matcher.resolve("lato", bold, italic) == FaceHandle(expected)

    def test_suffix_named_faces(self, make_index: Callable[..., FontFileIndex]) -> None:
        """Test abbreviated Windows-style file names."""
        matcher = FontMatcher(index=make_index(["arial.ttf", "arialbd.ttf", "ariali.ttf", "arialbi.ttf"]))

        assert matcher.resolve("Arial", True, True).file_name == "arialbi.ttf"
        assert matcher.resolve("Arial", True, False).file_name == "arialbd.ttf"
        assert matcher.resolve("Arial", False, True).file_name == "ariali.ttf"
        assert matcher.resolve("Arial", False, False).file_name == "arial.ttf"

    def test_bold_italic_never_plain_when_available(self, make_index: Callable[..., FontFileIndex]) -> None:
        """Test a bold-italic file is chosen over earlier plain files."""
        index = make_index(["Foo-Regular.ttf", "Foo-Bold.ttf", "Foo-Italic.ttf", "Foo-BI.ttf"])
        assert FontMatcher(index=index).resolve("foo", True, True).file_name == "Foo-BI.ttf"

    def test_family_style_token(self, make_index: Callable[..., FontFileIndex]) -> None:
        """Test "Lato Regular" prefers a file containing "regular"."""
        index = make_index(["Lato-Light.ttf", "Lato-Regular.ttf"])

        assert FontMatcher(index=index).resolve("Lato Regular").file_name == "Lato-Regular.ttf"
        assert FontMatcher(index=index).resolve("Lato").file_name == "Lato-Light.ttf"

    def test_style_token_shares_family_cache_key(self, make_index: Callable[..., FontFileIndex]) -> None:
        """Test the first resolution of a family key is final."""
        matcher = FontMatcher(index=make_index(["Lato-Light.ttf", "Lato-Regular.ttf"]))

        assert matcher.resolve("Lato Regular").file_name == "Lato-Regular.ttf"
        assert matcher.resolve("Lato Light").file_name == "Lato-Regular.ttf"

    def test_trailing_separators_trimmed(self, make_index: Callable[..., FontFileIndex]) -> None:
        """Test style suffixes are found after trimming trailing separators."""
        matcher = FontMatcher(index=make_index(["Lato-Regular.ttf", "Lato-I_.ttf"]))
        assert matcher.resolve("Lato", italic=True).file_name == "Lato-I_.ttf"

    def test_case_insensitive(self, make_index: Callable[..., FontFileIndex]) -> None:
        """Test differently cased names share one cache entry."""
        matcher = FontMatcher(index=make_index(["Arial.ttf", "calibri.ttf", "calibrib.ttf"]))

        handles = {matcher.resolve(name) for name in ("CALIBRI", "calibri", "Calibri")}

        assert handles == {FaceHandle("calibri.ttf")}
        assert matcher.cached_faces() == {"calibri": "calibri.ttf"}

    def test_idempotent_and_cached(self, lato_index: FontFileIndex) -> None:
        """Test repeated requests hit the cache without re-filtering."""
        matcher = FontMatcher(index=lato_index)

        with patch("fontresolver.core.matcher.filter_candidates", wraps=filter_candidates) as spy:
            first = matcher.resolve("Lato", bold=True)
            second = matcher.resolve("Lato", bold=True)

        assert first == second == FaceHandle("Lato-Bold.ttf")
        assert spy.call_count == 1
        assert matcher.stats.cache_misses == 1
        assert matcher.stats.cache_hits == 1
        assert matcher.stats.resolve_count == 2
        assert matcher.is_cached("LATO", bold=True)
        assert not matcher.is_cached("Lato", italic=True)

    def test_unknown_family_falls_back(self, lato_index: FontFileIndex) -> None:
        """Test an unknown family resolves to the first discovered file."""
        matcher = FontMatcher(index=lato_index)

        handle = matcher.resolve("Helvetica", bold=True)

        assert handle.file_name == "Lato-Regular.ttf"
        assert handle.file_name in lato_index
        assert matcher.cached_faces() == {"helveticab": None}
        assert matcher.stats.fallbacks == 1

    def test_unknown_family_miss_is_cached(self, lato_index: FontFileIndex) -> None:
        """Test a miss is not re-evaluated but each fallback is counted."""
        matcher = FontMatcher(index=lato_index)

        with patch("fontresolver.core.matcher.filter_candidates", wraps=filter_candidates) as spy:
            matcher.resolve("Helvetica")
            handle = matcher.resolve("Helvetica")

        assert spy.call_count == 1
        assert handle.file_name == "Lato-Regular.ttf"
        assert matcher.stats.fallbacks == 2
        assert matcher.stats.cache_hits == 1

    def test_empty_index_does_not_raise(self) -> None:
        """Test resolving against an empty index yields an empty handle."""
        matcher = FontMatcher(index=FontFileIndex())
        assert matcher.resolve("Calibri") == FaceHandle("")

    def test_concurrent_resolution(self, lato_index: FontFileIndex) -> None:
        """Test concurrent requests for one key compute it once."""
        matcher = FontMatcher(index=lato_index)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: matcher.resolve("Lato", True, True), range(200)))

        assert set(results) == {FaceHandle("Lato-BoldItalic.ttf")}
        assert matcher.stats.cache_misses == 1
        assert matcher.stats.cache_hits == 199


class TestFetchBytes:
    """Tests for FontMatcher.fetch_bytes."""

    def test_fetch_by_handle(self, lato_index: FontFileIndex) -> None:
        """Test bytes of the resolved file are returned."""
        matcher = FontMatcher(index=lato_index)
        handle = matcher.resolve("Lato", bold=True)

        assert matcher.fetch_bytes(handle) == b"font:Lato-Bold.ttf"
        assert matcher.stats.fetch_count == 1
        assert matcher.stats.bytes_read == len(b"font:Lato-Bold.ttf")

    def test_fetch_by_name(self, lato_index: FontFileIndex) -> None:
        """Test a raw file name is accepted."""
        matcher = FontMatcher(index=lato_index)
        assert matcher.fetch_bytes("Lato-Italic.ttf") == b"font:Lato-Italic.ttf"

    def test_unknown_name_uses_first_file(self, lato_index: FontFileIndex) -> None:
        """Test unknown names are served the first discovered file."""
        matcher = FontMatcher(index=lato_index)
        assert matcher.fetch_bytes("Missing.ttf") == b"font:Lato-Regular.ttf"

    def test_rereads_every_call(self, lato_index: FontFileIndex) -> None:
        """Test no byte content is cached."""
        matcher = FontMatcher(index=lato_index)
        path = lato_index.path_for("Lato-Bold.ttf")
        assert path is not None

        assert matcher.fetch_bytes("Lato-Bold.ttf") == b"font:Lato-Bold.ttf"
        path.write_bytes(b"changed")
        assert matcher.fetch_bytes("Lato-Bold.ttf") == b"changed"

    def test_empty_index(self) -> None:
        """Test fetching with no discovered files fails."""
        matcher = FontMatcher(index=FontFileIndex(root=Path("/nowhere")))
        handle = matcher.resolve("Calibri")

        with pytest.raises(NoFontFilesError, match="No font files found") as exc_info:
            matcher.fetch_bytes(handle)
        assert exc_info.value.root == Path("/nowhere")

    def test_empty_index_chains_scan_error(self) -> None:
        """Test the scan error is attached as the cause."""
        error = PermissionError(13, "Permission denied")
        matcher = FontMatcher(index=FontFileIndex(root=Path("/locked"), scan_error=error))

        with pytest.raises(NoFontFilesError) as exc_info:
            matcher.fetch_bytes("Calibri")
        assert exc_info.value.__cause__ is error
        assert "Permission denied" in str(exc_info.value)

    def test_deleted_file_raises(self, lato_index: FontFileIndex) -> None:
        """Test a file removed after discovery raises an I/O error."""
        matcher = FontMatcher(index=lato_index)
        path = lato_index.path_for("Lato-Bold.ttf")
        assert path is not None
        path.unlink()

        with pytest.raises(FileNotFoundError):
            matcher.fetch_bytes("Lato-Bold.ttf")

        assert matcher.fetch_bytes("Lato-Italic.ttf") == b"font:Lato-Italic.ttf"


class TestLifecycle:
    """Tests for setup, state and settings."""

    def test_injected_index_is_ready(self, lato_index: FontFileIndex) -> None:
        """Test an injected index makes the matcher ready."""
        matcher = FontMatcher(index=lato_index)
        assert matcher.is_ready
        assert matcher.index is lato_index

    def test_lazy_setup_scans_once(self, lato_index: FontFileIndex) -> None:
        """Test the scanner runs on first use, only once."""
        scanner = MagicMock(spec=FontDirectoryScanner)
        scanner.scan.return_value = lato_index
        matcher = FontMatcher(scanner=scanner)

        assert not matcher.is_ready
        scanner.scan.assert_not_called()

        matcher.resolve("Lato")
        matcher.fetch_bytes("Lato-Bold.ttf")
        matcher.setup()

        assert matcher.is_ready
        scanner.scan.assert_called_once()

    def test_concurrent_setup(self, lato_index: FontFileIndex) -> None:
        """Test concurrent first calls build the index once."""
        scanner = MagicMock(spec=FontDirectoryScanner)
        scanner.scan.return_value = lato_index
        matcher = FontMatcher(scanner=scanner)

        with ThreadPoolExecutor(max_workers=8) as pool:
            indexes = list(pool.map(lambda _: matcher.setup(), range(32)))

        assert all(index is lato_index for index in indexes)
        scanner.scan.assert_called_once()

    def test_default_scanner_from_settings(self, make_font_tree: Callable[..., Path]) -> None:
        """Test a scanner is created from settings when none is given."""
        root = make_font_tree(["Lato-Regular.ttf"])
        settings = FontResolverSettings.model_validate({"scanner": {"font_root": str(root)}})

        matcher = FontMatcher(settings=settings)

        assert matcher.resolve("Lato").file_name == "Lato-Regular.ttf"

    def test_unsupported_platform(self) -> None:
        """Test setup fails on an unsupported platform."""
        scanner = FontDirectoryScanner(provider=UnsupportedPlatformFontRoot("plan9"))
        matcher = FontMatcher(scanner=scanner)

        with pytest.raises(UnsupportedPlatformError):
            matcher.resolve("Calibri")
        assert not matcher.is_ready

    def test_index_and_scanner_exclusive(self, lato_index: FontFileIndex) -> None:
        """Test index and scanner cannot both be given."""
        with pytest.raises(ValueError, match="either an index or a scanner"):
            FontMatcher(index=lato_index, scanner=MagicMock(spec=FontDirectoryScanner))

    def test_default_font_name(self) -> None:
        """Test the default family."""
        assert FontMatcher(index=FontFileIndex()).default_font_name == DEFAULT_FONT_FAMILY_NAME

    def test_custom_default_font_name(self) -> None:
        """Test a configured default family."""
        settings = FontResolverSettings(resolver=ResolverConfig(default_family="Lato"))
        assert FontMatcher(index=FontFileIndex(), settings=settings).default_font_name == "Lato"

    def test_logs_resolution(self, lato_index: FontFileIndex, caplog: pytest.LogCaptureFixture) -> None:
        """Test resolutions are logged through stdlib logging."""
        matcher = FontMatcher(index=lato_index)

        with caplog.at_level(logging.DEBUG, logger="fontresolver"):
            matcher.resolve("Lato", bold=True)
            matcher.resolve("Lato", bold=True)

        assert "Face resolved" in caplog.text
        assert "Face cache hit" in caplog.text
        assert "Lato-Bold.ttf" in caplog.text
