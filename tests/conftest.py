"""Shared fixtures for fontresolver tests."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
import structlog

import fontresolver.utils.logging as resolver_logging
from fontresolver.domain import FontFileIndex

LATO_FILES = [
    "Lato-Regular.ttf",
    "Lato-Bold.ttf",
    "Lato-Italic.ttf",
    "Lato-BoldItalic.ttf",
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration done by a test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in resolver_logging._installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    resolver_logging._installed_handlers.clear()
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def make_font_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create font files (relative paths) under a fresh directory.

    Each file's content is ``b"font:" + relative path`` so tests can tell
    which file was read.
    """

    def _make(files: Iterable[str], root_name: str = "fonts") -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for rel in files:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(f"font:{rel}".encode())
        return root

    return _make


@pytest.fixture
def make_index(make_font_tree: Callable[..., Path]) -> Callable[..., FontFileIndex]:
    """Create font files and an index listing them in the given order."""

    def _make(files: list[str]) -> FontFileIndex:
        root = make_font_tree(files)
        return FontFileIndex.from_paths([root / name for name in files], root=root)

    return _make


@pytest.fixture
def lato_index(make_index: Callable[..., FontFileIndex]) -> FontFileIndex:
    """Index of the four Lato faces, regular first."""
    return make_index(LATO_FILES)
