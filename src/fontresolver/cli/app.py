"""CLI application entry point for fontresolver."""

from pathlib import Path
from typing import Annotated

import typer

from fontresolver import __version__
from fontresolver.cli.output import (
    print_error,
    print_header,
    print_index,
    print_resolution,
    print_step,
)
from fontresolver.config import FontResolverSettings, LoggingConfig, ScannerConfig
from fontresolver.core import FontMatcher
from fontresolver.discovery import FontDirectoryScanner
from fontresolver.exceptions import FontResolverError
from fontresolver.utils import configure_logging

app = typer.Typer(
    name="fontresolver",
    help="Inspect installed fonts and how font requests resolve against them.",
    add_completion=False,
    no_args_is_help=True,
)

RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Font directory to scan instead of the platform default",
    ),
]
ExtensionOption = Annotated[
    list[str] | None,
    typer.Option(
        "--ext",
        "-e",
        help="Font file extension to include (repeatable, default: .ttf)",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fontresolver v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Resolve logical fonts to installed font files."""


def _build_settings(
    root: Path | None,
    extensions: list[str] | None,
    log_level: str,
    log_file: Path | None = None,
) -> FontResolverSettings:
    scanner = ScannerConfig(font_root=root)
    if extensions:
        scanner = ScannerConfig(font_root=root, extensions=tuple(extensions))
    return FontResolverSettings(
        scanner=scanner,
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )



def _configure_logging(settings: FontResolverSettings) -> None:
    try:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
    except OSError as e:
        print_error(f"Could not open log file: {settings.logging.log_file}", details=str(e))
        raise typer.Exit(code=1)

@app.command()
def scan(
    root: RootOption = None,
    ext: ExtensionOption = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Show at most this many files", min=1),
    ] = None,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
) -> None:
    """List the font files discovered on this host."""
    try:
        settings = _build_settings(root, ext, log_level, log_file)
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    _configure_logging(settings)
    print_header(__version__)
    print_step("Scanning fonts")

    try:
        index = FontDirectoryScanner(settings.scanner).scan()
    except FontResolverError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_index(index, limit=limit)


@app.command()
def resolve(
    family: Annotated[str, typer.Argument(help="Font family, optionally with a style (\"Lato Regular\")")],
    bold: Annotated[bool, typer.Option("--bold", "-b", help="Request a bold face")] = False,
    italic: Annotated[bool, typer.Option("--italic", "-i", help="Request an italic face")] = False,
    root: RootOption = None,
    ext: ExtensionOption = None,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
) -> None:
    """Show which font file a family request resolves to."""
    try:
        settings = _build_settings(root, ext, log_level, log_file)
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    _configure_logging(settings)
    matcher = FontMatcher(settings=settings)

    try:
        handle = matcher.resolve(family, bold=bold, italic=italic)
        index = matcher.index
    except FontResolverError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if index.is_empty:
        details = f"Nothing matching {', '.join(settings.scanner.extensions)} under {index.root}"
        if index.scan_error is not None:
            details += f" ({index.scan_error})"
        print_error("No font files found", details=details)
        raise typer.Exit(code=1)

    print_resolution(family, bold, italic, handle.file_name, index.path_for(handle.file_name))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
