"""Rich console output helpers for the CLI."""

from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fontresolver.domain import FontFileIndex

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]fontresolver[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_index(index: FontFileIndex, limit: int | None = None) -> None:
    """Print the discovered font files as a table.

    Args:
        index: Font index to display
        limit: Maximum number of rows (all if None)
    """
    root = str(index.root) if index.root else "-"
    console.print(Text(f"  {root}"))
    console.print(f"  [green]{len(index)}[/green] font files")

    if index.is_empty:
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("File")
    table.add_column("Path", overflow="fold")

    entries = index.entries if limit is None else index.entries[:limit]
    for idx, entry in enumerate(entries):
        table.add_row(str(idx), entry.file_name, str(entry.path))
    console.print(table)

    if limit is not None and len(index) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(index) - limit} more)")


def print_resolution(family: str, bold: bool, italic: bool, file_name: str, path: Path | None) -> None:
    """Print the outcome of a resolution."""
    flags = [flag for flag, on in (("bold", bold), ("italic", italic)) if on]
    request = family + (f" ({', '.join(flags)})" if flags else "")

    console.print(f"\n[bold green]{SYM_OK} Resolved[/bold green] {request}")
    line = Text("  ")
    line.append(file_name or "-", style="bold")
    if path is not None:
        line.append(f" {SYM_DOT} {path}")
        line.append(f" ({format_file_size(path)})")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def format_file_size(path: Path) -> str:
    """Format file size in human-readable form (e.g. "428 KB")."""
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
