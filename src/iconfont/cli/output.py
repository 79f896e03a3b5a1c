"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from iconfont.domain import Icon
from iconfont.exceptions import IconLoadError

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for icon processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]iconfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_icons_found(
    icons: Sequence[Icon],
    failures: Sequence[IconLoadError],
    verbose: bool,
) -> None:
    """Print the result of reading the icon directory.

    Args:
        icons: Icons that were read
        failures: Files that could not be read
        verbose: Whether to list every icon
    """
    console.print(f"  [green]{len(icons)}[/green] icons")
    if verbose:
        for icon in icons:
            line = Text(f"  U+{icon.codepoint:04X} ")
            line.append(icon.name)
            console.print(line)

    for failure in failures:
        line = Text(f"  {SYM_WARN} ", style="yellow")
        line.append(f"{failure.path}: {failure.reason}", style="default")
        console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g. "12 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_processing_info(workers: int | None) -> None:
    """Print processing configuration.

    Args:
        workers: Number of worker processes (None = auto)
    """
    if workers is None:
        console.print(f"  auto workers {SYM_DOT} Ctrl+C to cancel")
    elif workers == 1:
        console.print("  in-process")
    else:
        console.print(f"  {workers} workers {SYM_DOT} Ctrl+C to cancel")


def print_success(
    written: Sequence[str],
    font_size: int,
    total_time_s: float,
    icons: int,
    contours: int,
) -> None:
    """Print success message with summary.

    Args:
        written: Paths of the written files, font first
        font_size: Font file size in bytes
        total_time_s: Total build time in seconds
        icons: Number of icons in the font
        contours: Total number of contours emitted
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    for index, path in enumerate(written):
        line = Text("  ")
        line.append(path, style="bold")
        if index == 0:
            line.append(f" ({format_file_size(font_size)})")
        console.print(line)

    console.print(f"  {icons} icons {SYM_DOT} {contours} contours")


def print_icon_table(icons: Sequence[Icon]) -> None:
    """Print icons as a table.

    Args:
        icons: Icons to list
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Codepoint")
    table.add_column("Name")
    table.add_column("Fill rule")
    table.add_column("Viewport", justify="right")
    table.add_column("File")

    for icon in icons:
        table.add_row(
            f"U+{icon.codepoint:04X}",
            icon.name,
            icon.fill_rule.value,
            f"{icon.width:g} x {icon.height:g}",
            f"{icon.filename}.svg",
        )

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancelled() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
