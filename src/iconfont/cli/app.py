"""CLI application entry point for iconfont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from iconfont import __version__
from iconfont.cli.output import (
    console,
    create_progress,
    print_cancelled,
    print_error,
    print_header,
    print_icon_table,
    print_icons_found,
    print_processing_info,
    print_step,
    print_success,
)
from iconfont.config import IconFontSettings, LoggingConfig, ProcessingConfig
from iconfont.core import FontProcessor
from iconfont.exceptions import FontSaveError, IconFontError
from iconfont.io import IconReader, OutputWriter
from iconfont.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="iconfont",
    help="Convert a directory of SVG icons into a TrueType icon font.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]iconfont[/bold blue] v{__version__}")
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
    """Convert a directory of SVG icons into a TrueType icon font."""


@app.command()
def generate(
    input_dir: Annotated[
        Path,
        typer.Argument(help="Directory containing SVG files"),
    ] = Path("icons"),
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for generated files",
        ),
    ] = Path("output"),
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            help="Font family name",
        ),
    ] = "Icons",
    preview: Annotated[
        bool,
        typer.Option(
            "--preview",
            "-p",
            help="Generate an HTML preview page",
        ),
    ] = False,
    manifest: Annotated[
        bool,
        typer.Option(
            "--manifest",
            "-m",
            help="Generate a JSON manifest of icon codepoints",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker processes (default: in-process)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Generate a TrueType font from SVG icons.

    Every .svg file directly inside INPUT_DIR becomes one glyph. Icons are
    mapped to Private Use Area codepoints from U+E000 in file name order.

    Example:
        iconfont generate ./icons -o ./build -n "My Icons" --preview

    This will create build/my_icons.ttf and build/my_icons_preview.html.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_dir.is_dir():
        print_error(
            f"Input directory not found: {input_dir}",
            details=f"The directory '{input_dir}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not name.strip():
        print_error("Font family name must not be empty")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = IconFontSettings(
        processing=(
            ProcessingConfig(max_workers=workers) if workers else ProcessingConfig()
        ),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level="INFO" if verbose else settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_step("Reading icons")

        reader = IconReader(input_dir, settings.processing.codepoint_start)
        icons = reader.read_all()

        if not quiet:
            print_icons_found(icons, reader.failures, verbose)

        if not icons:
            print_error(f"No SVG icons found in {input_dir}")
            raise typer.Exit(code=1)

        if not quiet:
            print_step("Building font")
            print_processing_info(settings.processing.max_workers)

        processor = FontProcessor(settings, logger=logger)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Building outlines", total=len(icons))

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    result = processor.build(
                        icons, name, progress_callback=update_progress
                    )
            else:
                result = processor.build(icons, name)
        except KeyboardInterrupt:
            if not quiet:
                print_cancelled()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        writer = OutputWriter(output, name)
        font_data = result.document.to_bytes()
        written = [writer.write_font(font_data)]
        if manifest:
            written.append(writer.write_manifest(icons))
        if preview:
            written.append(writer.write_preview(icons, font_data))

        if not quiet:
            print_success(
                written=[str(p) for p in written],
                font_size=len(font_data),
                total_time_s=result.stats.duration_seconds,
                icons=result.stats.processed_count,
                contours=result.stats.contour_count,
            )

    except FontSaveError as e:
        print_error(f"Could not save output: {e.reason}")
        raise typer.Exit(code=1)
    except IconFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command("list")
def list_icons(
    input_dir: Annotated[
        Path,
        typer.Argument(help="Directory containing SVG files"),
    ] = Path("icons"),
) -> None:
    """List the icons that would be included, with their codepoints."""
    if not input_dir.is_dir():
        print_error(f"Input directory not found: {input_dir}")
        raise typer.Exit(code=1)

    reader = IconReader(input_dir)
    icons = reader.read_all()

    if not icons:
        print_error(f"No SVG icons found in {input_dir}")
        raise typer.Exit(code=1)

    print_icon_table(icons)
    console.print(f"\n[bold]{len(icons)} icons[/bold]")
    for failure in reader.failures:
        console.print(f"  [yellow]skipped[/yellow] {failure.path}: {failure.reason}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
