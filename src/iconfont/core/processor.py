"""Font build orchestration.

This module coordinates the full pipeline: per-icon outline
construction (optionally fanned out to worker processes with
ProcessPoolExecutor) followed by font table assembly.

Key components:
- build_outline: Top-level picklable function for parallel execution
- FontProcessor: Main orchestrator class for font builds
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any

import structlog

from iconfont.config import IconFontSettings, get_default_settings
from iconfont.core.assembler import FontAssembler
from iconfont.core.outline import GlyphOutlineBuilder
from iconfont.domain import FontDocument, GlyphOutline, Icon
from iconfont.exceptions import (
    DuplicateCodepointError,
    EmptyIconSetError,
    IconFontError,
    InvalidIconError,
    OutlineBuildError,
)
from iconfont.utils import ProcessingLogger, ProcessingStats

ProgressCallback = Callable[[int, int, str, bool], None]


def _outline_result(builder: GlyphOutlineBuilder, icon: Icon) -> dict[str, Any]:
    start_time = time.perf_counter()

    try:
        outline = builder.build(icon)
        return {
            "outline": outline.to_dict(),
            "contour_count": len(outline.contours()),
            "duration_ms": (time.perf_counter() - start_time) * 1000,
        }

    except Exception as e:
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "reason": getattr(e, "reason", str(e)),
            "icon_name": icon.name,
            "traceback": traceback.format_exc(),
            "duration_ms": (time.perf_counter() - start_time) * 1000,
        }


def _failure(icon: Icon, result: dict[str, Any]) -> IconFontError:
    """Rebuild the exception behind an error result.

    Invalid icons keep their type; everything else is an OutlineBuildError.
    """
    reason = result.get("reason", result["error"])
    if result.get("error_type") == InvalidIconError.__name__:
        return InvalidIconError(icon.name, reason)
    return OutlineBuildError(icon.name, reason)


def build_outline(
    icon_dict: dict[str, Any], settings_dict: dict[str, Any]
) -> dict[str, Any]:
    """Build the glyph outline of a single icon.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Deserializes the icon and settings, builds the
    outline and returns a serialized result.

    Args:
        icon_dict: Serialized icon (from Icon.to_dict())
        settings_dict: Serialized settings (from IconFontSettings.model_dump())

    Returns:
        Dictionary containing either:
        - Success: {"outline": dict, "contour_count": int, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "icon_name": str,
          "reason": str, "traceback": str, "duration_ms": float}
    """
    icon = Icon.from_dict(icon_dict)
    settings = IconFontSettings.model_validate(settings_dict)
    return _outline_result(GlyphOutlineBuilder(settings), icon)


@dataclass(frozen=True)
class BuildResult:
    """Finished font together with build statistics."""

    document: FontDocument
    stats: ProcessingStats


class FontProcessor:
    """Orchestrates font builds.

    Manages the complete workflow:
    1. Validate the icon set (non-empty, unique codepoints)
    2. Build one outline per icon, in-process or in worker processes
    3. Assemble the font tables in glyph order

    Example:
        processor = FontProcessor(IconFontSettings())
        result = processor.build(icons, "My Icons", max_workers=4)
        Path("my_icons.ttf").write_bytes(result.document.to_bytes())
    """

    def __init__(
        self,
        settings: IconFontSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            settings: Application settings (defaults if None)
            logger: Logger to report to (module logger if None)
        """
        self.settings = settings if settings is not None else get_default_settings()
        self.logger = logger if logger is not None else structlog.get_logger("iconfont")
        self.builder = GlyphOutlineBuilder(self.settings)
        self.assembler = FontAssembler(self.settings)

    def build(
        self,
        icons: Sequence[Icon],
        family_name: str,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> BuildResult:
        """Build a font from icons.

        Glyph i + 1 is icons[i], whatever the order in which outlines
        finish.

        Args:
            icons: Icons in glyph order
            family_name: Font family name
            max_workers: Worker processes (None = configured value; a
                configured None lets the executor pick)
            progress_callback: Optional callback(completed, total, icon_name, success)
                for progress updates

        Returns:
            BuildResult with the font document and statistics

        Raises:
            EmptyIconSetError: If there are no icons
            DuplicateCodepointError: If two icons share a codepoint
            InvalidIconError: If an icon has an unusable viewport
            OutlineBuildError: If any other icon failure stops the build
            FontAssemblyError: If the tables cannot be assembled
        """
        if not icons:
            raise EmptyIconSetError()
        self._check_codepoints(icons)

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()
        processing_logger.log_build_start(family_name, len(icons), max_workers or 0)

        if max_workers == 1 or len(icons) == 1:
            results = self._build_sequential(icons, processing_logger, progress_callback)
        else:
            results = self._build_parallel(
                icons, max_workers, processing_logger, progress_callback
            )

        outlines = [GlyphOutlineBuilder.missing_glyph()]
        outlines.extend(GlyphOutline.from_dict(r["outline"]) for r in results)

        document = self.assembler.assemble(outlines, icons, family_name)
        processing_logger.log_font_assembled(document.glyph_count, len(document))

        stats.end_time = time.time()
        self.logger.info(
            "Build complete",
            icons=stats.processed_count,
            contours=stats.contour_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )
        return BuildResult(document=document, stats=stats)

    @staticmethod
    def _check_codepoints(icons: Sequence[Icon]) -> None:
        owners: dict[int, str] = {}
        for icon in icons:
            if icon.codepoint in owners:
                raise DuplicateCodepointError(
                    icon.codepoint, owners[icon.codepoint], icon.name
                )
            owners[icon.codepoint] = icon.name

    def _record(
        self,
        processing_logger: ProcessingLogger,
        icon: Icon,
        result: dict[str, Any],
    ) -> bool:
        """Log one result; False if it is an error."""
        if "error" in result:
            processing_logger.log_icon_error(
                icon_name=icon.name,
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )
            return False

        processing_logger.log_icon_complete(
            icon_name=icon.name,
            contour_count=result["contour_count"],
            duration_ms=result["duration_ms"],
        )
        return True

    def _build_sequential(
        self,
        icons: Sequence[Icon],
        processing_logger: ProcessingLogger,
        progress_callback: ProgressCallback | None,
    ) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        total = len(icons)

        for completed, icon in enumerate(icons, start=1):
            processing_logger.log_icon_start(icon.name)
            result = _outline_result(self.builder, icon)
            success = self._record(processing_logger, icon, result)

            if progress_callback is not None:
                progress_callback(completed, total, icon.name, success)
            if not success:
                raise _failure(icon, result)

            results.append(result)

        return results

    def _build_parallel(
        self,
        icons: Sequence[Icon],
        max_workers: int | None,
        processing_logger: ProcessingLogger,
        progress_callback: ProgressCallback | None,
    ) -> list[dict[str, Any]]:
        """Build outlines in worker processes.

        Results are collected as they complete and returned in icon order.
        The first failure cancels the pending work.
        """
        settings_dict = self.settings.model_dump()
        results: list[dict[str, Any] | None] = [None] * len(icons)
        total = len(icons)
        completed = 0
        pending_futures: dict[Future, int] = {}

        self.logger.debug(
            "Starting parallel processing",
            icon_count=total,
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, icon in enumerate(icons):
                future = executor.submit(build_outline, icon.to_dict(), settings_dict)
                pending_futures[future] = index

            try:
                for future in as_completed(list(pending_futures)):
                    index = pending_futures.pop(future)
                    icon = icons[index]

                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error
                        result = {
                            "error": str(e),
                            "error_type": type(e).__name__,
                            "icon_name": icon.name,
                            "traceback": traceback.format_exc(),
                        }

                    success = self._record(processing_logger, icon, result)
                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, icon.name, success)

                    if not success:
                        executor.shutdown(wait=True, cancel_futures=True)
                        raise _failure(icon, result)

                    results[index] = result

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                processing_logger.stats.was_cancelled = True
                processing_logger.stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return [r for r in results if r is not None]
