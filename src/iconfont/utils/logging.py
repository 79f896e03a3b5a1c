"""Logging utilities for iconfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a font build."""

    icon_count: int = 0
    processed_count: int = 0
    error_count: int = 0
    contour_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    icon_timings_ms: dict[str, float] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None
    font_size_bytes: int = 0
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def slowest_icons(self) -> list[tuple[str, float]]:
        """Icons sorted by build time, slowest first."""
        return sorted(
            self.icon_timings_ms.items(), key=lambda item: item[1], reverse=True
        )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr; a file handler is added only when a
    log file is given.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_iconfont", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._iconfont = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._iconfont = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("iconfont")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking build progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_build_start(self, family_name: str, icon_count: int, workers: int) -> None:
        """Log start of a font build."""
        self._logger.info(
            "Building font",
            family=family_name,
            icons=icon_count,
            workers=workers,
        )
        self._stats.icon_count = icon_count

    def log_icon_start(self, icon_name: str) -> None:
        """Log start of icon processing."""
        self._logger.debug("Processing icon", icon=icon_name)

    def log_icon_complete(
        self,
        icon_name: str,
        contour_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful outline construction."""
        self._logger.debug(
            "Icon processed",
            icon=icon_name,
            contours=contour_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.contour_count += contour_count
        self._stats.icon_timings_ms[icon_name] = duration_ms

    def log_icon_error(
        self,
        icon_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log icon processing error."""
        self._logger.error(
            "Icon processing failed",
            icon=icon_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((icon_name, str(error)))

    def log_font_assembled(self, glyph_count: int, size_bytes: int) -> None:
        """Log the finished font."""
        self._logger.info(
            "Font assembled",
            glyphs=glyph_count,
            size_bytes=size_bytes,
        )
        self._stats.font_size_bytes = size_bytes

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
