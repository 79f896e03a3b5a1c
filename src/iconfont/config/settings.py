"""Configuration settings for iconfont."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

PRIVATE_USE_AREA_START = 0xE000


class GeometryConfig(BaseModel):
    """Configuration for outline geometry.

    Tolerances are expressed in font units, i.e. after icons have been
    scaled into the em square.
    """

    model_config = ConfigDict(frozen=True)

    curve_tolerance: float = Field(
        default=1.0,
        gt=0.0,
        le=100.0,
        description="Maximum L1 midpoint error when replacing a cubic with a quadratic",
    )
    max_subdivision_depth: int = Field(
        default=16,
        ge=0,
        le=32,
        description="Depth past which cubic subdivision accepts the trial quadratic",
    )
    area_epsilon: float = Field(
        default=1e-9,
        ge=0.0,
        description="Contours with smaller absolute area are never reversed",
    )


class MetricsConfig(BaseModel):
    """Static font-wide metrics.

    None of these values are derived from icon content.
    """

    model_config = ConfigDict(frozen=True)

    units_per_em: int = Field(default=1000, ge=16, le=16384)
    ascender: int = 800
    descender: int = -200
    line_gap: int = 0
    lowest_rec_ppem: int = 8
    weight_class: int = 400
    width_class: int = Field(default=5, ge=1, le=9, description="5 = medium")
    subscript_x_size: int = 650
    subscript_y_size: int = 600
    subscript_x_offset: int = 0
    subscript_y_offset: int = 75
    superscript_x_size: int = 650
    superscript_y_size: int = 600
    superscript_x_offset: int = 0
    superscript_y_offset: int = 350
    strikeout_size: int = 50
    strikeout_position: int = 300
    win_ascent: int = 1000
    win_descent: int = 200
    x_height: int = 500
    cap_height: int = 700
    default_char: int = 0
    break_char: int = 32


class NamingConfig(BaseModel):
    """Fixed entries of the name table."""

    model_config = ConfigDict(frozen=True)

    copyright: str = "Generated by iconfont"
    style_name: str = "Regular"
    version: str = "Version 1.0"
    unique_id_prefix: str = "iconfont"


class ProcessingConfig(BaseModel):
    """Configuration for the build pipeline."""

    model_config = ConfigDict(frozen=True)

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Worker processes for outline construction (1 = in-process, None = auto)",
    )
    codepoint_start: int = Field(
        default=PRIVATE_USE_AREA_START,
        ge=0,
        le=0x10FFFF,
        description="First codepoint assigned by the icon reader",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class IconFontSettings(BaseModel):
    """Main application settings."""

    model_config = ConfigDict(frozen=True)

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> IconFontSettings:
    """Get default application settings."""
    return IconFontSettings()
