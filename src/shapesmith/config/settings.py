"""Configuration settings for Shapesmith."""

from pathlib import Path

from pydantic import BaseModel, Field

# float32 machine epsilon
FLOAT32_EPSILON = 1.1920929e-07


class StripeConfig(BaseModel):
    """Default dash pattern for striped rectangles."""

    line_width: float = Field(
        default=2.0,
        gt=0.0,
        description="Stroke width of each stripe",
    )
    gap: float = Field(
        default=3.0,
        ge=0.0,
        description="Distance between neighbouring stripes",
    )


class ShapeConfig(BaseModel):
    """Shape-specific constants."""

    bar_height: float = Field(
        default=2.0,
        gt=0.0,
        description="Height of the bar drawn by the circle-with-bar shape",
    )
    star_scale_epsilon: float = Field(
        default=FLOAT32_EPSILON,
        gt=0.0,
        le=0.1,
        description="Star scales closer than this to 1.0 are rejected as degenerate",
    )
    border_line_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Default stroke width for borders and rounded corners",
    )
    max_stripes: int = Field(
        default=10_000,
        gt=0,
        description="Upper bound on the number of lines in a stripe pattern",
    )


class RenderConfig(BaseModel):
    """Rasterization settings."""

    device_scale: float = Field(
        default=1.0,
        gt=0.0,
        le=8.0,
        description="Pixels per logical unit of the generated buffer",
    )
    antialias: bool = Field(
        default=True,
        description="Anti-alias fills and strokes",
    )


class FontConfig(BaseModel):
    """Font lookup settings for glyph images."""

    search_paths: list[Path] = Field(
        default_factory=list,
        description="Directories searched for '<font_name>.ttf/.otf'",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

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


class ShapesmithSettings(BaseModel):
    """Main application settings."""

    stripes: StripeConfig = Field(default_factory=StripeConfig)
    shapes: ShapeConfig = Field(default_factory=ShapeConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    fonts: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapesmithSettings:
    """Get default application settings."""
    return ShapesmithSettings()
