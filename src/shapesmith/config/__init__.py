"""Configuration management for shapesmith.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StripeConfig: Default dash pattern for striped shapes
- ShapeConfig: Shape-specific constants
- RenderConfig: Device scale and anti-aliasing
- FontConfig: Font search paths for glyph images
- LoggingConfig: Logging settings
- ShapesmithSettings: Main application settings
"""

from shapesmith.config.settings import (
    FontConfig,
    LoggingConfig,
    RenderConfig,
    ShapeConfig,
    ShapesmithSettings,
    StripeConfig,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "LoggingConfig",
    "RenderConfig",
    "ShapeConfig",
    "ShapesmithSettings",
    "StripeConfig",
    "get_default_settings",
]
