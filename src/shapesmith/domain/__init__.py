"""Domain models for shapesmith.

This module contains the value types shared by the path builder, the
composer and the canvas adapter. All models are:

- Immutable (frozen dataclasses), except the PathBuilder helper
- Independent of pycairo, Pillow drawing and fontTools details

Key classes:
- Point, Size, Rect: Geometry in the y-down image space
- Color: RGBA color
- Path, SubPath, PathBuilder: Vector geometry
- ShapeKind, BorderSide, Corner: Shape selection
- ShapeRequest: Everything needed for one generation
- PixelBuffer: The rasterized result
"""

from shapesmith.domain.buffer import PixelBuffer
from shapesmith.domain.color import Color, ColorLike
from shapesmith.domain.geometry import Point, Rect, Size
from shapesmith.domain.path import (
    Arc,
    ClosePath,
    CurveTo,
    FillRule,
    LineCap,
    LineJoin,
    LineTo,
    MoveTo,
    Path,
    PathBuilder,
    Segment,
    SubPath,
)
from shapesmith.domain.shape import (
    BASIC_KINDS,
    GLYPH_BASE_KINDS,
    BorderParams,
    BorderSide,
    Corner,
    GlyphParams,
    HalfRingParams,
    Orientation,
    RingParams,
    RoundedCornersParams,
    ShapeKind,
    ShapeParams,
    ShapeRequest,
    StarParams,
    StripeParams,
)

__all__: list[str] = [
    # Enums
    "BorderSide",
    "Corner",
    "FillRule",
    "LineCap",
    "LineJoin",
    "Orientation",
    "ShapeKind",
    # Geometry
    "Point",
    "Rect",
    "Size",
    "Color",
    "ColorLike",
    # Paths
    "Arc",
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "Path",
    "PathBuilder",
    "Segment",
    "SubPath",
    # Shapes
    "BASIC_KINDS",
    "GLYPH_BASE_KINDS",
    "BorderParams",
    "GlyphParams",
    "HalfRingParams",
    "RingParams",
    "RoundedCornersParams",
    "ShapeParams",
    "ShapeRequest",
    "StarParams",
    "StripeParams",
    # Output
    "PixelBuffer",
]
