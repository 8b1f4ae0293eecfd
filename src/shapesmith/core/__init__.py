"""Core algorithms for shapesmith.

This module contains:

- Path construction for every shape (stripes, stars, rings, rounded rects)
- Input validation shared by all entry points
- Image composition (canvas lifecycle, fill and stroke dispatch)
- Post-processing (rotation, scaling)

The path functions are pure and deterministic; the composer keeps no state
between calls besides its settings and statistics.

Key functions:
- stripe_count: Number of 45 degree stripes covering a canvas
- stripes_path, star_path, ring_path, half_ring_path, rounded_rect_path,
  border_path, circle_with_bar_path: Shape geometry
- rotate, scale: Post-processing of finished images

Key classes:
- ImageComposer: Turns a ShapeRequest into a PixelBuffer
"""

from shapesmith.core.composer import DrawOp, ImageComposer, PaintMode
from shapesmith.core.paths import (
    border_path,
    bordered_rectangle_width,
    center_in,
    circle_with_bar_path,
    ellipse_path,
    half_ring_path,
    rectangle_path,
    ring_path,
    rounded_rect_path,
    star_path,
    star_points,
    stripe_count,
    stripes_path,
)
from shapesmith.core.postprocess import crop_center, rotate, scale
from shapesmith.core.validation import validate_dash_pattern, validate_request

__all__ = [
    # Composer
    "DrawOp",
    "ImageComposer",
    "PaintMode",
    # Path functions
    "border_path",
    "bordered_rectangle_width",
    "center_in",
    "circle_with_bar_path",
    "ellipse_path",
    "half_ring_path",
    "rectangle_path",
    "ring_path",
    "rounded_rect_path",
    "star_path",
    "star_points",
    "stripe_count",
    "stripes_path",
    # Post-processing
    "crop_center",
    "rotate",
    "scale",
    # Validation
    "validate_dash_pattern",
    "validate_request",
]
