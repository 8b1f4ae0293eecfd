"""Input validation shared by all generation entry points.

Every check raises a GenerationError subclass before any canvas is acquired
or path is built, so invalid input never produces NaN geometry or a
half-drawn image.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

from shapesmith.config import ShapeConfig
from shapesmith.core.paths import STRIPE_SLOPE
from shapesmith.domain import (
    GLYPH_BASE_KINDS,
    BorderParams,
    GlyphParams,
    HalfRingParams,
    RingParams,
    RoundedCornersParams,
    ShapeKind,
    ShapeRequest,
    Size,
    StarParams,
    StripeParams,
)
from shapesmith.exceptions import InvalidParameterError, InvalidSizeError

# Parameter record each kind needs; kinds not listed take none
REQUIRED_PARAMS: dict[ShapeKind, type] = {
    ShapeKind.STRIPES_RIGHT: StripeParams,
    ShapeKind.STRIPES_LEFT: StripeParams,
    ShapeKind.BORDER_SUBSET: BorderParams,
    ShapeKind.ROUNDED_CORNERS: RoundedCornersParams,
    ShapeKind.RING: RingParams,
    ShapeKind.HALF_RING: HalfRingParams,
    ShapeKind.STAR: StarParams,
    ShapeKind.GLYPH: GlyphParams,
}

P = TypeVar("P")


def params_for(request: ShapeRequest, expected: type[P]) -> P:
    """Return the request's parameter record if it has the expected type.

    Raises:
        InvalidParameterError: If the record is missing or of another type
    """
    params = request.params
    if not isinstance(params, expected):
        raise InvalidParameterError(
            "params", f"{request.kind.value} requires {expected.__name__}"
        )
    return params


def validate_size(size: Size) -> None:
    """Reject sizes with a zero, negative or non-finite side.

    Raises:
        InvalidSizeError: If the size cannot hold any pixels
    """
    if size.is_empty() or not (math.isfinite(size.width) and math.isfinite(size.height)):
        raise InvalidSizeError(size.width, size.height)


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(name, f"must be a positive number, got {value}")


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidParameterError(name, f"must not be negative, got {value}")


def validate_stripes(params: StripeParams) -> None:
    """Check that a dash pattern has a positive stroke and no negative gap."""
    _require_positive("line_width", params.line_width)
    _require_non_negative("gap", params.gap)


def validate_stripe_count(size: Size, params: StripeParams, max_stripes: int) -> None:
    """Reject stripe periods so small that the canvas would need too many lines.

    Raises:
        InvalidParameterError: If more than max_stripes lines would be drawn
    """
    lines = math.ceil(size.width + STRIPE_SLOPE * size.height) / (params.line_width + params.gap)
    if not math.isfinite(lines) or lines > max_stripes:
        raise InvalidParameterError(
            "line_width",
            f"a period of {params.line_width + params.gap} needs more than {max_stripes} stripes",
        )


def validate_dash_pattern(pattern: Sequence[float]) -> StripeParams:
    """Turn a [line_width, gap, ...] dash pattern into stripe parameters.

    Extra entries are ignored.

    Raises:
        InvalidParameterError: If the pattern has fewer than two entries
    """
    if len(pattern) < 2:
        raise InvalidParameterError(
            "dash_pattern", f"needs at least 2 entries, got {len(pattern)}"
        )
    params = StripeParams(line_width=float(pattern[0]), gap=float(pattern[1]))
    validate_stripes(params)
    return params


def validate_star(params: StarParams, epsilon: float) -> None:
    """Reject stars without beams or with a scale that makes them a polygon.

    Raises:
        InvalidParameterError: If beams < 1 or |scale - 1| < epsilon
    """
    if params.beams <= 0:
        raise InvalidParameterError("beams", f"must be at least 1, got {params.beams}")
    if not math.isfinite(params.scale):
        raise InvalidParameterError("scale", f"must be finite, got {params.scale}")
    if abs(params.scale - 1.0) < epsilon:
        raise InvalidParameterError("scale", "a scale of 1.0 produces a degenerate star")


def validate_rounded_corners(params: RoundedCornersParams) -> None:
    """Check stroke width and corner radii."""
    _require_positive("line_width", params.line_width)
    _require_non_negative("corner_radii.width", params.radii.width)
    _require_non_negative("corner_radii.height", params.radii.height)


def validate_request(request: ShapeRequest, config: ShapeConfig) -> None:
    """Run every check that applies to a request.

    Args:
        request: The generation request
        config: Shape constants (star epsilon, stripe limit)

    Raises:
        InvalidSizeError: For zero-sized canvases
        InvalidParameterError: For missing or out-of-range parameters
    """
    validate_size(request.size)

    expected = REQUIRED_PARAMS.get(request.kind)
    if expected is not None:
        params_for(request, expected)

    params = request.params
    if isinstance(params, StripeParams):
        validate_stripes(params)
        validate_stripe_count(request.size, params, config.max_stripes)
    elif isinstance(params, BorderParams):
        _require_positive("line_width", params.line_width)
    elif isinstance(params, RoundedCornersParams):
        validate_rounded_corners(params)
    elif isinstance(params, (RingParams, HalfRingParams)):
        _require_non_negative("outer_radius", params.outer_radius)
        _require_non_negative("inner_radius", params.inner_radius)
    elif isinstance(params, StarParams):
        validate_star(params, config.star_scale_epsilon)
    elif isinstance(params, GlyphParams):
        if params.base not in GLYPH_BASE_KINDS:
            raise InvalidParameterError(
                "kind", f"glyphs can only be cut out of a rectangle or circle, not {params.base.value}"
            )
        _require_positive("font_size", params.font_size)
