"""Public image generation functions.

Every generator returns a PixelBuffer, or None when the image cannot be
produced (zero size, invalid parameters, unparseable colors, no canvas).
The reason is logged. Use compose() for the raising variant.

Example:
    >>> from shapesmith import api
    >>> from shapesmith.domain import BorderSide, Size
    >>> api.generate_borders(Size(40, 20), BorderSide.TOP | BorderSide.BOTTOM, "black")
    >>> api.ring(Size(100, 100), outer_radius=30, inner_radius=10, color="#3366ff")
"""

import threading
from collections.abc import Sequence

import structlog

from shapesmith.config import ShapesmithSettings
from shapesmith.core import ImageComposer, validate_dash_pattern
from shapesmith.domain import (
    BASIC_KINDS,
    GLYPH_BASE_KINDS,
    BorderParams,
    BorderSide,
    Color,
    ColorLike,
    Corner,
    GlyphParams,
    HalfRingParams,
    Orientation,
    PixelBuffer,
    RingParams,
    RoundedCornersParams,
    ShapeKind,
    ShapeParams,
    ShapeRequest,
    Size,
    StarParams,
    StripeParams,
)
from shapesmith.exceptions import GenerationError, InvalidParameterError

logger = structlog.get_logger("shapesmith.api")

_composer: ImageComposer | None = None
_composer_lock = threading.Lock()


def default_composer() -> ImageComposer:
    """Composer used when a generator is called without one."""
    global _composer
    with _composer_lock:
        if _composer is None:
            _composer = ImageComposer()
        return _composer


def configure(settings: ShapesmithSettings) -> ImageComposer:
    """Replace the default composer with one built from settings.

    Args:
        settings: Settings for subsequent generator calls

    Returns:
        The new default composer
    """
    global _composer
    with _composer_lock:
        _composer = ImageComposer(settings)
        return _composer


def _parse_color(name: str, value: ColorLike | None) -> Color:
    if value is None:
        raise InvalidParameterError(name, "a color is required")
    try:
        return Color.parse(value)
    except (ValueError, TypeError) as e:
        raise InvalidParameterError(name, str(e)) from e


def _generate(
    composer: ImageComposer | None,
    size: Size,
    kind: ShapeKind,
    color: ColorLike,
    background: ColorLike | None = None,
    params: ShapeParams | None = None,
) -> PixelBuffer | None:
    """Build a request and compose it, turning failures into None."""
    composer = composer or default_composer()
    try:
        request = ShapeRequest(
            size=size,
            kind=kind,
            color=_parse_color("color", color),
            background=None if background is None else _parse_color("background", background),
            params=params,
        )
    except GenerationError as e:
        logger.warning("Invalid generation request", kind=kind.value, error=str(e))
        return None

    try:
        return composer.compose(request)
    except GenerationError:
        # Already logged by the composer
        return None


def compose(request: ShapeRequest, composer: ImageComposer | None = None) -> PixelBuffer:
    """Generate the image for a request, raising on failure.

    Raises:
        GenerationError: If the request is invalid or no canvas is available
    """
    return (composer or default_composer()).compose(request)


def generate_image(
    size: Size,
    color: ColorLike,
    background: ColorLike | None = None,
    line_width: float | None = None,
    gap: float | None = None,
    kind: ShapeKind = ShapeKind.RECTANGLE,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Generate one of the basic shapes.

    Args:
        size: Logical image size
        color: Shape color
        background: Background color; None gives a transparent image
        line_width: Stripe width (stripe kinds only, default from settings)
        gap: Distance between stripes (stripe kinds only, default from settings)
        kind: RECTANGLE, CIRCLE, CIRCLE_WITH_RIGHT_BAR, STRIPES_RIGHT,
            STRIPES_LEFT or BORDERED_RECTANGLE
        composer: Composer to use instead of the default one

    Returns:
        Generated image, or None on failure
    """
    if kind not in BASIC_KINDS:
        logger.warning("Shape kind needs its own generator", kind=kind.value)
        return None

    params = None
    if kind.is_stripes:
        defaults = (composer or default_composer()).settings.stripes
        params = StripeParams(
            line_width=defaults.line_width if line_width is None else line_width,
            gap=defaults.gap if gap is None else gap,
        )
    return _generate(composer, size, kind, color, background, params)


def generate_with_dash_pattern(
    size: Size,
    color: ColorLike,
    background: ColorLike | None = None,
    dash_pattern: Sequence[float] | None = None,
    kind: ShapeKind = ShapeKind.STRIPES_RIGHT,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Generate a basic shape, taking the stripe pattern as [line_width, gap].

    A pattern of None uses the default stripe settings; a pattern with fewer
    than two entries is rejected.
    """
    if dash_pattern is None:
        return generate_image(size, color, background, kind=kind, composer=composer)

    try:
        params = validate_dash_pattern(dash_pattern)
    except InvalidParameterError as e:
        logger.warning("Invalid dash pattern", kind=kind.value, error=str(e))
        return None
    return generate_image(
        size,
        color,
        background,
        line_width=params.line_width,
        gap=params.gap,
        kind=kind,
        composer=composer,
    )


def generate_borders(
    size: Size,
    borders: BorderSide,
    color: ColorLike,
    background: ColorLike | None = None,
    line_width: float | None = None,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Stroke a subset of the sides of the image rectangle.

    Args:
        size: Logical image size
        borders: Sides to draw; ALL_SIDES draws one closed outline
        color: Stroke color
        background: Background color; None gives a transparent image
        line_width: Stroke width (default from settings)
        composer: Composer to use instead of the default one

    Returns:
        Generated image, or None on failure
    """
    composer = composer or default_composer()
    if line_width is None:
        line_width = composer.settings.shapes.border_line_width
    params = BorderParams(sides=borders, line_width=line_width)
    return _generate(composer, size, ShapeKind.BORDER_SUBSET, color, background, params)


def generate_rounded_corners(
    size: Size,
    corners: Corner,
    corner_radii: Size,
    color: ColorLike,
    background: ColorLike | None = None,
    line_width: float | None = None,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Stroke a rectangle outline with the selected corners rounded.

    The outline is inset by half the line width so the stroke stays inside
    the image.
    """
    composer = composer or default_composer()
    if line_width is None:
        line_width = composer.settings.shapes.border_line_width
    params = RoundedCornersParams(corners=corners, radii=corner_radii, line_width=line_width)
    return _generate(composer, size, ShapeKind.ROUNDED_CORNERS, color, background, params)


def generate_ring(
    size: Size,
    outer_radius: float,
    inner_radius: float,
    color: ColorLike,
    background: ColorLike | None = None,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Fill the annulus between two concentric circles at the image center."""
    params = RingParams(outer_radius=outer_radius, inner_radius=inner_radius)
    return _generate(composer, size, ShapeKind.RING, color, background, params)


def generate_half_ring(
    size: Size,
    outer_radius: float,
    inner_radius: float,
    color: ColorLike,
    background: ColorLike | None = None,
    orientation: Orientation = Orientation.NORTH,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Fill the upper (NORTH) or lower (SOUTH) half of a ring."""
    params = HalfRingParams(
        outer_radius=outer_radius,
        inner_radius=inner_radius,
        orientation=orientation,
    )
    return _generate(composer, size, ShapeKind.HALF_RING, color, background, params)


def generate_star(
    size: Size,
    beams: int,
    scale: float,
    color: ColorLike,
    background: ColorLike | None = None,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Fill a star with the given number of beams.

    Args:
        size: Logical image size
        beams: Number of star points, at least 1
        scale: Inner radius as a fraction of the outer radius; 1.0 is rejected
        color: Fill color
        background: Background color; None gives a transparent image
        composer: Composer to use instead of the default one

    Returns:
        Generated image, or None on failure
    """
    params = StarParams(beams=beams, scale=scale)
    return _generate(composer, size, ShapeKind.STAR, color, background, params)


def generate_glyph(
    size: Size,
    character: str,
    font_name: str,
    font_size: float,
    color: ColorLike,
    background: ColorLike | None = None,
    kind: ShapeKind = ShapeKind.CIRCLE,
    *,
    composer: ImageComposer | None = None,
) -> PixelBuffer | None:
    """Cut a centered character out of a filled circle or rectangle.

    Args:
        size: Logical image size
        character: Character(s) to cut out
        font_name: Font file path, or file stem found in the font search paths
        font_size: Font size in logical units
        color: Color of the base shape
        background: Background color, also used for the character; None
            leaves both transparent
        kind: Base shape, CIRCLE or RECTANGLE
        composer: Composer to use instead of the default one

    Returns:
        Generated image, or None on failure
    """
    if kind not in GLYPH_BASE_KINDS:
        logger.warning("Unsupported glyph base shape", kind=kind.value)
        return None

    params = GlyphParams(text=character, font_name=font_name, font_size=font_size, base=kind)
    return _generate(composer, size, ShapeKind.GLYPH, color, background, params)


def circle(size: Size, color: ColorLike) -> PixelBuffer | None:
    """Filled circle (ellipse for non-square sizes) on a transparent image."""
    return generate_image(size, color, kind=ShapeKind.CIRCLE)


def rectangle(size: Size, color: ColorLike) -> PixelBuffer | None:
    """Image filled with a single color."""
    return generate_image(size, color, kind=ShapeKind.RECTANGLE)


def ring(
    size: Size, outer_radius: float, inner_radius: float, color: ColorLike
) -> PixelBuffer | None:
    return generate_ring(size, outer_radius, inner_radius, color)


def star(size: Size, beams: int, scale: float, color: ColorLike) -> PixelBuffer | None:
    return generate_star(size, beams, scale, color)
