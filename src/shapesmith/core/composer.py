"""Image composition: from a ShapeRequest to a finished PixelBuffer.

The composer validates the request, plans the drawing operations for the
requested shape (pure geometry from shapesmith.core.paths), and replays them
on a scoped canvas:

1. Reject zero sizes and invalid shape parameters
2. Open an opaque canvas if a background is given, a transparent one otherwise
3. Paint the background
4. Fill or stroke the shape paths with the foreground color
5. Extract the buffer; the canvas is released on every exit path
"""

import time
from dataclasses import dataclass
from enum import Enum, auto

import structlog

from shapesmith.config import ShapesmithSettings, get_default_settings
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
    stripes_path,
)
from shapesmith.core.validation import params_for, validate_request
from shapesmith.domain import (
    BorderParams,
    BorderSide,
    Color,
    FillRule,
    GlyphParams,
    HalfRingParams,
    LineCap,
    LineJoin,
    Path,
    PixelBuffer,
    Rect,
    RingParams,
    RoundedCornersParams,
    ShapeKind,
    ShapeRequest,
    StarParams,
    StripeParams,
)
from shapesmith.exceptions import FontLoadError, GenerationError, InvalidParameterError
from shapesmith.io import Canvas, GlyphOutlineProvider, open_canvas
from shapesmith.utils import GenerationLogger, GenerationStats


class PaintMode(Enum):
    """How a drawing operation puts its path on the canvas."""

    FILL = auto()
    STROKE = auto()
    CLEAR = auto()


@dataclass(frozen=True)
class DrawOp:
    """One fill, stroke or clear of a path.

    Attributes:
        path: Geometry to paint
        mode: Fill, stroke, or clear to transparent
        color: Paint color (unused for CLEAR)
        rule: Fill rule for FILL and CLEAR
        line_width: Stroke width for STROKE
        cap: Line cap for STROKE
        join: Line join for STROKE
    """

    path: Path
    mode: PaintMode
    color: Color | None = None
    rule: FillRule = FillRule.NON_ZERO
    line_width: float = 1.0
    cap: LineCap = LineCap.BUTT
    join: LineJoin = LineJoin.MITER


class ImageComposer:
    """Generates images for shape requests.

    The composer keeps only settings and collaborators; every call opens its
    own canvas, so one composer can be shared between threads.

    Example:
        composer = ImageComposer()
        buffer = composer.compose(
            ShapeRequest(Size(100, 100), ShapeKind.STAR, Color.parse("gold"),
                         params=StarParams(beams=5, scale=0.5))
        )
    """

    def __init__(
        self,
        settings: ShapesmithSettings | None = None,
        glyph_provider: GlyphOutlineProvider | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            settings: Application settings (defaults if None)
            glyph_provider: Font service for GLYPH requests
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or get_default_settings()
        self.glyph_provider = glyph_provider or GlyphOutlineProvider(
            self.settings.fonts.search_paths
        )
        self.logger = logger or structlog.get_logger("shapesmith.composer")
        self.generation_logger = GenerationLogger(self.logger)

    def compose(self, request: ShapeRequest) -> PixelBuffer:
        """Generate the image for a request.

        Args:
            request: Shape, size, colors and parameters

        Returns:
            The rasterized image, sized in device pixels

        Raises:
            InvalidSizeError: If the size has a zero side
            InvalidParameterError: If shape parameters are invalid
            RenderingUnavailableError: If no canvas can be allocated
        """
        kind = request.kind.value
        start_time = time.perf_counter()

        try:
            validate_request(request, self.settings.shapes)
            self.generation_logger.log_start(
                kind, request.size.width, request.size.height, request.opaque
            )
            ops = self.plan(request)

            render = self.settings.render
            with open_canvas(
                request.size,
                opaque=request.opaque,
                scale=render.device_scale,
                antialias=render.antialias,
            ) as canvas:
                if request.background is not None:
                    canvas.fill_background(request.background)
                for op in ops:
                    self._paint(canvas, op)
                buffer = canvas.extract_buffer()
        except GenerationError as e:
            self.generation_logger.log_rejected(kind, e)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.generation_logger.log_complete(kind, buffer.width, buffer.height, duration_ms)
        return buffer

    def plan(self, request: ShapeRequest) -> list[DrawOp]:
        """Build the drawing operations for a validated request.

        Args:
            request: A request that passed validate_request()

        Returns:
            Operations to replay on the canvas, in order

        Raises:
            InvalidParameterError: If the parameter record does not match the kind,
                the geometry is not finite or the kind is unknown
        """
        size = request.size
        color = request.color
        rect = Rect.from_size(size)

        if request.kind == ShapeKind.RECTANGLE:
            ops = [DrawOp(rectangle_path(rect), PaintMode.FILL, color)]

        elif request.kind == ShapeKind.CIRCLE:
            ops = [DrawOp(ellipse_path(rect), PaintMode.FILL, color)]

        elif request.kind == ShapeKind.CIRCLE_WITH_RIGHT_BAR:
            path = circle_with_bar_path(size, self.settings.shapes.bar_height)
            ops = [DrawOp(path, PaintMode.FILL, color)]

        elif request.kind.is_stripes:
            stripes = params_for(request, StripeParams)
            path = stripes_path(size, stripes.line_width, stripes.gap, request.kind)
            ops = [
                DrawOp(path, PaintMode.STROKE, color, line_width=stripes.line_width)
            ]

        elif request.kind == ShapeKind.BORDERED_RECTANGLE:
            ops = [
                DrawOp(
                    rectangle_path(rect),
                    PaintMode.STROKE,
                    color,
                    line_width=bordered_rectangle_width(size),
                )
            ]

        elif request.kind == ShapeKind.BORDER_SUBSET:
            border = params_for(request, BorderParams)
            join = LineJoin.MITER if border.sides == BorderSide.ALL_SIDES else LineJoin.ROUND
            ops = [
                DrawOp(
                    border_path(size, border.sides),
                    PaintMode.STROKE,
                    color,
                    line_width=border.line_width,
                    join=join,
                )
            ]

        elif request.kind == ShapeKind.ROUNDED_CORNERS:
            rounded = params_for(request, RoundedCornersParams)
            inset = rounded.line_width / 2.0
            path = rounded_rect_path(rect.inset(inset, inset), rounded.corners, rounded.radii)
            ops = [
                DrawOp(
                    path,
                    PaintMode.STROKE,
                    color,
                    line_width=rounded.line_width,
                    cap=LineCap.SQUARE,
                )
            ]

        elif request.kind == ShapeKind.RING:
            ring = params_for(request, RingParams)
            path = ring_path(rect.center, ring.outer_radius, ring.inner_radius)
            ops = [DrawOp(path, PaintMode.FILL, color, rule=FillRule.EVEN_ODD)]

        elif request.kind == ShapeKind.HALF_RING:
            half_ring = params_for(request, HalfRingParams)
            path = half_ring_path(
                rect.center, half_ring.outer_radius, half_ring.inner_radius, half_ring.orientation
            )
            ops = [DrawOp(path, PaintMode.FILL, color)]

        elif request.kind == ShapeKind.STAR:
            star = params_for(request, StarParams)
            ops = [DrawOp(star_path(size, star.beams, star.scale), PaintMode.FILL, color)]

        elif request.kind == ShapeKind.GLYPH:
            ops = self._plan_glyph(request, params_for(request, GlyphParams))

        else:
            raise InvalidParameterError("kind", f"unsupported shape kind {request.kind!r}")

        for op in ops:
            if not op.path.is_finite():
                raise InvalidParameterError(
                    "geometry", f"{request.kind.value} produced non-finite coordinates"
                )
            self.generation_logger.log_path(
                request.kind.value,
                len(op.path.subpaths),
                sum(len(sub.segments) for sub in op.path.subpaths),
            )
        return ops

    def _plan_glyph(self, request: ShapeRequest, params: GlyphParams) -> list[DrawOp]:
        """Base shape with the centered glyph knocked out of it.

        The glyph is painted in the background color on opaque canvases and
        cleared to transparent otherwise.
        """
        rect = Rect.from_size(request.size)
        if params.base == ShapeKind.RECTANGLE:
            base_path = rectangle_path(rect)
        else:
            base_path = ellipse_path(rect)
        ops = [DrawOp(base_path, PaintMode.FILL, request.color)]

        try:
            outline = self.glyph_provider.outline_path(
                params.text, params.font_name, params.font_size
            )
        except FontLoadError as e:
            raise InvalidParameterError("font_name", e.reason) from e

        if outline.is_empty():
            self.logger.warning(
                "Glyph outline is empty, drawing base shape only",
                text=params.text,
                font_name=params.font_name,
            )
            return ops

        glyph_path = center_in(outline, request.size)
        if request.background is not None:
            ops.append(DrawOp(glyph_path, PaintMode.FILL, request.background))
        else:
            ops.append(DrawOp(glyph_path, PaintMode.CLEAR))
        return ops

    @staticmethod
    def _paint(canvas: Canvas, op: DrawOp) -> None:
        if op.mode == PaintMode.CLEAR:
            canvas.clear_path(op.path, op.rule)
            return

        if op.color is None:
            raise InvalidParameterError("color", f"{op.mode.name.lower()} needs a paint color")
        if op.mode == PaintMode.FILL:
            canvas.fill_path(op.path, op.color, op.rule)
        else:
            canvas.stroke_path(op.path, op.color, op.line_width, op.cap, op.join)

    @property
    def stats(self) -> GenerationStats:
        """Generation statistics of this composer."""
        return self.generation_logger.stats
