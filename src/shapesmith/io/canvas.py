"""Raster canvas backed by pycairo.

The canvas is the only place that talks to cairo. It is acquired through
the open_canvas() context manager, which guarantees the surface is finished
on every exit path, including validation failures raised inside the block.

Example:
    with open_canvas(Size(100, 100), opaque=False) as canvas:
        canvas.fill_path(path, Color.parse("red"), FillRule.EVEN_ODD)
        buffer = canvas.extract_buffer()
"""

import math
from collections.abc import Iterator
from contextlib import contextmanager

import cairo
from PIL import Image

from shapesmith.domain import (
    Arc,
    ClosePath,
    Color,
    CurveTo,
    FillRule,
    LineCap,
    LineJoin,
    LineTo,
    MoveTo,
    Path,
    PixelBuffer,
    Size,
)
from shapesmith.exceptions import RenderingUnavailableError

_FILL_RULES = {
    FillRule.NON_ZERO: cairo.FILL_RULE_WINDING,
    FillRule.EVEN_ODD: cairo.FILL_RULE_EVEN_ODD,
}

_LINE_CAPS = {
    LineCap.BUTT: cairo.LINE_CAP_BUTT,
    LineCap.ROUND: cairo.LINE_CAP_ROUND,
    LineCap.SQUARE: cairo.LINE_CAP_SQUARE,
}

_LINE_JOINS = {
    LineJoin.MITER: cairo.LINE_JOIN_MITER,
    LineJoin.ROUND: cairo.LINE_JOIN_ROUND,
    LineJoin.BEVEL: cairo.LINE_JOIN_BEVEL,
}


def pixel_dimensions(size: Size, scale: float) -> tuple[int, int]:
    """Device pixel dimensions of a logical size."""
    return math.ceil(size.width * scale), math.ceil(size.height * scale)


class Canvas:
    """Drawing surface for one generation.

    Do not construct directly; use open_canvas().
    """

    def __init__(
        self,
        surface: cairo.ImageSurface,
        size: Size,
        opaque: bool,
        scale: float,
        antialias: bool,
    ) -> None:
        self._surface = surface
        self._size = size
        self._opaque = opaque
        self._scale = scale
        self._ctx = cairo.Context(surface)
        self._ctx.scale(scale, scale)
        self._ctx.set_antialias(cairo.ANTIALIAS_BEST if antialias else cairo.ANTIALIAS_NONE)

    @property
    def size(self) -> Size:
        return self._size

    @property
    def opaque(self) -> bool:
        return self._opaque

    def _trace(self, path: Path) -> None:
        """Replay path segments onto the cairo context."""
        ctx = self._ctx
        ctx.new_path()
        for sub in path.subpaths:
            ctx.new_sub_path()
            for segment in sub.segments:
                if isinstance(segment, MoveTo):
                    ctx.move_to(segment.point.x, segment.point.y)
                elif isinstance(segment, LineTo):
                    ctx.line_to(segment.point.x, segment.point.y)
                elif isinstance(segment, CurveTo):
                    ctx.curve_to(
                        segment.control1.x,
                        segment.control1.y,
                        segment.control2.x,
                        segment.control2.y,
                        segment.end.x,
                        segment.end.y,
                    )
                elif isinstance(segment, Arc):
                    # cairo's positive angle direction is clockwise in y-down space
                    draw_arc = ctx.arc if segment.clockwise else ctx.arc_negative
                    draw_arc(
                        segment.center.x,
                        segment.center.y,
                        segment.radius,
                        segment.start_angle,
                        segment.end_angle,
                    )
                elif isinstance(segment, ClosePath):
                    ctx.close_path()

    def _set_color(self, color: Color) -> None:
        self._ctx.set_source_rgba(*color.to_tuple())

    def fill_background(self, color: Color) -> None:
        """Paint every pixel of the canvas, including partial edge pixels."""
        self._set_color(color)
        self._ctx.paint()

    def fill_path(self, path: Path, color: Color, rule: FillRule = FillRule.NON_ZERO) -> None:
        """Fill the inside of a path using the given fill rule."""
        self._set_color(color)
        self._ctx.set_fill_rule(_FILL_RULES[rule])
        self._trace(path)
        self._ctx.fill()

    def stroke_path(
        self,
        path: Path,
        color: Color,
        width: float,
        cap: LineCap = LineCap.BUTT,
        join: LineJoin = LineJoin.MITER,
    ) -> None:
        """Stroke the outline of a path."""
        self._set_color(color)
        self._ctx.set_line_width(width)
        self._ctx.set_line_cap(_LINE_CAPS[cap])
        self._ctx.set_line_join(_LINE_JOINS[join])
        self._trace(path)
        self._ctx.stroke()

    def clear_path(self, path: Path, rule: FillRule = FillRule.NON_ZERO) -> None:
        """Make the inside of a path fully transparent."""
        ctx = self._ctx
        ctx.save()
        try:
            ctx.set_operator(cairo.OPERATOR_CLEAR)
            ctx.set_fill_rule(_FILL_RULES[rule])
            self._trace(path)
            ctx.fill()
        finally:
            ctx.restore()

    def extract_buffer(self) -> PixelBuffer:
        """Copy the surface pixels into a Pillow RGBA image.

        Returns:
            PixelBuffer owning an independent copy of the pixels
        """
        surface = self._surface
        surface.flush()
        width, height = surface.get_width(), surface.get_height()
        stride = surface.get_stride()
        data = bytes(surface.get_data())

        # cairo stores native-endian 32-bit pixels: B, G, R, A/X bytes on little-endian hosts
        if self._opaque:
            image = Image.frombuffer("RGB", (width, height), data, "raw", "BGRX", stride, 1)
            image = image.convert("RGBA")
        else:
            image = Image.frombuffer("RGBA", (width, height), data, "raw", "BGRa", stride, 1)
        return PixelBuffer(image=image.copy(), scale=self._scale)


@contextmanager
def open_canvas(
    size: Size,
    opaque: bool,
    scale: float = 1.0,
    antialias: bool = True,
) -> Iterator[Canvas]:
    """Acquire a canvas for the duration of a with-block.

    Opaque canvases use a format without an alpha channel, so every pixel of
    the extracted buffer is fully opaque. Transparent canvases start with
    all pixels cleared.

    Args:
        size: Logical canvas size
        opaque: Whether the canvas has no alpha channel
        scale: Device pixels per logical unit
        antialias: Anti-alias fills and strokes

    Yields:
        Canvas ready for drawing

    Raises:
        RenderingUnavailableError: If the surface cannot be allocated
    """
    width, height = pixel_dimensions(size, scale)
    surface_format = cairo.FORMAT_RGB24 if opaque else cairo.FORMAT_ARGB32
    try:
        surface = cairo.ImageSurface(surface_format, width, height)
    except (cairo.Error, MemoryError) as e:
        raise RenderingUnavailableError(str(e)) from e

    try:
        yield Canvas(surface, size, opaque, scale, antialias)
    finally:
        surface.finish()
