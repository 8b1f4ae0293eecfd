"""Path construction for every supported shape.

Each function turns shape parameters into a Path in the y-down image space
whose origin is the top-left corner of the canvas. The functions are pure:
no colors, no rendering, no validation beyond what the geometry itself needs
(callers run shapesmith.core.validation first).
"""

import math

from shapesmith.domain import (
    BorderSide,
    Corner,
    Orientation,
    Path,
    PathBuilder,
    Point,
    Rect,
    ShapeKind,
    Size,
)

# Control point distance for approximating a quarter ellipse with a cubic Bezier
KAPPA = 0.5522847498307936

# Stripes run at 45 degrees: tan(45) == 1, sin(45) == sqrt(2) / 2
STRIPE_SLOPE = 1.0
STRIPE_SIN = math.sqrt(2.0) / 2.0


def rectangle_path(rect: Rect) -> Path:
    """Closed outline of a rectangle, clockwise on screen from the top-left corner."""
    builder = PathBuilder()
    builder.move_to(rect.x, rect.y)
    builder.line_to(rect.max_x, rect.y)
    builder.line_to(rect.max_x, rect.max_y)
    builder.line_to(rect.x, rect.max_y)
    builder.close_path()
    return builder.build()


def ellipse_path(rect: Rect) -> Path:
    """Ellipse inscribed in a rectangle, built from four cubic Bezier quadrants.

    Args:
        rect: Bounding rectangle of the ellipse

    Returns:
        Closed path starting at the rightmost point
    """
    cx, cy = rect.center.x, rect.center.y
    rx, ry = rect.width / 2.0, rect.height / 2.0
    ox, oy = rx * KAPPA, ry * KAPPA

    builder = PathBuilder()
    builder.move_to(cx + rx, cy)
    builder.curve_to(cx + rx, cy + oy, cx + ox, cy + ry, cx, cy + ry)
    builder.curve_to(cx - ox, cy + ry, cx - rx, cy + oy, cx - rx, cy)
    builder.curve_to(cx - rx, cy - oy, cx - ox, cy - ry, cx, cy - ry)
    builder.curve_to(cx + ox, cy - ry, cx + rx, cy - oy, cx + rx, cy)
    builder.close_path()
    return builder.build()


def circle_with_bar_path(size: Size, bar_height: float = 2.0) -> Path:
    """Circle with a thin horizontal bar, both vertically centered.

    The circle has a diameter of floor(min(w, h) / 2) and starts at half that
    value on the x axis. The bar has the same x-origin and width as the
    circle, so it overlaps the circle rather than sitting to its right.

    Args:
        size: Canvas size
        bar_height: Height of the bar

    Returns:
        Path with the circle and bar sub-paths (fill with NON_ZERO)
    """
    radius = math.floor(size.min_side / 2.0)
    x_origin = radius / 2.0

    circle = Rect(x_origin, (size.height - radius) / 2.0, radius, radius)
    bar = Rect(x_origin, (size.height - bar_height) / 2.0, radius, bar_height)
    return Path.concat(ellipse_path(circle), rectangle_path(bar))


def stripe_count(width: float, height: float, line_width: float, gap: float) -> int:
    """Number of stripe steps needed to cover a canvas with 45 degree lines.

    Lines are drawn for every index from 0 to the returned value inclusive,
    so the number of stroked lines is stripe_count(...) + 1.

    Args:
        width: Canvas width
        height: Canvas height
        line_width: Stroke width of a stripe
        gap: Space between stripes

    Returns:
        Highest stripe index
    """
    x_offset = STRIPE_SLOPE * height
    return int(math.ceil(width + x_offset) / (line_width + gap))


def stripes_path(size: Size, line_width: float, gap: float, kind: ShapeKind) -> Path:
    """Family of parallel 45 degree lines covering the whole canvas.

    Each line spans the canvas height plus a margin of half the line width
    projected on the diagonal, so stroke ends never leave uncovered gaps at
    the top or bottom edge. Lines start left of the canvas so the left edge
    is covered as well.

    STRIPES_RIGHT lines run from top-left to bottom-right on screen;
    STRIPES_LEFT lines are their mirror image.

    Args:
        size: Canvas size
        line_width: Stroke width of a stripe
        gap: Space between stripes
        kind: STRIPES_RIGHT or STRIPES_LEFT

    Returns:
        Path with one open sub-path per line (stroke, do not fill)
    """
    x_offset = STRIPE_SLOPE * size.height
    margin = line_width / 2.0 * STRIPE_SIN
    min_y = -margin
    max_y = size.height + margin
    step = line_width + gap

    builder = PathBuilder()
    for index in range(stripe_count(size.width, size.height, line_width, gap) + 1):
        x = index * step
        # y grows downward, so RIGHT descends to the right on screen
        if kind == ShapeKind.STRIPES_RIGHT:
            builder.move_to(x - x_offset - margin, min_y)
            builder.line_to(x + margin, max_y)
        else:
            builder.move_to(x + margin, min_y)
            builder.line_to(x - x_offset - margin, max_y)
    return builder.build()


def bordered_rectangle_width(size: Size) -> float:
    """Stroke width of the bordered rectangle.

    The width is twice the shorter side, so the centered stroke covers the
    whole canvas as a thick frame.
    """
    return size.min_side * 2.0


def border_path(size: Size, sides: BorderSide) -> Path:
    """Outline of selected rectangle sides.

    ALL_SIDES yields a single closed rectangle. Any other mask yields one
    independent segment per selected side: top left to right, right top to
    bottom, bottom right to left, left bottom to top.

    Args:
        size: Canvas size
        sides: Sides to draw

    Returns:
        Path to stroke (empty when no side is selected)
    """
    rect = Rect.from_size(size)
    if sides == BorderSide.ALL_SIDES:
        return rectangle_path(rect)

    w, h = size.width, size.height
    builder = PathBuilder()
    if sides & BorderSide.TOP:
        builder.move_to(0.0, 0.0)
        builder.line_to(w, 0.0)
    if sides & BorderSide.RIGHT:
        builder.move_to(w, 0.0)
        builder.line_to(w, h)
    if sides & BorderSide.BOTTOM:
        builder.move_to(w, h)
        builder.line_to(0.0, h)
    if sides & BorderSide.LEFT:
        builder.move_to(0.0, h)
        builder.line_to(0.0, 0.0)
    return builder.build()


def _corner_curve(builder: PathBuilder, start: Point, corner: Point, end: Point) -> None:
    """Round a corner with a quarter ellipse from start to end."""
    builder.curve_to(
        start.x + (corner.x - start.x) * KAPPA,
        start.y + (corner.y - start.y) * KAPPA,
        end.x + (corner.x - end.x) * KAPPA,
        end.y + (corner.y - end.y) * KAPPA,
        end.x,
        end.y,
    )


def rounded_rect_path(rect: Rect, corners: Corner, radii: Size) -> Path:
    """Rectangle outline with only the selected corners rounded.

    Radii are clamped to half the rectangle's width and height.

    Args:
        rect: Rectangle to outline
        corners: Corners that receive the radius
        radii: Horizontal and vertical corner radius

    Returns:
        Closed path, clockwise on screen
    """
    rx = max(0.0, min(radii.width, rect.width / 2.0))
    ry = max(0.0, min(radii.height, rect.height / 2.0))

    def r(corner: Corner) -> tuple[float, float]:
        return (rx, ry) if corners & corner else (0.0, 0.0)

    tl, tr = r(Corner.TOP_LEFT), r(Corner.TOP_RIGHT)
    br, bl = r(Corner.BOTTOM_RIGHT), r(Corner.BOTTOM_LEFT)
    x0, y0, x1, y1 = rect.x, rect.y, rect.max_x, rect.max_y

    builder = PathBuilder()
    builder.move_to(x0 + tl[0], y0)

    builder.line_to(x1 - tr[0], y0)
    if tr != (0.0, 0.0):
        _corner_curve(builder, Point(x1 - tr[0], y0), Point(x1, y0), Point(x1, y0 + tr[1]))

    builder.line_to(x1, y1 - br[1])
    if br != (0.0, 0.0):
        _corner_curve(builder, Point(x1, y1 - br[1]), Point(x1, y1), Point(x1 - br[0], y1))

    builder.line_to(x0 + bl[0], y1)
    if bl != (0.0, 0.0):
        _corner_curve(builder, Point(x0 + bl[0], y1), Point(x0, y1), Point(x0, y1 - bl[1]))

    builder.line_to(x0, y0 + tl[1])
    if tl != (0.0, 0.0):
        _corner_curve(builder, Point(x0, y0 + tl[1]), Point(x0, y0), Point(x0 + tl[0], y0))

    builder.close_path()
    return builder.build()


def ring_path(center: Point, outer_radius: float, inner_radius: float) -> Path:
    """Annulus as two concentric full circles traversed in opposite directions.

    Fill with EVEN_ODD: the inner disc is crossed twice and stays empty.
    """
    builder = PathBuilder()
    builder.add_arc(center, outer_radius, 0.0, 2 * math.pi, clockwise=True)
    builder.add_arc(center, inner_radius, 2 * math.pi, 0.0, clockwise=False)
    builder.close_path()
    return builder.build()


def half_ring_path(
    center: Point,
    outer_radius: float,
    inner_radius: float,
    orientation: Orientation = Orientation.NORTH,
) -> Path:
    """Upper (NORTH) or lower (SOUTH) half of a ring as one closed outline."""
    if orientation == Orientation.NORTH:
        d1, d2 = math.pi, 2 * math.pi
    else:
        d1, d2 = 0.0, math.pi

    builder = PathBuilder()
    builder.add_arc(center, inner_radius, d2, d1, clockwise=False)
    builder.add_arc(center, outer_radius, d1, d2, clockwise=True)
    builder.close_path()
    return builder.build()


def star_points(size: Size, beams: int, scale: float) -> list[Point]:
    """Vertices of a star polygon centered in the canvas.

    The outer radius is half the shorter canvas side and the inner radius is
    outer * scale. Vertices alternate outer/inner every pi / beams radians,
    beginning with the inner vertex one step before the first outer vertex.
    The figure is rotated by -90 degrees so the first outer vertex points up.

    Args:
        size: Canvas size
        beams: Number of star points (> 0)
        scale: Inner radius ratio (not 1.0)

    Returns:
        beams * 2 + 1 points; the first is the starting inner vertex
    """
    outer_radius = size.min_side / 2.0
    inner_radius = outer_radius * scale
    total = beams * 2
    step = 2 * math.pi / total
    cx, cy = size.width / 2.0, size.height / 2.0

    def polar(radius: float, angle: float) -> Point:
        rotated = angle - math.pi / 2
        return Point(cx + radius * math.cos(rotated), cy + radius * math.sin(rotated))

    points = [polar(inner_radius, -step)]
    for i in range(total):
        radius = inner_radius if i % 2 == 1 else outer_radius
        points.append(polar(radius, i * step))
    return points


def star_path(size: Size, beams: int, scale: float) -> Path:
    """Closed star polygon (fill with NON_ZERO)."""
    points = star_points(size, beams, scale)
    builder = PathBuilder()
    builder.move_to(points[0].x, points[0].y)
    for point in points[1:]:
        builder.line_to(point.x, point.y)
    builder.close_path()
    return builder.build()


def center_in(path: Path, size: Size) -> Path:
    """Move a path so its bounding box is centered in the canvas.

    The translation is (canvas - bbox_size) / 2 - bbox_origin.
    """
    bounds = path.bounds()
    if bounds is None:
        return path
    dx = (size.width - bounds.width) / 2.0 - bounds.x
    dy = (size.height - bounds.height) / 2.0 - bounds.y
    return path.translated(dx, dy)
