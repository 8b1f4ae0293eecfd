"""Vector path representation.

A Path is an ordered sequence of sub-paths, each a sequence of segments:
- MoveTo: start a new sub-path at a point
- LineTo: straight line to a point
- CurveTo: cubic Bezier curve to a point
- Arc: circular arc around a center (connected to the current point by a line)
- ClosePath: close the current sub-path

Paths are immutable once built. PathBuilder is the mutable helper used to
assemble them.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from shapesmith.domain.geometry import Point, Rect


class FillRule(Enum):
    """Rule deciding which regions of a path are inside.

    - NON_ZERO: inside if the winding number is not zero
    - EVEN_ODD: inside if a ray crosses the boundary an odd number of times
    """

    NON_ZERO = auto()
    EVEN_ODD = auto()


class LineCap(Enum):
    """Shape of stroke end points."""

    BUTT = auto()
    ROUND = auto()
    SQUARE = auto()


class LineJoin(Enum):
    """Shape of stroke corners."""

    MITER = auto()
    ROUND = auto()
    BEVEL = auto()


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    point: Point


@dataclass(frozen=True, slots=True)
class CurveTo:
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Arc:
    """Circular arc.

    Angles are in radians measured from the positive x axis. In the y-down
    image space, clockwise arcs sweep with increasing angle. The sweep never
    exceeds one full turn and runs from start_angle towards end_angle in the
    arc's direction, so a full clockwise circle goes from 0 to 2*pi and a full
    counter-clockwise one from 2*pi to 0.

    Attributes:
        center: Arc center
        radius: Arc radius
        start_angle: Angle of the arc start point
        end_angle: Angle of the arc end point
        clockwise: Sweep direction as seen on screen
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool

    @property
    def start_point(self) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(self.start_angle),
            self.center.y + self.radius * math.sin(self.start_angle),
        )

    @property
    def end_point(self) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(self.end_angle),
            self.center.y + self.radius * math.sin(self.end_angle),
        )


@dataclass(frozen=True, slots=True)
class ClosePath:
    pass


Segment = Union[MoveTo, LineTo, CurveTo, Arc, ClosePath]


def _segment_points(segment: Segment) -> tuple[Point, ...]:
    """Points that bound a segment (control points included)."""
    if isinstance(segment, (MoveTo, LineTo)):
        return (segment.point,)
    if isinstance(segment, CurveTo):
        return (segment.control1, segment.control2, segment.end)
    if isinstance(segment, Arc):
        c, r = segment.center, abs(segment.radius)
        return (Point(c.x - r, c.y - r), Point(c.x + r, c.y + r))
    return ()


def _translate_segment(segment: Segment, dx: float, dy: float) -> Segment:
    if isinstance(segment, MoveTo):
        return MoveTo(segment.point.offset(dx, dy))
    if isinstance(segment, LineTo):
        return LineTo(segment.point.offset(dx, dy))
    if isinstance(segment, CurveTo):
        return CurveTo(
            segment.control1.offset(dx, dy),
            segment.control2.offset(dx, dy),
            segment.end.offset(dx, dy),
        )
    if isinstance(segment, Arc):
        return Arc(
            segment.center.offset(dx, dy),
            segment.radius,
            segment.start_angle,
            segment.end_angle,
            segment.clockwise,
        )
    return segment


@dataclass(frozen=True)
class SubPath:
    """A connected run of segments."""

    segments: tuple[Segment, ...]

    @property
    def closed(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], ClosePath)


@dataclass(frozen=True)
class Path:
    """An immutable ordered sequence of sub-paths.

    Attributes:
        subpaths: Sub-paths in drawing order
    """

    subpaths: tuple[SubPath, ...] = ()

    @classmethod
    def concat(cls, *paths: "Path") -> "Path":
        """Join several paths into one, keeping sub-path order."""
        return cls(tuple(sub for path in paths for sub in path.subpaths))

    def is_empty(self) -> bool:
        """Check if the path has no drawable segments."""
        return not any(sub.segments for sub in self.subpaths)

    def iter_segments(self) -> Iterator[Segment]:
        """Yield every segment of every sub-path in order."""
        for sub in self.subpaths:
            yield from sub.segments

    def iter_points(self) -> Iterator[Point]:
        """Yield every point (including curve controls and arc extents)."""
        for segment in self.iter_segments():
            yield from _segment_points(segment)

    def is_finite(self) -> bool:
        """Check that no coordinate or radius is NaN or infinite."""
        for segment in self.iter_segments():
            if isinstance(segment, Arc):
                values = (segment.radius, segment.start_angle, segment.end_angle)
                if not all(math.isfinite(v) for v in values):
                    return False
            for point in _segment_points(segment):
                if not (math.isfinite(point.x) and math.isfinite(point.y)):
                    return False
        return True

    def bounds(self) -> Rect | None:
        """Calculate the bounding box of all path points.

        Like most rasterizers' cheap bounding box, curve control points are
        included, so the box may be slightly larger than the painted area.

        Returns:
            Bounding rectangle, or None for an empty path
        """
        points = list(self.iter_points())
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def translated(self, dx: float, dy: float) -> "Path":
        """Return a copy of the path moved by (dx, dy)."""
        return Path(
            tuple(
                SubPath(tuple(_translate_segment(s, dx, dy) for s in sub.segments))
                for sub in self.subpaths
            )
        )


class PathBuilder:
    """Mutable helper that assembles a Path segment by segment.

    Example:
        builder = PathBuilder()
        builder.move_to(0, 0)
        builder.line_to(10, 0)
        builder.close_path()
        path = builder.build()
    """

    def __init__(self) -> None:
        self._subpaths: list[SubPath] = []
        self._current: list[Segment] = []

    def _flush(self) -> None:
        if self._current:
            self._subpaths.append(SubPath(tuple(self._current)))
            self._current = []

    def move_to(self, x: float, y: float) -> "PathBuilder":
        """Start a new sub-path at (x, y)."""
        self._flush()
        self._current.append(MoveTo(Point(x, y)))
        return self

    def line_to(self, x: float, y: float) -> "PathBuilder":
        """Add a straight line to (x, y)."""
        self._current.append(LineTo(Point(x, y)))
        return self

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> "PathBuilder":
        """Add a cubic Bezier curve ending at (x, y)."""
        self._current.append(CurveTo(Point(x1, y1), Point(x2, y2), Point(x, y)))
        return self

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> "PathBuilder":
        """Add a circular arc to the current sub-path.

        If a sub-path is open, a straight line joins its current point to
        the arc start.
        """
        self._current.append(Arc(center, radius, start_angle, end_angle, clockwise))
        return self

    def close_path(self) -> "PathBuilder":
        """Close the current sub-path."""
        if self._current:
            self._current.append(ClosePath())
            self._flush()
        return self

    def append(self, path: Path) -> "PathBuilder":
        """Append all sub-paths of an existing path."""
        self._flush()
        self._subpaths.extend(path.subpaths)
        return self

    def build(self) -> Path:
        """Finish and return the immutable Path."""
        self._flush()
        return Path(tuple(self._subpaths))
