"""Tests for domain models to verify they work correctly."""

import math

import pytest
from PIL import Image

from shapesmith.domain import (
    Arc,
    BorderSide,
    ClosePath,
    Color,
    Corner,
    CurveTo,
    LineTo,
    MoveTo,
    Path,
    PathBuilder,
    PixelBuffer,
    Point,
    Rect,
    ShapeKind,
    ShapeRequest,
    Size,
    SubPath,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, 2.0).to_tuple() == (1.5, 2.0)

    def test_point_offset(self) -> None:
        """Test moving a point returns a new point."""
        p = Point(1.0, 2.0)
        assert p.offset(3.0, -1.0) == Point(4.0, 1.0)
        assert p == Point(1.0, 2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore


class TestSize:
    """Tests for Size class."""

    @pytest.mark.parametrize(
        "width,height,empty",
        [(0, 10, True), (10, 0, True), (-1, 10, True), (10, 10, False), (0.5, 0.5, False)],
    )
    def test_is_empty(self, width: float, height: float, empty: bool) -> None:
        """Test that a zero or negative side makes a size empty."""
        assert Size(width, height).is_empty() is empty

    def test_min_side(self) -> None:
        """Test the shorter side."""
        assert Size(40, 20).min_side == 20

    def test_parse_width_height(self) -> None:
        """Test parsing WIDTHxHEIGHT strings."""
        assert Size.parse("100x50") == Size(100.0, 50.0)
        assert Size.parse(" 12.5 X 8 ") == Size(12.5, 8.0)

    def test_parse_single_number_is_square(self) -> None:
        """Test that a single number gives a square."""
        assert Size.parse("32") == Size(32.0, 32.0)

    def test_parse_invalid(self) -> None:
        """Test that malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            Size.parse("1x2x3")
        with pytest.raises(ValueError):
            Size.parse("wide")


class TestRect:
    """Tests for Rect class."""

    def test_from_size(self) -> None:
        """Test rectangle covering a whole canvas."""
        rect = Rect.from_size(Size(40, 20))
        assert (rect.x, rect.y, rect.max_x, rect.max_y) == (0, 0, 40, 20)

    def test_center(self) -> None:
        """Test rectangle center."""
        assert Rect(10, 10, 20, 40).center == Point(20, 30)

    def test_inset(self) -> None:
        """Test shrinking a rectangle on all sides."""
        assert Rect(0, 0, 40, 20).inset(1, 2) == Rect(1, 2, 38, 16)

    def test_contains(self) -> None:
        """Test point containment including the border."""
        rect = Rect(0, 0, 10, 10)
        assert rect.contains(Point(10, 0))
        assert not rect.contains(Point(10.1, 5))


class TestColor:
    """Tests for Color class."""

    def test_parse_name(self) -> None:
        """Test parsing a named color."""
        assert Color.parse("red").to_rgba8() == (255, 0, 0, 255)

    def test_parse_hex_with_alpha(self) -> None:
        """Test parsing #rrggbbaa."""
        assert Color.parse("#00ff0080").to_rgba8() == (0, 255, 0, 128)

    def test_parse_tuple(self) -> None:
        """Test parsing 8-bit tuples."""
        assert Color.parse((0, 0, 255)) == Color(0.0, 0.0, 1.0, 1.0)
        assert Color.parse((0, 0, 255, 0)).alpha == 0.0

    def test_parse_color_passthrough(self) -> None:
        """Test that Color instances are returned unchanged."""
        color = Color(0.1, 0.2, 0.3)
        assert Color.parse(color) is color

    def test_parse_invalid(self) -> None:
        """Test that unknown color names raise ValueError."""
        with pytest.raises(ValueError):
            Color.parse("not-a-color")

    def test_component_out_of_range(self) -> None:
        """Test that components outside 0..1 are rejected."""
        with pytest.raises(ValueError, match="out of range"):
            Color(1.5, 0.0, 0.0)


class TestPath:
    """Tests for Path and PathBuilder."""

    def test_builder_splits_subpaths_on_move(self) -> None:
        """Test that every move_to starts a new sub-path."""
        path = PathBuilder().move_to(0, 0).line_to(1, 1).move_to(5, 5).line_to(6, 6).build()
        assert len(path.subpaths) == 2
        assert path.subpaths[1].segments[0] == MoveTo(Point(5, 5))

    def test_close_path_marks_subpath_closed(self) -> None:
        """Test that close_path ends a closed sub-path."""
        path = PathBuilder().move_to(0, 0).line_to(1, 0).line_to(1, 1).close_path().build()
        assert path.subpaths[0].closed
        assert isinstance(path.subpaths[0].segments[-1], ClosePath)

    def test_empty_path(self) -> None:
        """Test that a fresh path is empty and has no bounds."""
        path = PathBuilder().build()
        assert path.is_empty()
        assert path.bounds() is None

    def test_bounds_include_curve_controls(self) -> None:
        """Test that curve control points contribute to the bounding box."""
        path = PathBuilder().move_to(0, 0).curve_to(0, -10, 10, -10, 10, 0).build()
        assert path.bounds() == Rect(0, -10, 10, 10)

    def test_bounds_of_arc(self) -> None:
        """Test that arcs contribute their full circle extent."""
        path = PathBuilder().add_arc(Point(5, 5), 2, 0, math.pi, clockwise=True).build()
        assert path.bounds() == Rect(3, 3, 4, 4)

    def test_translated(self) -> None:
        """Test translating every segment type."""
        path = Path(
            (
                SubPath(
                    (
                        MoveTo(Point(0, 0)),
                        LineTo(Point(1, 0)),
                        CurveTo(Point(1, 1), Point(2, 2), Point(3, 3)),
                        Arc(Point(0, 0), 1, 0, math.pi, True),
                        ClosePath(),
                    )
                ),
            )
        )
        moved = path.translated(10, 20)
        segments = list(moved.iter_segments())
        assert segments[0] == MoveTo(Point(10, 20))
        assert segments[2] == CurveTo(Point(11, 21), Point(12, 22), Point(13, 23))
        assert segments[3].center == Point(10, 20)  # type: ignore[union-attr]
        assert segments[4] == ClosePath()

    def test_is_finite(self) -> None:
        """Test detection of NaN coordinates."""
        assert PathBuilder().move_to(0, 0).line_to(1, 1).build().is_finite()
        assert not PathBuilder().move_to(0, 0).line_to(math.nan, 1).build().is_finite()

    def test_concat_keeps_order(self) -> None:
        """Test joining paths."""
        a = PathBuilder().move_to(0, 0).line_to(1, 0).build()
        b = PathBuilder().move_to(5, 5).line_to(6, 5).build()
        assert Path.concat(a, b).subpaths == a.subpaths + b.subpaths

    def test_arc_end_points(self) -> None:
        """Test arc start and end points in y-down space."""
        arc = Arc(Point(0, 0), 10, 0, math.pi / 2, clockwise=True)
        assert arc.start_point == Point(10, 0)
        assert arc.end_point.x == pytest.approx(0)
        assert arc.end_point.y == pytest.approx(10)


class TestFlags:
    """Tests for BorderSide and Corner masks."""

    def test_border_side_values(self) -> None:
        """Test the bit values of single sides."""
        assert (BorderSide.TOP, BorderSide.LEFT, BorderSide.RIGHT, BorderSide.BOTTOM) == (
            1,
            2,
            4,
            8,
        )

    def test_all_sides_is_saturated_mask(self) -> None:
        """Test that ALL_SIDES differs from the union of the four sides."""
        union = BorderSide.TOP | BorderSide.LEFT | BorderSide.RIGHT | BorderSide.BOTTOM
        assert BorderSide.ALL_SIDES != union
        assert BorderSide.ALL_SIDES & union == union

    def test_all_corners(self) -> None:
        """Test that ALL_CORNERS contains every corner."""
        for corner in (Corner.TOP_LEFT, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT):
            assert Corner.ALL_CORNERS & corner


class TestShapeRequest:
    """Tests for ShapeRequest."""

    def test_opaque_with_background(self) -> None:
        """Test that a background makes the request opaque."""
        request = ShapeRequest(Size(10, 10), ShapeKind.CIRCLE, Color.parse("red"), Color.parse("white"))
        assert request.opaque

    def test_transparent_without_background(self) -> None:
        """Test that no background leaves the request transparent."""
        assert not ShapeRequest(Size(10, 10), ShapeKind.CIRCLE, Color.parse("red")).opaque

    def test_shape_kind_is_stripes(self) -> None:
        """Test stripe kind detection."""
        assert ShapeKind.STRIPES_LEFT.is_stripes
        assert not ShapeKind.STAR.is_stripes


class TestPixelBuffer:
    """Tests for PixelBuffer."""

    def test_logical_size(self) -> None:
        """Test logical size divides by the device scale."""
        buffer = PixelBuffer(Image.new("RGBA", (40, 20)), scale=2.0)
        assert buffer.logical_size == Size(20, 10)

    def test_is_opaque(self) -> None:
        """Test opacity detection from the alpha band."""
        assert PixelBuffer(Image.new("RGBA", (4, 4), (1, 2, 3, 255))).is_opaque()
        assert not PixelBuffer(Image.new("RGBA", (4, 4), (1, 2, 3, 0))).is_opaque()

    def test_to_png_bytes(self) -> None:
        """Test PNG encoding."""
        data = PixelBuffer(Image.new("RGBA", (4, 4))).to_png_bytes()
        assert data.startswith(b"\x89PNG")
