"""Unit tests for rotation and scaling of finished images."""

import math

import pytest
from PIL import Image

from shapesmith.core.postprocess import crop_center, rotate, scale
from shapesmith.domain import PixelBuffer


@pytest.fixture
def half_red() -> PixelBuffer:
    """40x20 image, left half opaque red, right half transparent."""
    image = Image.new("RGBA", (40, 20), (0, 0, 0, 0))
    image.paste((255, 0, 0, 255), (0, 0, 20, 20))
    return PixelBuffer(image, scale=2.0)


class TestRotate:
    """Tests for rotate()."""

    def test_quarter_turn_swaps_dimensions(self, half_red: PixelBuffer) -> None:
        """Test that a 90 degree rotation expands to the rotated bounds."""
        rotated = rotate(half_red, math.pi / 2)
        assert rotated is not None
        assert (rotated.width, rotated.height) == (20, 40)
        assert rotated.scale == 2.0

    def test_positive_angle_is_clockwise(self, half_red: PixelBuffer) -> None:
        """Test that the left half ends up on top after a clockwise quarter turn."""
        rotated = rotate(half_red, math.pi / 2)
        assert rotated is not None
        assert rotated.pixel(10, 5)[3] == 255
        assert rotated.pixel(10, 35)[3] == 0

    def test_expands_canvas(self, half_red: PixelBuffer) -> None:
        """Test that arbitrary angles grow the canvas."""
        rotated = rotate(half_red, math.radians(30))
        assert rotated is not None
        assert rotated.width > 40
        assert rotated.height > 20

    def test_round_trip(self, half_red: PixelBuffer) -> None:
        """Test that rotating back restores the central content."""
        there = rotate(half_red, 0.5)
        assert there is not None
        back = rotate(there, -0.5)
        assert back is not None
        restored = crop_center(back, 40, 20)
        assert restored.pixel(10, 10)[3] > 200
        assert restored.pixel(30, 10)[3] < 55

    def test_non_finite_angle(self, half_red: PixelBuffer) -> None:
        """Test that NaN angles return None."""
        assert rotate(half_red, math.nan) is None


class TestScale:
    """Tests for scale()."""

    def test_scale_up(self, half_red: PixelBuffer) -> None:
        """Test that dimensions are multiplied by the factor."""
        scaled = scale(half_red, 2.5)
        assert scaled is not None
        assert (scaled.width, scaled.height) == (100, 50)

    def test_scale_down(self, half_red: PixelBuffer) -> None:
        """Test shrinking."""
        scaled = scale(half_red, 0.5)
        assert scaled is not None
        assert (scaled.width, scaled.height) == (20, 10)

    @pytest.mark.parametrize("factor", [0.0, -1.0, math.inf, 0.001])
    def test_unusable_factor(self, half_red: PixelBuffer, factor: float) -> None:
        """Test that factors giving no pixels return None."""
        assert scale(half_red, factor) is None
