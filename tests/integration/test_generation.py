"""Integration tests generating every shape through the public API."""

from pathlib import Path

import pytest
from PIL import Image

from shapesmith import api
from shapesmith.config import FontConfig, RenderConfig, ShapesmithSettings
from shapesmith.core import ImageComposer, rotate
from shapesmith.domain import BorderSide, Corner, Orientation, PixelBuffer, ShapeKind, Size
from shapesmith.io import ImageWriter

SIZE = Size(64, 48)


def _all_shapes(composer: ImageComposer, background: str | None) -> dict[str, PixelBuffer | None]:
    return {
        "rectangle": api.generate_image(SIZE, "teal", background, composer=composer),
        "circle": api.generate_image(
            SIZE, "teal", background, kind=ShapeKind.CIRCLE, composer=composer
        ),
        "circle_with_right_bar": api.generate_image(
            SIZE, "teal", background, kind=ShapeKind.CIRCLE_WITH_RIGHT_BAR, composer=composer
        ),
        "stripes_right": api.generate_with_dash_pattern(
            SIZE, "teal", background, [3, 2], ShapeKind.STRIPES_RIGHT, composer=composer
        ),
        "stripes_left": api.generate_image(
            SIZE, "teal", background, 1.0, 4.0, ShapeKind.STRIPES_LEFT, composer=composer
        ),
        "bordered_rectangle": api.generate_image(
            SIZE, "teal", background, kind=ShapeKind.BORDERED_RECTANGLE, composer=composer
        ),
        "border_subset": api.generate_borders(
            SIZE, BorderSide.LEFT | BorderSide.RIGHT, "teal", background, 3, composer=composer
        ),
        "rounded_corners": api.generate_rounded_corners(
            SIZE, Corner.ALL_CORNERS, Size(12, 6), "teal", background, 2, composer=composer
        ),
        "ring": api.generate_ring(SIZE, 20, 12, "teal", background, composer=composer),
        "half_ring": api.generate_half_ring(
            SIZE, 20, 12, "teal", background, Orientation.SOUTH, composer=composer
        ),
        "star": api.generate_star(SIZE, 7, 0.3, "teal", background, composer=composer),
        "glyph": api.generate_glyph(
            SIZE, "+", "TestSquare", 40, "teal", background, composer=composer
        ),
    }


class TestAllShapes:
    """Every shape renders at the requested size."""

    @pytest.mark.parametrize("background", [None, "ivory"])
    def test_every_shape(self, composer: ImageComposer, background: str | None) -> None:
        """Test dimensions and opacity of every shape."""
        results = _all_shapes(composer, background)
        assert set(results) == {kind.value for kind in ShapeKind}
        for name, buffer in results.items():
            assert buffer is not None, name
            assert (buffer.width, buffer.height) == (64, 48), name
            if background is not None:
                assert buffer.is_opaque(), name
        assert composer.stats.generated_count == len(ShapeKind)
        assert composer.stats.rejected_count == 0

    def test_every_shape_at_device_scale(self, font_dir: Path) -> None:
        """Test that device scale applies to every shape."""
        settings = ShapesmithSettings(
            render=RenderConfig(device_scale=1.5),
            fonts=FontConfig(search_paths=[font_dir]),
        )
        composer = ImageComposer(settings)
        for name, buffer in _all_shapes(composer, None).items():
            assert buffer is not None, name
            assert (buffer.width, buffer.height) == (96, 72), name

    def test_no_antialias_gives_binary_alpha(self, font_dir: Path) -> None:
        """Test that disabling anti-aliasing leaves only fully covered or empty pixels."""
        settings = ShapesmithSettings(
            render=RenderConfig(antialias=False),
            fonts=FontConfig(search_paths=[font_dir]),
        )
        buffer = api.generate_star(SIZE, 5, 0.5, "black", composer=ImageComposer(settings))
        assert buffer is not None
        alphas = set(buffer.image.getchannel("A").getdata())
        assert alphas <= {0, 255}


class TestWriteFiles:
    """Generated images survive a PNG round trip."""

    def test_write_and_reload(self, composer: ImageComposer, tmp_path: Path) -> None:
        """Test writing every shape to disk."""
        for name, buffer in _all_shapes(composer, None).items():
            assert buffer is not None
            path = ImageWriter(buffer, ImageWriter.get_default_path(name, tmp_path)).save()
            with Image.open(path) as image:
                assert image.size == (64, 48)
                assert image.getpixel((10, 10)) == buffer.pixel(10, 10)

    def test_rotated_star(self, tmp_path: Path) -> None:
        """Test rotating a generated image before writing it."""
        star = api.star(Size(50, 50), 5, 0.5, "gold")
        assert star is not None
        rotated = rotate(star, 0.3)
        assert rotated is not None
        path = ImageWriter(rotated, tmp_path / "rotated.png").save()
        with Image.open(path) as image:
            assert image.width > 50
