"""Shared fixtures for shapesmith tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from shapesmith.config import FontConfig, ShapesmithSettings
from shapesmith.core import ImageComposer

UNITS_PER_EM = 1000
ADVANCE_WIDTH = 600


def _square_glyph(x_min: int, y_min: int, x_max: int, y_max: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Write a TrueType font whose '+' is a 400x400 unit square.

    The square spans 100..500 on both axes, so at a font size of 100 the
    outline is 40x40 logical units.
    """
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "plus"])
    fb.setupCharacterMap({ord("+"): "plus"})
    fb.setupGlyf(
        {
            ".notdef": TTGlyphPen(None).glyph(),
            "plus": _square_glyph(100, 100, 500, 500),
        }
    )
    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {
            name: (ADVANCE_WIDTH, getattr(glyph_table[name], "xMin", 0))
            for name in fb.font.getGlyphOrder()
        }
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Shapesmith Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """Directory containing TestSquare.ttf."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    build_test_font(directory / "TestSquare.ttf")
    return directory


@pytest.fixture
def font_path(font_dir: Path) -> Path:
    return font_dir / "TestSquare.ttf"


@pytest.fixture
def settings(font_dir: Path) -> ShapesmithSettings:
    """Default settings with the test font directory on the search path."""
    return ShapesmithSettings(fonts=FontConfig(search_paths=[font_dir]))


@pytest.fixture
def composer(settings: ShapesmithSettings):
    composer = ImageComposer(settings)
    yield composer
    composer.glyph_provider.close()
