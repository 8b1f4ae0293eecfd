"""End-to-end tests for the shapesmith command line."""

import logging
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from shapesmith import __version__
from shapesmith.cli.app import app, parse_flags
from shapesmith.domain import BorderSide, Corner

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    """Drop handlers added by the CLI so they do not outlive the runner streams."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


class TestParseFlags:
    """Tests for comma separated flag options."""

    def test_all_borders(self) -> None:
        """Test that 'all' selects the closed outline."""
        assert parse_flags("all", BorderSide) == BorderSide.ALL_SIDES

    def test_side_list(self) -> None:
        """Test combining sides."""
        assert parse_flags("top, bottom", BorderSide) == BorderSide.TOP | BorderSide.BOTTOM

    def test_corner_list(self) -> None:
        """Test combining corners."""
        assert parse_flags("top_left,bottom_right", Corner) == (
            Corner.TOP_LEFT | Corner.BOTTOM_RIGHT
        )

    def test_unknown_name(self) -> None:
        """Test that unknown names raise ValueError listing valid ones."""
        with pytest.raises(ValueError, match="valid: all, top"):
            parse_flags("middle", BorderSide)


class TestGenerateCommand:
    """Tests for 'shapesmith generate'."""

    def test_star(self, tmp_path: Path) -> None:
        """Test writing a star PNG."""
        output = tmp_path / "star.png"
        result = runner.invoke(
            app,
            ["generate", "star", "--size", "64x48", "--beams", "6", "--scale", "0.4",
             "-o", str(output), "-q"],
        )
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.size == (64, 48)
            assert image.mode == "RGBA"

    def test_success_summary(self, tmp_path: Path) -> None:
        """Test the rich summary in normal mode."""
        output = tmp_path / "ring.png"
        result = runner.invoke(
            app,
            ["generate", "ring", "--size", "40", "--outer", "15", "--inner", "5",
             "--background", "white", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "40x40 pixels" in result.output

    def test_default_output_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the shape name is used as the file name."""
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["generate", "circle", "-q"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "circle.png").exists()

    def test_device_scale_rotate_and_scale(self, tmp_path: Path) -> None:
        """Test post-processing options."""
        output = tmp_path / "bar.png"
        result = runner.invoke(
            app,
            ["generate", "rectangle", "--size", "20x10", "--device-scale", "2",
             "--rotate", "90", "--scale-factor", "0.5", "-o", str(output), "-q"],
        )
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.size == (10, 20)

    def test_borders_and_corners(self, tmp_path: Path) -> None:
        """Test flag list options."""
        for args in (
            ["border_subset", "--borders", "top,left"],
            ["rounded_corners", "--corners", "top_left", "--radius", "6x3"],
        ):
            output = tmp_path / f"{args[0]}.png"
            result = runner.invoke(app, ["generate", *args, "-o", str(output), "-q"])
            assert result.exit_code == 0, result.output
            assert output.exists()

    def test_glyph_with_font_dir(self, tmp_path: Path, font_dir: Path) -> None:
        """Test glyph generation with a font search directory."""
        output = tmp_path / "plus.png"
        result = runner.invoke(
            app,
            ["generate", "glyph", "--char", "+", "--font", "TestSquare",
             "--font-dir", str(font_dir), "--size", "100", "--font-size", "100",
             "-o", str(output), "-q"],
        )
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.getpixel((50, 50))[3] == 0
            assert image.getpixel((50, 15))[3] == 255

    def test_invalid_star_fails(self, tmp_path: Path) -> None:
        """Test that a degenerate star exits with code 1 and writes nothing."""
        output = tmp_path / "star.png"
        result = runner.invoke(
            app, ["generate", "star", "--scale", "1.0", "-o", str(output), "-q"]
        )
        assert result.exit_code == 1
        assert "Could not generate star" in result.output
        assert not output.exists()

    def test_invalid_size(self) -> None:
        """Test that malformed sizes are reported."""
        result = runner.invoke(app, ["generate", "circle", "--size", "big"])
        assert result.exit_code == 1
        assert "Invalid option value" in result.output

    def test_invalid_color(self) -> None:
        """Test that unknown colors are reported."""
        result = runner.invoke(app, ["generate", "circle", "--color", "blurple"])
        assert result.exit_code == 1

    def test_invalid_border_name(self) -> None:
        """Test that unknown border names are reported."""
        result = runner.invoke(app, ["generate", "border_subset", "--borders", "middle", "-q"])
        assert result.exit_code == 1
        assert "Unknown value 'middle'" in result.output

    def test_verbose_and_quiet(self) -> None:
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, ["generate", "circle", "-v", "-q"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_unknown_shape(self) -> None:
        """Test that typer rejects unknown shapes."""
        result = runner.invoke(app, ["generate", "hexagon"])
        assert result.exit_code != 0


class TestOtherCommands:
    """Tests for --version and 'shapesmith shapes'."""

    def test_version(self) -> None:
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_shapes(self) -> None:
        """Test that every shape is listed."""
        result = runner.invoke(app, ["shapes"])
        assert result.exit_code == 0
        for name in ("rectangle", "stripes_left", "half_ring", "glyph"):
            assert name in result.output
