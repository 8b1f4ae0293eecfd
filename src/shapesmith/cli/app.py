"""CLI application entry point for shapesmith.

This module provides the main CLI interface using Typer.
"""

import math
import time
from pathlib import Path
from typing import Annotated

import typer

from shapesmith import __version__
from shapesmith.cli.output import (
    console,
    print_error,
    print_header,
    print_request_info,
    print_shape_table,
    print_step,
    print_success,
)
from shapesmith.config import (
    FontConfig,
    LoggingConfig,
    RenderConfig,
    ShapesmithSettings,
)
from shapesmith.core import ImageComposer, rotate, scale
from shapesmith.domain import (
    BorderParams,
    BorderSide,
    Color,
    Corner,
    GlyphParams,
    HalfRingParams,
    Orientation,
    RingParams,
    RoundedCornersParams,
    ShapeKind,
    ShapeParams,
    ShapeRequest,
    Size,
    StarParams,
    StripeParams,
)
from shapesmith.exceptions import GenerationError, ImageSaveError, ShapesmithError
from shapesmith.io import ImageWriter
from shapesmith.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="shapesmith",
    help="Generate placeholder and decorative raster images from vector shapes.",
    add_completion=False,
    no_args_is_help=True,
)

SHAPE_OPTIONS: dict[ShapeKind, str] = {
    ShapeKind.RECTANGLE: "",
    ShapeKind.CIRCLE: "",
    ShapeKind.CIRCLE_WITH_RIGHT_BAR: "",
    ShapeKind.STRIPES_RIGHT: "--line-width --gap",
    ShapeKind.STRIPES_LEFT: "--line-width --gap",
    ShapeKind.BORDERED_RECTANGLE: "",
    ShapeKind.BORDER_SUBSET: "--borders --line-width",
    ShapeKind.ROUNDED_CORNERS: "--corners --radius --line-width",
    ShapeKind.RING: "--outer --inner",
    ShapeKind.HALF_RING: "--outer --inner --orientation",
    ShapeKind.STAR: "--beams --scale",
    ShapeKind.GLYPH: "--char --font --font-size --font-dir --base",
}


_SINGLE_FLAG_NAMES = frozenset(
    {"TOP", "LEFT", "RIGHT", "BOTTOM", "TOP_LEFT", "TOP_RIGHT", "BOTTOM_LEFT", "BOTTOM_RIGHT"}
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapesmith[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate placeholder and decorative raster images from vector shapes."""


def parse_flags(value: str, flag_type: type[BorderSide] | type[Corner]) -> BorderSide | Corner:
    """Parse a comma separated list of flag names such as 'top,bottom'.

    'all' selects every flag (ALL_SIDES for borders).

    Raises:
        ValueError: If a name is not a member of the flag type
    """
    names = [name.strip().lower() for name in value.split(",") if name.strip()]
    if names == ["all"]:
        return BorderSide.ALL_SIDES if flag_type is BorderSide else Corner.ALL_CORNERS

    single = {m.name.lower(): m for m in flag_type if m.name in _SINGLE_FLAG_NAMES}
    result = flag_type.NONE
    for name in names:
        if name not in single:
            valid = ", ".join(single)
            raise ValueError(f"Unknown value '{name}' (valid: all, {valid})")
        result |= single[name]
    return result


def build_params(
    shape: ShapeKind,
    size: Size,
    settings: ShapesmithSettings,
    line_width: float | None,
    gap: float | None,
    borders: str,
    corners: str,
    radius: str,
    outer: float | None,
    inner: float | None,
    orientation: Orientation,
    beams: int,
    star_scale: float,
    char: str,
    font: str,
    font_size: float | None,
    base: ShapeKind,
) -> ShapeParams | None:
    """Collect the parameter record for a shape from CLI options.

    Ring radii default to 40% and 20% of the shorter side; the glyph font
    size defaults to 60% of it.

    Raises:
        ValueError: If a flag list or radius cannot be parsed
    """
    border_width = line_width if line_width is not None else settings.shapes.border_line_width
    outer_radius = outer if outer is not None else size.min_side * 0.4
    inner_radius = inner if inner is not None else outer_radius / 2.0

    if shape.is_stripes:
        return StripeParams(
            line_width=line_width if line_width is not None else settings.stripes.line_width,
            gap=gap if gap is not None else settings.stripes.gap,
        )
    if shape == ShapeKind.BORDER_SUBSET:
        sides = parse_flags(borders, BorderSide)
        return BorderParams(sides=BorderSide(sides), line_width=border_width)
    if shape == ShapeKind.ROUNDED_CORNERS:
        return RoundedCornersParams(
            corners=Corner(parse_flags(corners, Corner)),
            radii=Size.parse(radius),
            line_width=border_width,
        )
    if shape == ShapeKind.RING:
        return RingParams(outer_radius=outer_radius, inner_radius=inner_radius)
    if shape == ShapeKind.HALF_RING:
        return HalfRingParams(
            outer_radius=outer_radius,
            inner_radius=inner_radius,
            orientation=orientation,
        )
    if shape == ShapeKind.STAR:
        return StarParams(beams=beams, scale=star_scale)
    if shape == ShapeKind.GLYPH:
        return GlyphParams(
            text=char,
            font_name=font,
            font_size=font_size if font_size is not None else size.min_side * 0.6,
            base=base,
        )
    return None


@app.command("shapes")
def list_shapes() -> None:
    """List the shapes that can be generated and the options they use."""
    print_shape_table([(kind.value, options) for kind, options in SHAPE_OPTIONS.items()])


@app.command()
def generate(
    shape: Annotated[
        ShapeKind,
        typer.Argument(
            help="Shape to draw (see 'shapesmith shapes')",
            show_default=False,
        ),
    ],
    size: Annotated[
        str,
        typer.Option("--size", "-s", help="Image size as WIDTHxHEIGHT"),
    ] = "100x100",
    color: Annotated[
        str,
        typer.Option("--color", "-c", help="Shape color (name, #rrggbb[aa], rgb(...))"),
    ] = "black",
    background: Annotated[
        str | None,
        typer.Option("--background", "-b", help="Background color (default: transparent)"),
    ] = None,
    line_width: Annotated[
        float | None,
        typer.Option("--line-width", "-w", help="Stripe or border stroke width"),
    ] = None,
    gap: Annotated[
        float | None,
        typer.Option("--gap", help="Distance between stripes"),
    ] = None,
    borders: Annotated[
        str,
        typer.Option("--borders", help="Sides to draw: all, or a list of top,left,right,bottom"),
    ] = "all",
    corners: Annotated[
        str,
        typer.Option(
            "--corners",
            help="Corners to round: all, or a list of top_left,top_right,bottom_left,bottom_right",
        ),
    ] = "all",
    radius: Annotated[
        str,
        typer.Option("--radius", "-r", help="Corner radius, or RXxRY for elliptical corners"),
    ] = "8",
    outer: Annotated[
        float | None,
        typer.Option("--outer", help="Outer ring radius (default: 40% of the shorter side)"),
    ] = None,
    inner: Annotated[
        float | None,
        typer.Option("--inner", help="Inner ring radius (default: half the outer radius)"),
    ] = None,
    orientation: Annotated[
        Orientation,
        typer.Option("--orientation", help="Half of the ring to keep"),
    ] = Orientation.NORTH,
    beams: Annotated[
        int,
        typer.Option("--beams", help="Number of star points"),
    ] = 5,
    star_scale: Annotated[
        float,
        typer.Option("--scale", help="Inner star radius as a fraction of the outer radius"),
    ] = 0.5,
    char: Annotated[
        str,
        typer.Option("--char", help="Character cut out of the glyph base shape"),
    ] = "+",
    font: Annotated[
        str,
        typer.Option("--font", "-f", help="Font file, or font file stem found in --font-dir"),
    ] = "",
    font_size: Annotated[
        float | None,
        typer.Option("--font-size", help="Font size (default: 60% of the shorter side)"),
    ] = None,
    font_dirs: Annotated[
        list[Path] | None,
        typer.Option("--font-dir", help="Directory searched for fonts (repeatable)"),
    ] = None,
    base: Annotated[
        ShapeKind,
        typer.Option("--base", help="Glyph base shape (circle or rectangle)"),
    ] = ShapeKind.CIRCLE,
    device_scale: Annotated[
        float,
        typer.Option("--device-scale", "-d", help="Pixels per logical unit", min=0.1, max=8.0),
    ] = 1.0,
    rotate_degrees: Annotated[
        float,
        typer.Option("--rotate", help="Rotate the result clockwise by this many degrees"),
    ] = 0.0,
    scale_factor: Annotated[
        float,
        typer.Option("--scale-factor", help="Resize the result by this factor"),
    ] = 1.0,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {shape}.png)"),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Generate one image and save it as PNG.

    Example:
        shapesmith generate star --size 100x100 --beams 5 --scale 0.5 -o star.png

    Without --background the image is transparent outside the shape.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        image_size = Size.parse(size)
        shape_color = Color.parse(color)
        background_color = Color.parse(background) if background is not None else None
    except ValueError as e:
        print_error(f"Invalid option value: {e}")
        raise typer.Exit(code=1)

    settings = ShapesmithSettings(
        render=RenderConfig(device_scale=device_scale),
        fonts=FontConfig(search_paths=font_dirs or []),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        params = build_params(
            shape,
            image_size,
            settings,
            line_width=line_width,
            gap=gap,
            borders=borders,
            corners=corners,
            radius=radius,
            outer=outer,
            inner=inner,
            orientation=orientation,
            beams=beams,
            star_scale=star_scale,
            char=char,
            font=font,
            font_size=font_size,
            base=base,
        )
    except ValueError as e:
        print_error(f"Invalid option value: {e}")
        raise typer.Exit(code=1)

    request = ShapeRequest(
        size=image_size,
        kind=shape,
        color=shape_color,
        background=background_color,
        params=params,
    )

    start_time = time.perf_counter()
    try:
        if not quiet:
            print_step("Generating")
            print_request_info(
                shape.value, image_size.width, image_size.height, request.opaque
            )

        composer = ImageComposer(settings)
        try:
            buffer = composer.compose(request)
        finally:
            composer.glyph_provider.close()

        if rotate_degrees:
            rotated = rotate(buffer, math.radians(rotate_degrees))
            if rotated is None:
                raise GenerationError(f"Cannot rotate by {rotate_degrees} degrees")
            buffer = rotated

        if scale_factor != 1.0:
            scaled = scale(buffer, scale_factor)
            if scaled is None:
                raise GenerationError(f"Cannot scale by {scale_factor}")
            buffer = scaled

        output_path = output or ImageWriter.get_default_path(shape.value)
        if verbose:
            print_step(f"Writing {output_path}")
        ImageWriter(buffer, output_path).save()

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=time.perf_counter() - start_time,
                pixel_width=buffer.width,
                pixel_height=buffer.height,
            )

    except ImageSaveError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except GenerationError as e:
        print_error(f"Could not generate {shape.value}", details=str(e))
        raise typer.Exit(code=1)
    except ShapesmithError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "4 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
