"""Shape identifiers and their parameters.

ShapeKind is the closed set of shapes the generator knows how to draw.
Shapes that need extra input carry it in a small frozen parameter record,
and everything a single generation needs is bundled in a ShapeRequest.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag

from shapesmith.domain.color import Color
from shapesmith.domain.geometry import Size


class ShapeKind(str, Enum):
    """Shape drawn by the generator."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    CIRCLE_WITH_RIGHT_BAR = "circle_with_right_bar"
    STRIPES_RIGHT = "stripes_right"
    STRIPES_LEFT = "stripes_left"
    BORDERED_RECTANGLE = "bordered_rectangle"
    BORDER_SUBSET = "border_subset"
    ROUNDED_CORNERS = "rounded_corners"
    RING = "ring"
    HALF_RING = "half_ring"
    STAR = "star"
    GLYPH = "glyph"

    @property
    def is_stripes(self) -> bool:
        return self in (ShapeKind.STRIPES_LEFT, ShapeKind.STRIPES_RIGHT)


# Kinds accepted by the basic (size, color, line width, gap) entry point
BASIC_KINDS = frozenset(
    {
        ShapeKind.RECTANGLE,
        ShapeKind.CIRCLE,
        ShapeKind.CIRCLE_WITH_RIGHT_BAR,
        ShapeKind.STRIPES_RIGHT,
        ShapeKind.STRIPES_LEFT,
        ShapeKind.BORDERED_RECTANGLE,
    }
)

# Base shapes a glyph can be knocked out of
GLYPH_BASE_KINDS = frozenset({ShapeKind.RECTANGLE, ShapeKind.CIRCLE})


class BorderSide(IntFlag):
    """Sides of a rectangle to stroke.

    ALL_SIDES is the saturated mask. It draws one closed rectangle outline,
    which is not the same as TOP | LEFT | RIGHT | BOTTOM (four separate
    segments whose corners are not joined).
    """

    NONE = 0
    TOP = 1 << 0
    LEFT = 1 << 1
    RIGHT = 1 << 2
    BOTTOM = 1 << 3
    ALL_SIDES = 0xFFFFFFFF


class Corner(IntFlag):
    """Corners of a rectangle that receive a radius."""

    NONE = 0
    TOP_LEFT = 1 << 0
    TOP_RIGHT = 1 << 1
    BOTTOM_LEFT = 1 << 2
    BOTTOM_RIGHT = 1 << 3
    ALL_CORNERS = TOP_LEFT | TOP_RIGHT | BOTTOM_LEFT | BOTTOM_RIGHT


class Orientation(str, Enum):
    """Which half of a ring a half ring keeps."""

    NORTH = "north"
    SOUTH = "south"


@dataclass(frozen=True, slots=True)
class StripeParams:
    """Dash pattern of a striped rectangle."""

    line_width: float = 2.0
    gap: float = 3.0


@dataclass(frozen=True, slots=True)
class BorderParams:
    sides: BorderSide = BorderSide.ALL_SIDES
    line_width: float = 1.0


@dataclass(frozen=True, slots=True)
class RoundedCornersParams:
    """Rounded rectangle outline.

    Attributes:
        corners: Corners that are rounded
        radii: Horizontal and vertical corner radius
        line_width: Stroke width; the outline is inset by half of it
    """

    corners: Corner = Corner.ALL_CORNERS
    radii: Size = Size(0.0, 0.0)
    line_width: float = 1.0


@dataclass(frozen=True, slots=True)
class RingParams:
    outer_radius: float
    inner_radius: float


@dataclass(frozen=True, slots=True)
class HalfRingParams:
    outer_radius: float
    inner_radius: float
    orientation: Orientation = Orientation.NORTH


@dataclass(frozen=True, slots=True)
class StarParams:
    """Star polygon.

    Attributes:
        beams: Number of points of the star
        scale: Inner radius as a fraction of the outer radius
    """

    beams: int
    scale: float


@dataclass(frozen=True, slots=True)
class GlyphParams:
    """Character knocked out of a base shape.

    Attributes:
        text: Character(s) to draw
        font_name: Font file path or file stem found in the font search paths
        font_size: Font size in logical units
        base: Base shape the glyph is cut out of
    """

    text: str
    font_name: str
    font_size: float
    base: ShapeKind = ShapeKind.CIRCLE


ShapeParams = (
    StripeParams
    | BorderParams
    | RoundedCornersParams
    | RingParams
    | HalfRingParams
    | StarParams
    | GlyphParams
)


@dataclass(frozen=True)
class ShapeRequest:
    """Everything needed for one image generation.

    Attributes:
        size: Logical image size
        kind: Shape to draw
        color: Fill or stroke color of the shape
        background: Background color; None leaves the canvas transparent
        params: Parameters of kinds that need them
    """

    size: Size
    kind: ShapeKind
    color: Color
    background: Color | None = None
    params: ShapeParams | None = None

    @property
    def opaque(self) -> bool:
        """A canvas with a background is opaque, otherwise transparent."""
        return self.background is not None
