"""Core geometric value types.

All coordinates live in a y-down space whose origin is the top-left corner
of the generated image, measured in logical units (see RenderConfig.device_scale).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Attributes:
        x: X coordinate, growing to the right
        y: Y coordinate, growing downwards
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def offset(self, dx: float, dy: float) -> "Point":
        """Return this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Size:
    """Width/height pair of an image or rectangle."""

    width: float
    height: float

    def is_empty(self) -> bool:
        """Check if either side is zero (or negative).

        Returns:
            True if the size cannot hold any pixels
        """
        return self.width <= 0 or self.height <= 0

    @property
    def min_side(self) -> float:
        """Length of the shorter side."""
        return min(self.width, self.height)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def parse(cls, text: str) -> "Size":
        """Parse a 'WIDTHxHEIGHT' string such as '100x50'.

        Args:
            text: Size string; a single number means a square

        Returns:
            Size instance

        Raises:
            ValueError: If the string is not a valid size
        """
        parts = text.lower().replace(" ", "").split("x")
        if len(parts) == 1:
            side = float(parts[0])
            return cls(side, side)
        if len(parts) != 2:
            raise ValueError(f"Expected WIDTHxHEIGHT, got '{text}'")
        return cls(float(parts[0]), float(parts[1]))


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by its top-left origin and size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        """Rectangle covering a whole canvas of the given size."""
        return cls(0.0, 0.0, size.width, size.height)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def inset(self, dx: float, dy: float) -> "Rect":
        """Shrink the rectangle by dx on the left/right and dy on top/bottom."""
        return Rect(self.x + dx, self.y + dy, self.width - 2 * dx, self.height - 2 * dy)

    def contains(self, point: Point) -> bool:
        """Check if point lies inside or on the border of the rectangle."""
        return self.x <= point.x <= self.max_x and self.y <= point.y <= self.max_y
