"""RGBA color value type."""

from dataclasses import dataclass
from typing import Union

from PIL import ImageColor


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with float components in the range 0..1.

    Attributes:
        red: Red component
        green: Green component
        blue: Blue component
        alpha: Opacity, 1.0 is fully opaque
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Color component '{name}' out of range: {value}")

    @classmethod
    def from_rgba8(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        """Create a color from 8-bit components."""
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)

    @classmethod
    def parse(cls, value: "ColorLike") -> "Color":
        """Convert a color name, CSS string or 8-bit tuple to a Color.

        Strings are resolved with Pillow's ImageColor, so everything it
        understands works: "red", "#ff000080", "rgb(255, 0, 0)", "hsl(0, 100%, 50%)".

        Args:
            value: Color, string, or (r, g, b[, a]) tuple of 0..255 ints

        Returns:
            Color instance

        Raises:
            ValueError: If the value cannot be interpreted as a color
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_rgba8(*ImageColor.getcolor(value, "RGBA"))
        if len(value) in (3, 4):
            return cls.from_rgba8(*(int(c) for c in value))
        raise ValueError(f"Cannot interpret {value!r} as a color")

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to an (r, g, b, a) float tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Convert to an (r, g, b, a) tuple of 0..255 ints."""
        return tuple(round(c * 255) for c in self.to_tuple())  # type: ignore[return-value]


ColorLike = Union[Color, str, tuple[int, int, int], tuple[int, int, int, int]]
