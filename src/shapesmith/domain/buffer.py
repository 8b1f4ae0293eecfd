"""Rasterized output of a generation."""

import io
from dataclasses import dataclass

from PIL import Image

from shapesmith.domain.geometry import Size


@dataclass(frozen=True)
class PixelBuffer:
    """A finished RGBA image.

    Attributes:
        image: Pillow image in RGBA mode, sized in device pixels
        scale: Device pixels per logical unit
    """

    image: Image.Image
    scale: float = 1.0

    @property
    def width(self) -> int:
        """Width in device pixels."""
        return self.image.width

    @property
    def height(self) -> int:
        """Height in device pixels."""
        return self.image.height

    @property
    def logical_size(self) -> Size:
        """Size in logical units (pixels divided by the device scale)."""
        return Size(self.width / self.scale, self.height / self.scale)

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Get the (r, g, b, a) value of a device pixel."""
        return self.image.getpixel((x, y))  # type: ignore[return-value]

    def is_opaque(self) -> bool:
        """Check if every pixel has a saturated alpha channel."""
        alpha_min, _ = self.image.getextrema()[3]
        return alpha_min == 255

    def to_png_bytes(self) -> bytes:
        """Encode the image as PNG."""
        out = io.BytesIO()
        self.image.save(out, format="PNG")
        return out.getvalue()
