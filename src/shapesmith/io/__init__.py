"""I/O layer for shapesmith.

This module wraps the external collaborators of the generator:

- pycairo canvases for rasterization
- fontTools for glyph outlines
- Pillow for writing finished images

Key classes:
- Canvas / open_canvas: Scoped raster surface
- GlyphOutlineProvider: Text to outline paths
- ImageWriter: Save buffers as PNG
"""

from shapesmith.io.canvas import Canvas, open_canvas, pixel_dimensions
from shapesmith.io.glyphs import GlyphOutlineProvider
from shapesmith.io.writer import ImageWriter

__all__ = [
    "Canvas",
    "GlyphOutlineProvider",
    "ImageWriter",
    "open_canvas",
    "pixel_dimensions",
]
