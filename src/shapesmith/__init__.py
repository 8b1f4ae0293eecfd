"""Shapesmith - Procedural placeholder and decorative image generation.

Shapesmith synthesizes small raster images (circles, rectangles, stripes,
borders, rings, stars, rounded rectangles and character glyphs) by building
vector paths and rasterizing them, so client applications can ship without
image assets.

Example:
    >>> from shapesmith import api
    >>> from shapesmith.domain import Size
    >>> image = api.star(Size(100, 100), beams=5, scale=0.5, color="gold")

From the command line:
    $ shapesmith generate star --size 100x100 --beams 5 --scale 0.5 -o star.png
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
