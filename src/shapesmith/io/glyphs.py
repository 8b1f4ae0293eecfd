"""Glyph outlines from TTF/OTF fonts.

Uses fontTools to look up characters through the font's cmap and draw their
outlines into a domain Path. Font units are scaled to the requested font
size and flipped vertically, because glyph outlines are authored y-up while
the image space is y-down.
"""

import threading
from pathlib import Path as FilePath
from typing import Any

import structlog
from fontTools.misc.transform import Transform
from fontTools.pens.basePen import BasePen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from shapesmith.domain import Path, PathBuilder
from shapesmith.exceptions import FontLoadError

FONT_SUFFIXES = (".ttf", ".otf")

logger = structlog.get_logger("shapesmith.glyphs")


class PathPen(BasePen):
    """fontTools pen that records drawing commands into a PathBuilder.

    Quadratic segments are converted to cubic ones by BasePen.
    """

    def __init__(self, glyph_set: Any, builder: PathBuilder) -> None:
        super().__init__(glyph_set)
        self.builder = builder

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.builder.move_to(*pt)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.builder.line_to(*pt)

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.builder.curve_to(*pt1, *pt2, *pt3)

    def _closePath(self) -> None:
        self.builder.close_path()

    def _endPath(self) -> None:
        # Open contours are not filled; nothing to record
        pass


class GlyphOutlineProvider:
    """Resolves fonts and converts text into outline paths.

    Loaded fonts are cached per resolved file. The cache and all fontTools
    access are guarded by a lock, so one provider can serve several threads.

    Example:
        provider = GlyphOutlineProvider([Path("/usr/share/fonts/truetype")])
        path = provider.outline_path("+", "DejaVuSans-Bold", 150.0)
    """

    def __init__(self, search_paths: list[FilePath] | None = None) -> None:
        """Initialize the provider.

        Args:
            search_paths: Directories searched for '<font_name>.ttf/.otf'
        """
        self._search_paths = list(search_paths or [])
        self._fonts: dict[FilePath, TTFont] = {}
        self._lock = threading.Lock()

    def resolve(self, font_name: str) -> FilePath | None:
        """Find the font file for a font name.

        The name may be a path to a font file or the file stem of a font
        inside one of the search directories (case-insensitive).

        Returns:
            Path to the font file, or None if nothing matches
        """
        if not font_name:
            return None

        direct = FilePath(font_name)
        if direct.suffix.lower() in FONT_SUFFIXES and direct.is_file():
            return direct

        wanted = font_name.lower()
        for directory in self._search_paths:
            if not directory.is_dir():
                continue
            for candidate in sorted(directory.rglob("*")):
                if (
                    candidate.suffix.lower() in FONT_SUFFIXES
                    and candidate.stem.lower() == wanted
                ):
                    return candidate
        return None

    def _load(self, font_path: FilePath) -> TTFont:
        font = self._fonts.get(font_path)
        if font is None:
            try:
                font = TTFont(str(font_path))
            except Exception as e:
                raise FontLoadError(str(font_path), str(e)) from e
            self._fonts[font_path] = font
        return font

    def outline_path(self, text: str, font_name: str, font_size: float) -> Path:
        """Outline of a string set on a baseline at y = 0.

        Glyphs are placed left to right using their advance widths, starting
        at x = 0. Characters missing from the font are skipped.

        Args:
            text: Characters to outline
            font_name: Font file path or file stem
            font_size: Font size in logical units (one em)

        Returns:
            Outline path; empty for empty text or a font that cannot be found

        Raises:
            FontLoadError: If the font file exists but cannot be parsed
        """
        if not text:
            return Path()

        font_path = self.resolve(font_name)
        if font_path is None:
            logger.warning("Font not found", font_name=font_name)
            return Path()

        builder = PathBuilder()
        with self._lock:
            font = self._load(font_path)
            units_per_em = font["head"].unitsPerEm
            scale = font_size / units_per_em
            cmap = font.getBestCmap() or {}
            glyph_set = font.getGlyphSet()
            hmtx = font["hmtx"]

            pen_x = 0.0
            for char in text:
                glyph_name = cmap.get(ord(char))
                if glyph_name is None:
                    logger.debug("Character not in font", char=char, font=str(font_path))
                    continue

                pen = TransformPen(
                    PathPen(glyph_set, builder),
                    Transform(scale, 0, 0, -scale, pen_x, 0),
                )
                glyph_set[glyph_name].draw(pen)

                advance_width, _ = hmtx[glyph_name]
                pen_x += advance_width * scale

        return builder.build()

    def close(self) -> None:
        """Close all cached fonts and free resources."""
        with self._lock:
            for font in self._fonts.values():
                font.close()
            self._fonts.clear()

    def __enter__(self) -> "GlyphOutlineProvider":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
