"""Glyph rasterization into a texture atlas."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont

from diomanim.text import sans_serif_font_path

_ATLAS_WIDTH = 1024
_ATLAS_HEIGHT = 1024


class AtlasFullError(Exception):
    """Raised when a glyph no longer fits into the atlas."""


@dataclass
class RasterizedGlyph:
    """A glyph's metrics, bitmap and place in the atlas."""

    width: int
    height: int
    bearing_x: float
    bearing_y: float
    advance: float
    uv: tuple[float, float, float, float]
    bitmap: bytes


class GlyphAtlas:
    """Caches rasterized glyphs of one font in a 1024x1024 RGBA atlas."""

    def __init__(self, font_data: bytes, font_size: float) -> None:
        try:
            self._font = ImageFont.truetype(io.BytesIO(bytes(font_data)), font_size)
        except OSError as exc:
            raise ValueError(f"invalid font data: {exc}") from exc
        self.font_size = font_size
        self._glyphs: dict[str, RasterizedGlyph] = {}
        self._width = _ATLAS_WIDTH
        self._height = _ATLAS_HEIGHT
        self._x = 0
        self._y = 0
        self._row_height = 0
        self._data = bytearray(self._width * self._height * 4)

    @classmethod
    def from_system_font(cls, font_size: float) -> GlyphAtlas:
        """An atlas for the platform's default sans-serif font."""
        with open(sans_serif_font_path(), "rb") as handle:
            return cls(handle.read(), font_size)

    def rasterize_char(self, c: str) -> RasterizedGlyph:
        """Rasterize one character into the atlas, or return the cached glyph."""
        cached = self._glyphs.get(c)
        if cached is not None:
            return cached

        advance = float(self._font.getlength(c))
        left, top, right, bottom = self._font.getbbox(c, anchor="ls")
        width = math.ceil(right - left)
        height = math.ceil(bottom - top)

        image = None
        if width > 0 and height > 0:
            image = Image.new("L", (width, height), 0)
            ImageDraw.Draw(image).text((-left, -top), c, font=self._font, fill=255, anchor="ls")
            if image.getbbox() is None:
                image = None

        if image is None:
            glyph = RasterizedGlyph(0, 0, 0.0, 0.0, advance, (0.0, 0.0, 0.0, 0.0), b"")
            self._glyphs[c] = glyph
            return glyph

        if self._x + width > self._width:
            self._x = 0
            self._y += self._row_height
            self._row_height = 0
        if self._y + height > self._height:
            raise AtlasFullError("Glyph atlas is full")

        bitmap = image.tobytes()
        self._blit(bitmap, width, height)

        uv = (
            self._x / self._width,
            self._y / self._height,
            (self._x + width) / self._width,
            (self._y + height) / self._height,
        )
        glyph = RasterizedGlyph(
            width=width,
            height=height,
            bearing_x=float(left),
            bearing_y=float(-top),
            advance=advance,
            uv=uv,
            bitmap=bitmap,
        )
        self._x += width
        self._row_height = max(self._row_height, height)
        self._glyphs[c] = glyph
        return glyph

    def _blit(self, bitmap: bytes, width: int, height: int) -> None:
        """Copy a glyph into the atlas as white with the glyph's coverage as alpha."""
        columns = min(width, self._width - self._x)
        for row in range(height):
            alphas = bitmap[row * width : row * width + columns]
            pixels = bytes(channel for alpha in alphas for channel in (255, 255, 255, alpha))
            start = ((self._y + row) * self._width + self._x) * 4
            self._data[start : start + len(pixels)] = pixels

    def rasterize_string(self, text: str) -> None:
        """Rasterize every character of a string."""
        for c in text:
            self.rasterize_char(c)

    def atlas_data(self) -> bytes:
        """The RGBA8 atlas pixels, row by row."""
        return bytes(self._data)

    def atlas_dimensions(self) -> tuple[int, int]:
        return self._width, self._height

    def get_glyph(self, c: str) -> RasterizedGlyph | None:
        """A cached glyph, or None if it has not been rasterized."""
        return self._glyphs.get(c)

    def measure_text(self, text: str) -> float:
        """Total advance of a string, rasterizing its characters as needed."""
        return sum(self.rasterize_char(c).advance for c in text)