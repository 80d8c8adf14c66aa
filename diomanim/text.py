"""Text objects and the default font locations."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

from diomanim.geometry import Vector3

_WHITE = (1.0, 1.0, 1.0, 1.0)


def sans_serif_font_path() -> str:
    """Path of a default sans-serif font on this platform."""
    if sys.platform == "darwin":
        return "/System/Library/Fonts/Helvetica.ttc"
    if sys.platform.startswith(("win32", "cygwin")):
        return "C:\\Windows\\Fonts\\arial.ttf"
    return "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"


def monospace_font_path() -> str:
    """Path of a default monospace font on this platform."""
    if sys.platform == "darwin":
        return "/System/Library/Fonts/Monaco.ttf"
    if sys.platform.startswith(("win32", "cygwin")):
        return "C:\\Windows\\Fonts\\consola.ttf"
    return "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf"


@dataclass(frozen=True)
class Text:
    """A piece of text to show in an animation."""

    content: str
    font_size: float
    color: Any = _WHITE
    position: Vector3 = field(default_factory=Vector3.zero)
    font_path: str | None = field(default=None, repr=False)

    def with_color(self, color: Any) -> Text:
        return replace(self, color=color)

    def at(self, position: Vector3) -> Text:
        return replace(self, position=position)

    def with_font(self, font_path: str) -> Text:
        return replace(self, font_path=font_path)

    def resolved_font_path(self) -> str:
        """The custom font if one was set, otherwise the platform default."""
        return self.font_path if self.font_path is not None else sans_serif_font_path()