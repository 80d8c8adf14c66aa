"""Shapes, scene graph, LaTeX math parsing and layout, glyph atlas and playback state for animations."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "expression",
    "layout",
    "text",
    "scene",
    "builder",
    "rasterizer",
    "playback",
]