"""Positioning and sizing of the parts of a math expression."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from diomanim.expression import (
    FractionNode,
    GroupNode,
    MathNode,
    OperatorNode,
    SquareRootNode,
    SubscriptNode,
    SuperscriptNode,
    SymbolNode,
    TextNode,
)
from diomanim.geometry import Vector3


@dataclass
class MathLayout:
    """The laid-out box of one math component, relative to its parent."""

    width: float
    height: float
    baseline: float
    text: str | None = None
    children: list[MathLayout] = field(default_factory=list)
    position: Vector3 = field(default_factory=Vector3.zero)

    @classmethod
    def text(cls, content: str, font_size: float) -> MathLayout:
        """A leaf box holding plain text."""
        return cls(
            width=len(content.encode("utf-8")) * font_size * 0.6,
            height=font_size,
            baseline=font_size * 0.8,
            text=content,
        )

    @classmethod
    def layout_node(cls, node: MathNode, font_size: float) -> MathLayout:
        """Lay out a whole expression tree."""
        match node:
            case TextNode(text=content):
                return cls.text(content, font_size)
            case SymbolNode(symbol=content):
                return cls.text(content, font_size)
            case OperatorNode(op=content):
                layout = cls.text(content, font_size)
                layout.width += font_size * 0.4
                return layout
            case FractionNode(numerator=numerator, denominator=denominator):
                return cls._layout_fraction(numerator, denominator, font_size)
            case SuperscriptNode(base=base, exponent=exponent):
                return cls._layout_script(base, exponent, font_size, -font_size * 0.4)
            case SubscriptNode(base=base, index=index):
                return cls._layout_script(base, index, font_size, font_size * 0.3)
            case SquareRootNode(content=content):
                return cls._layout_sqrt(content, font_size)
            case GroupNode(children=children):
                return cls._layout_group(children, font_size)
        raise TypeError(f"cannot lay out {type(node).__name__}")

    @classmethod
    def _layout_fraction(
        cls, numerator: MathNode, denominator: MathNode, font_size: float
    ) -> MathLayout:
        small_size = font_size * 0.7
        num = cls.layout_node(numerator, small_size)
        den = cls.layout_node(denominator, small_size)

        width = max(num.width, den.width) + font_size * 0.2
        num.position = Vector3((width - num.width) * 0.5, -small_size * 0.5, 0.0)
        den.position = Vector3((width - den.width) * 0.5, small_size * 0.5, 0.0)

        height = num.height + den.height + small_size * 0.2
        return cls(
            width=width,
            height=height,
            baseline=height * 0.5,
            children=[num, den],
        )

    @classmethod
    def _layout_script(
        cls, base: MathNode, script: MathNode, font_size: float, shift: float
    ) -> MathLayout:
        base_layout = cls.layout_node(base, font_size)
        script_layout = cls.layout_node(script, font_size * 0.6)
        script_layout.position = Vector3(base_layout.width, shift, 0.0)
        return cls(
            width=base_layout.width + script_layout.width,
            height=max(base_layout.height, font_size * 1.2),
            baseline=base_layout.baseline,
            children=[base_layout, script_layout],
        )

    @classmethod
    def _layout_sqrt(cls, content: MathNode, font_size: float) -> MathLayout:
        content_layout = cls.layout_node(content, font_size)
        symbol_width = font_size * 0.5
        content_layout.position = replace(
            content_layout.position, x=symbol_width + font_size * 0.1
        )
        symbol_layout = cls.text("√", font_size)
        return cls(
            width=symbol_width + content_layout.width + font_size * 0.1,
            height=content_layout.height + font_size * 0.1,
            baseline=content_layout.baseline,
            children=[symbol_layout, content_layout],
        )

    @classmethod
    def _layout_group(cls, children: tuple[MathNode, ...], font_size: float) -> MathLayout:
        layouts = []
        cursor_x = 0.0
        max_height = 0.0
        max_baseline = 0.0
        for child in children:
            layout = cls.layout_node(child, font_size)
            layout.position = replace(layout.position, x=cursor_x)
            cursor_x += layout.width
            max_height = max(max_height, layout.height)
            max_baseline = max(max_baseline, layout.baseline)
            layouts.append(layout)
        return cls(
            width=cursor_x,
            height=max_height,
            baseline=max_baseline,
            children=layouts,
        )

    def flatten(self) -> list[tuple[Vector3, str, float]]:
        """All text leaves with absolute positions and approximate font sizes."""
        return list(self._walk(Vector3.zero()))

    def _walk(self, offset: Vector3):
        here = offset + self.position
        if self.text is not None:
            yield here, self.text, self.height
        for child in self.children:
            yield from child._walk(here)