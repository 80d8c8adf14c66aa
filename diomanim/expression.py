"""Parsing of LaTeX math notation into an expression tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class MathNode(ABC):
    """A node of a parsed math expression."""

    @abstractmethod
    def to_text(self) -> str:
        """A plain-text rendering of the node, for debugging."""


@dataclass(frozen=True)
class TextNode(MathNode):
    text: str

    def to_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class FractionNode(MathNode):
    numerator: MathNode
    denominator: MathNode

    def to_text(self) -> str:
        return f"({self.numerator.to_text()}) / ({self.denominator.to_text()})"


@dataclass(frozen=True)
class SuperscriptNode(MathNode):
    base: MathNode
    exponent: MathNode

    def to_text(self) -> str:
        return f"{self.base.to_text()}^{self.exponent.to_text()}"


@dataclass(frozen=True)
class SubscriptNode(MathNode):
    base: MathNode
    index: MathNode

    def to_text(self) -> str:
        return f"{self.base.to_text()}_{self.index.to_text()}"


@dataclass(frozen=True)
class SquareRootNode(MathNode):
    content: MathNode

    def to_text(self) -> str:
        return f"√({self.content.to_text()})"


@dataclass(frozen=True)
class GroupNode(MathNode):
    children: tuple[MathNode, ...]

    def to_text(self) -> str:
        return "(" + " ".join(child.to_text() for child in self.children) + ")"


@dataclass(frozen=True)
class OperatorNode(MathNode):
    op: str

    def to_text(self) -> str:
        return f" {self.op} "


@dataclass(frozen=True)
class SymbolNode(MathNode):
    symbol: str

    def to_text(self) -> str:
        return self.symbol


_SYMBOLS = {
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ε",
    "theta": "θ",
    "lambda": "λ",
    "mu": "μ",
    "pi": "π",
    "sigma": "σ",
    "phi": "φ",
    "omega": "ω",
    "infty": "∞",
    "sum": "Σ",
    "prod": "Π",
    "int": "∫",
    "partial": "∂",
    "nabla": "∇",
    "times": "×",
    "cdot": "·",
    "pm": "±",
    "leq": "≤",
    "geq": "≥",
    "neq": "≠",
    "approx": "≈",
}

_OPERATORS = frozenset("+-=<>*/")


def _collapse(children: list[MathNode]) -> MathNode:
    if not children:
        return TextNode("")
    if len(children) == 1:
        return children[0]
    return GroupNode(tuple(children))


class MathParser:
    """A recursive-descent parser for a small subset of LaTeX math."""

    def __init__(self, latex: str) -> None:
        self._input = latex.strip("$").strip()
        self._pos = 0

    def parse(self) -> MathNode:
        """Parse the whole input into a single node."""
        children: list[MathNode] = []
        while not self._at_end():
            start = self._pos
            node = self._parse_node()
            if node is not None:
                children.append(node)
            elif self._pos == start:
                # Characters the grammar does not know are skipped.
                self._pos += 1
        return _collapse(children)

    def _parse_node(self) -> MathNode | None:
        self._skip_whitespace()
        if self._at_end():
            return None
        ch = self._current()
        if ch == "\\":
            return self._parse_command()
        if ch in "^_":
            # Scripts have no base to attach to and are dropped.
            self._pos += 1
            return None
        if ch == "{":
            return self._parse_braced_group()
        if ch in _OPERATORS:
            self._pos += 1
            return OperatorNode(ch)
        return self._parse_text()

    def _parse_command(self) -> MathNode | None:
        self._pos += 1
        name = self._read_identifier()
        if name == "frac":
            numerator = self._parse_braced_group()
            if numerator is None:
                return None
            denominator = self._parse_braced_group()
            if denominator is None:
                return None
            return FractionNode(numerator, denominator)
        if name == "sqrt":
            content = self._parse_braced_group()
            if content is None:
                return None
            return SquareRootNode(content)
        symbol = _SYMBOLS.get(name)
        if symbol is not None:
            return SymbolNode(symbol)
        return TextNode("\\" + name)

    def _parse_braced_group(self) -> MathNode | None:
        if not self._match("{"):
            return None
        children: list[MathNode] = []
        depth = 1
        while not self._at_end():
            ch = self._current()
            if ch == "{":
                depth += 1
                self._pos += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    break
                self._pos += 1
            else:
                start = self._pos
                node = self._parse_node()
                if node is not None:
                    children.append(node)
                elif self._pos == start:
                    self._pos += 1
        self._match("}")
        return _collapse(children)

    def _parse_text(self) -> MathNode | None:
        start = self._pos
        while not self._at_end():
            ch = self._current()
            if not (ch.isalnum() or ch in ".,"):
                break
            self._pos += 1
        text = self._input[start:self._pos]
        return TextNode(text) if text else None

    def _read_identifier(self) -> str:
        start = self._pos
        while not self._at_end() and self._current().isalpha():
            self._pos += 1
        return self._input[start:self._pos]

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._current().isspace():
            self._pos += 1

    def _current(self) -> str:
        return self._input[self._pos]

    def _at_end(self) -> bool:
        return self._pos >= len(self._input)

    def _match(self, expected: str) -> bool:
        if not self._at_end() and self._current() == expected:
            self._pos += 1
            return True
        return False


def parse_latex(latex: str) -> MathNode:
    """Parse a LaTeX math expression into a node tree."""
    return MathParser(latex).parse()


class MathExpression:
    """A LaTeX expression ready to be placed in a scene."""

    def __init__(self, latex: str, font_size: float, color: Any) -> None:
        self.latex = latex
        self.root = parse_latex(latex)
        self.font_size = font_size
        self.color = color

    def width(self) -> float:
        """Estimated width in pixels, from the source length."""
        return len(self.latex.encode("utf-8")) * self.font_size * 0.6

    def height(self) -> float:
        """Estimated height in pixels."""
        return self.font_size * 1.2

    def __str__(self) -> str:
        return f"MathExpression[{self.latex}]"

    def __repr__(self) -> str:
        return (
            f"MathExpression(latex={self.latex!r}, font_size={self.font_size!r}, "
            f"color={self.color!r})"
        )