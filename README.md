# diomanim

Building blocks for programmatic animations: shapes, a scene graph with
transform inheritance, a small LaTeX math parser with a layout engine, a glyph
atlas built with Pillow, and playback state for previewing an animation.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Modules

### `diomanim.geometry`

- `Vector3` — an immutable `(x, y, z)` vector with `+`, `-` and `Vector3.zero()`.
- `Circle`, `Square`, `Rectangle` — filled shapes with a `position` and
  `move_to(position)`. `Rectangle.from_square(side, color)` builds a square
  rectangle.
- `Line` — `length()`, unit `direction()` (zero for a degenerate line) and
  `perpendicular()` in the XY plane. `Line.from_points` uses thickness 2.0.
- `Arrow` — `Arrow.from_points` uses thickness 2.0 and tip size 8.0;
  `line()` returns the shaft, shortened by `tip_size / 100`.
- `Polygon` — `regular(sides, radius, color)`, `triangle`, `pentagon`,
  `hexagon`, `star(points, outer_radius, inner_radius, color)`,
  `triangulate()` (fan triangulation as a flat index list) and `center()`
  (the mean of the vertices).

Colors are not interpreted anywhere in the package; any value (for example an
RGBA tuple) can be passed.

### `diomanim.expression`

`parse_latex(latex)` turns a LaTeX math string into a tree of `MathNode`
objects: `TextNode`, `OperatorNode` (`+ - = < > * /`), `SymbolNode` (Greek
letters such as `\alpha`, and `\infty`, `\sum`, `\int`, `\leq`, `\approx` and
others), `FractionNode` (`\frac{a}{b}`), `SquareRootNode` (`\sqrt{x}`) and
`GroupNode`. Surrounding `$` signs are stripped; unknown commands become
`TextNode("\\name")`. Every node has `to_text()` for a plain-text rendering.

`^` and `_` are recognised but dropped by the parser, so `SuperscriptNode`
and `SubscriptNode` only appear in trees built by hand.

`MathExpression(latex, font_size, color)` keeps the source with its parsed
`root`, and gives rough `width()` and `height()` estimates.

### `diomanim.layout`

`MathLayout.layout_node(node, font_size)` sizes and positions a node tree
(fractions stacked and centred, scripts raised or lowered, square roots with a
`√` leaf, groups laid out left to right). `flatten()` returns every text leaf
as `(position, text, size)` with absolute positions.

### `diomanim.text`

`Text(content, font_size)` is an immutable text object with `with_color`,
`at` and `with_font` returning modified copies, and `resolved_font_path()`.
`sans_serif_font_path()` and `monospace_font_path()` return the default font
paths for macOS, Windows or Linux.

### `diomanim.rasterizer`

`GlyphAtlas(font_data, font_size)` rasterizes characters of a TrueType font
into a 1024×1024 RGBA atlas (white with the glyph's coverage as alpha).
`rasterize_char(c)` returns a cached `RasterizedGlyph` with size, bearings,
advance, UV rectangle and bitmap; `rasterize_string`, `measure_text`,
`get_glyph`, `atlas_data()` and `atlas_dimensions()` complete it.
`GlyphAtlas.from_system_font(size)` reads the default sans-serif font.
Invalid font data raises `ValueError`; a full atlas raises `AtlasFullError`.

### `diomanim.scene`

`SceneGraph` holds `SceneNode`s by integer id. `create_node(name, transform=None)`
adds a root node; `parent(child_id, parent_id)` moves a node under another and
raises `SceneError` for a missing node or a cycle. `update_transforms()`
computes world transforms (positions add, scales multiply).
`visible_renderables()` returns `(matrix, renderable, opacity)` for every
visible node with opacity above zero, depth first; hidden nodes hide their
children. `remove_node(node_id)` removes a node and its descendants.

Renderables are `CircleRenderable`, `RectangleRenderable`, `LineRenderable`,
`ArrowRenderable`, `PolygonRenderable`, `TextRenderable` and `MathRenderable`.

### `diomanim.builder`

`SceneBuilder(scene)` adds shapes (`add_circle`, `add_rectangle`,
`add_square`, `add_line`, `add_arrow`, `add_polygon`, `add_regular_polygon`,
`add_triangle`, `add_pentagon`, `add_hexagon`, `add_star`, `add_text`) and
returns a `NodeBuilder` whose `at`, `at_vec`, `scale`, `scale_xyz`, `opacity`
(clamped to 0–1), `visible` and `parent_to` chain; `build()` returns the id.

### `diomanim.playback`

`PlaybackState(duration)` tracks `current_time`, `playing`, `looping`, `fps`
and `speed`, with `update(delta)`, `toggle_play`, `seek`, `step_forward`,
`step_backward`, `reset` and `progress()`. `handle_key(key)` applies a
`PlaybackKey` (or its string value: `"space"`, `"r"`, `"right"`, `"left"`,
`"l"`, `"]"`, `"["`, `"escape"`) and returns a status message.

## Examples

```python
from diomanim.expression import parse_latex
from diomanim.layout import MathLayout

node = parse_latex(r"\frac{a}{b}")
print(node.to_text())            # (a) / (b)

for position, text, size in MathLayout.layout_node(node, 48.0).flatten():
    print(position, text, size)
```

```python
from diomanim.scene import SceneGraph
from diomanim.builder import SceneBuilder

scene = SceneGraph()
builder = SceneBuilder(scene)

sun = builder.add_circle("sun", 1.0, (1.0, 0.8, 0.0, 1.0)).at(10.0, 0.0, 0.0).build()
builder.add_square("box", 2.0, (0.0, 0.0, 1.0, 1.0)).at(5.0, 0.0, 0.0).parent_to(sun)

scene.update_transforms()
for matrix, renderable, opacity in scene.visible_renderables():
    print(renderable, opacity)
```

```python
from diomanim.playback import PlaybackState

playback = PlaybackState(duration=3.0)
print(playback.handle_key("space"))   # Playback: ▶ Playing
playback.update(0.5)
print(playback.progress())
```

## What it does not do

The package does not draw anything to the screen or to image files: there is
no GPU renderer, no preview window and no frame export. It has no animation
effects or keyframes either; scene nodes are moved, scaled and faded by
setting their values directly. Playback state and key handling are provided
for a front end to drive, but no front end is included.