# quadkit

Building blocks for an immediate-mode user interface, written in plain
Python with no runtime dependencies: value types, a widget layout cursor,
per-frame input state, widget styles, draw commands and a rasterizer that
batches those commands into triangle meshes.

## What is inside

- `quadkit.geometry` – `Vec2`, `Rect`, `RectOffset` and `Color` value types.
  `Rect` offers `contains`, `overlaps`, `intersect`, `combine_with` and
  `offset`; `Color.from_rgba` builds a color from 0..255 channels.
- `quadkit.layout` – the layout `Cursor` that decides where the next widget
  goes (`Layout.vertical()`, `Layout.horizontal()`, `Layout.free(point)`),
  with its `Scroll` state.
- `quadkit.input` – `Input` state for one frame, `KeyCode`,
  `InputCharacter`, an in-memory `ClipboardObject` and `KeyRepeat`, which
  emulates key auto-repeat (a held key fires once, then repeats after half a
  second).
- `quadkit.commands` – draw commands (`DrawRect`, `DrawSprite`, `DrawLine`,
  `DrawTriangle`, `DrawCharacter`, `DrawRawTexture`, `Clip`), each with
  `offset` and `estimate_triangles_budget`, plus `ElementState`,
  `Alignment` and `LabelParams`.
- `quadkit.style` – `Style` (colors and background sprite per
  `ElementState`), the immutable `StyleBuilder` and the default `Skin`.
- `quadkit.render` – `DrawList`, `Vertex` and `render_command`, turning draw
  commands into batched meshes. A new batch starts when the clipping zone or
  texture changes, or when a batch would reach 8000 vertices or 4000 indices.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## A short tour

Laying out widgets with the cursor:

```python
from quadkit.geometry import Rect, Vec2
from quadkit.layout import Cursor, Layout

cursor = Cursor(Rect(0, 0, 200, 100), margin=2.0)
first = cursor.fit(Vec2(50, 20), Layout.vertical())   # Vec2(2.0, 2.0)
second = cursor.fit(Vec2(50, 20), Layout.vertical())  # Vec2(2.0, 24.0)
```

Picking colors from the default skin. Background images are handed to a
callable of your own, which stores them and returns a sprite id:

```python
from itertools import count

from quadkit.commands import ElementState
from quadkit.style import Skin

ids = count()
skin = Skin.default(lambda image: next(ids))
hovered = skin.button_style.color_for(ElementState(focused=True, hovered=True))
```

Turning draw commands into meshes:

```python
from quadkit.commands import DrawRect
from quadkit.geometry import Color, Rect
from quadkit.render import render_command

draw_lists = []
render_command(
    draw_lists,
    DrawRect(Rect(10, 10, 40, 20), Rect(0, 0, 1, 1), fill=Color(1, 0, 0, 1)),
)
mesh = draw_lists[-1]
print(len(mesh.vertices), mesh.indices)  # 4 [0, 1, 2, 0, 2, 3]
```

## What it does not do

quadkit has no window, event loop or GPU backend: it produces vertices and
indices in `DrawList` objects, and drawing them on screen is up to you. It
does not load fonts or measure text, and it has no ready-made widgets such
as buttons or edit boxes, nor text-editing logic; `Input`, `Style` and the
draw commands are the pieces such widgets are built from. It does not read
tile maps.