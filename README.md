# wireframe

Tools for drawing height-map wireframes in isometric projection, with a
small in-memory pixel image and an XPM image reader. Pure Python, no
dependencies.

## What is inside

- `wireframe.projection` – `Point` (grid position, height, colour and the
  projected positions) and `WireMap` (a row-by-row grid of points with
  `point(x, y)` access). `project(wire_map)` fills in each point's isometric
  and screen coordinates, scaled to a 1280×920 canvas with a 50-pixel top
  margin. It raises `ValueError` when the map has no extent to scale.
- `wireframe.draw` – `draw_segment(start, end, put_pixel)` plots one line,
  one pixel per step, with a per-channel colour gradient when the two ends
  differ in colour; `draw_wireframe(wire_map, put_pixel)` draws every edge
  between horizontally and vertically neighbouring points.
  `blend_color(color, step, count)` computes a single gradient step.
  `put_pixel` is any callable taking `(x, y, color)`.
- `wireframe.hextoi` – `hextoi(text)` reads the hexadecimal number written
  after the first `x` or `X`, e.g. `hextoi("10,0xFF00FF") == 0xFF00FF`. It
  returns 0 for `None` and raises `ValueError` when there is no marker.
- `wireframe.image` – `Image(width, height, bits_per_pixel=32,
  byte_order=LSB_FIRST)`, a pixel buffer whose rows are padded to 32 bits,
  with `put_pixel`, `get_pixel` and `row`. `Visual` with `color_value`
  converts `0xRRGGBB` to the pixel layout of a visual of lower depth;
  `channel_shifts` derives that layout from the channel bit masks.
- `wireframe.xpm` – `xpm_from_file(path)` and `xpm_from_data(lines)` read
  XPM images into an `Image`; `parse_xpm`, `strip_comments` and
  `extract_strings` are the steps underneath. The colour `None` is stored
  as `0xFF000000`. Malformed input raises `XpmError`.
- `wireframe.colors` – `lookup_color(name, suffix)` resolves X11 colour names
  case-insensitively and `#rrggbb` notation; `none` gives -1, unknown names 0.
- `wireframe.text` – `split_words`, `find` and `find_unquoted`, small string
  helpers used by the XPM reader.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from wireframe.projection import Point, WireMap, project
from wireframe.draw import draw_wireframe
from wireframe.image import Image

heights = [[0, 0, 0], [0, 10, 0], [0, 0, 0]]
points = [
    Point(x=x, y=y, z=z, color=0xFFFFFF)
    for y, row in enumerate(heights)
    for x, z in enumerate(row)
]
wire_map = WireMap(width=3, height=3, points=points)
project(wire_map)

canvas = Image(1280, 920)

def put_pixel(x, y, color):
    if 0 <= x < canvas.width and 0 <= y < canvas.height:
        canvas.put_pixel(x, y, color)

draw_wireframe(wire_map, put_pixel)
```

Reading an XPM file:

```python
from wireframe.xpm import xpm_from_file

image = xpm_from_file("open.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

## What it does not do

The package has no command-line program and opens no window: drawing goes
to a callback or an in-memory `Image`, and showing or saving the result is
up to the caller. It also has no reader for height-map files; build the
`Point` list yourself (for instance with `hextoi` for cell colours) and pass
it to `WireMap`.