# wireframe

A viewer that draws a height map as a wireframe mesh in a pygame window.

## Map files

A map is a plain text file with one row of the grid per line. Values on a line
are separated by spaces. Each value is a height, optionally followed by a comma
and a colour written as `0xRRGGBBAA`:

```
0 0 0 0
0 10,0xFF0000FF 10 0
0 10 10,0x00FF00FF 0
0 0 0 0
```

- Heights are read like C's `atoi`: leading whitespace, an optional sign, then
  digits; anything after the digits is ignored, and a value with no digits is 0.
- The first two characters of a colour are taken as its prefix and skipped;
  characters that are not hex digits count as 0.
- Points without a colour are drawn in white (`0xFFFFFFFF`).
- The grid width is the number of values on the last line read.
- A file with no values at all is rejected with a `ValueError`.

Lines join each point to its right and lower neighbours, and their colour
blends from one end to the other. The background is opaque black.

## Installing

```
pip install .
```

## Running

```
wireframe path/to/map.fdf
```

The command takes exactly one argument. With any other number of arguments, or
when the file cannot be read or holds no points, it prints a message to
standard error and exits with status 1.

The window opens at 1280×960 and can be resized; the mesh is kept centred in
it. The view starts rotated 54° about X, 0° about Y and 35° about Z.

### Controls

| Key             | Action                                        |
|-----------------|-----------------------------------------------|
| Arrow keys      | Move the mesh by 5 pixels                     |
| Q / A           | Rotate about the X axis (+5° / −5°)           |
| W / S           | Rotate about the Y axis (+5° / −5°)           |
| E / D           | Rotate about the Z axis (+5° / −5°)           |
| R / F           | Raise or flatten the heights (never below 1)  |
| Mouse wheel     | Zoom in or out by 10 %                        |
| Space           | Reset the view (overrides the other keys)     |
| Escape          | Quit                                          |

Keys act for as long as they are held, once per frame.

## Using it as a library

Everything except the window works without pygame:

```python
from wireframe.heightmap import parse_lines
from wireframe.transform import Lookup, Transformation
from wireframe.raster import Canvas, render

heightmap = parse_lines(["0 0 0", "0 5,0xFF0000FF 0", "0 0 0"])
canvas = Canvas(320, 240)
render(canvas, heightmap, Transformation(), Lookup.build())
print(canvas.get_pixel(160, 120))
```

- `wireframe.heightmap`: `HeightMap`, `parse_lines` and `parse_map` for
  reading maps, plus the `atoi` and `split_words` helpers they use.
- `wireframe.transform`: `Transformation` holds the view (`translate`,
  `rotate`, `scale`, `zoom`, `reset`), `Direction` names the steps, and
  `Lookup.build()` makes the fixed-point sine and cosine tables.
- `wireframe.projection`: `project` turns a height map into a `Projection`
  of screen coordinates with their bounds; `Projection.compute_offset`
  centres it in an image.
- `wireframe.raster`: `Canvas` is a grid of packed RGBA pixels
  (`put_pixel`, `get_pixel`, `fill`, `resize`, `to_rgba_bytes`), `draw_line`
  draws a colour-graded line, and `render` clears a canvas and draws a whole
  map on it.
- `wireframe.color`: packing (`get_rgba`), unpacking (`split_rgba`),
  blending (`interpolate_colors`) and parsing (`convert_color`) of colours.
- `wireframe.app`: `Engine` ties a map, a view and a canvas together and
  takes key, scroll and resize input; `main` is the `wireframe` command.

## What it does not do

The viewer only shows the map on screen. It does not save pictures to a file,
and it does not edit or write map files.

## Tests

```
pip install .[test]
pytest
```