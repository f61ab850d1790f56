# fdfwave

Tools for `.fdf` height maps and the pixel data used to show them.

- **`fdfwave.fdfmap`** reads a `.fdf` file into a grid of `Point` objects. Each
  point has a height `z` and a `color`. The module provides `read_grid`,
  `parse_row`, `parse_color` and `grid_size`, and raises `MapError` for:
  - a missing file,
  - a directory,
  - a name without `.fdf`,
  - an empty grid or an empty row.

  A token is `z` or `z,color`. The colour may be decimal or hexadecimal after
  an `x`. A point without a colour gets the base colour, which defaults to
  `0xFFFFFF`.
- **`fdfwave.wave`** provides `WaveSimulation(grid, stability)`. It treats the
  grid heights as the starting shape of a 2D wave equation with zero initial
  velocity and zero-slope (Neumann) edges.
  - Each call to `step(grid)` writes the current heights into the grid's points
    and recolours them with `height_color`. It then advances one time step.
  - `heights()` returns a copy of the current heights.
  - `height_color(z)` gives bright green at 0, lime to orange above 0, and
    teal to blue below 0.
- **`fdfwave.image`** provides `Image(width, height, bits_per_pixel=32, big_endian=False)`.
  It is a packed pixel buffer whose rows are padded to 32 bits. It has
  `put_pixel`, `get_pixel`, `row`, and the attributes `data` and `size_line`.
- **`fdfwave.xpm`** decodes XPM images into a 32-bit `Image`. Use
  `xpm_file_to_image` for a file and `xpm_to_image` for a list of strings.
  Malformed input raises `XpmError`.
  - Comments outside quotes are blanked out by `strip_comments`.
  - Colours named `none` become `0xFF000000`.
  - The helpers `quoted_lines`, `color_key` and `parse_xpm` are public as well.
- **`fdfwave.colors`** provides `lookup_color(name, end=None)`. It resolves
  `#RRGGBB` specs and X11 colour names, matched case-insensitively. `none`
  gives -1 and unknown names give 0.
- **`fdfwave.visual`** converts `0xRRGGBB` colours to pixel values for visuals
  shallower than 24 bits:
  - `rgb_shifts(red_mask, green_mask, blue_mask)` works out the channel shifts
    and widths.
  - `good_color(color, depth, shifts)` applies them.
- **`fdfwave.textscan`** holds the small text helpers the XPM reader uses:
  `split_words`, `find` and `find_unquoted`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Example

```python
from fdfwave.fdfmap import read_grid, grid_size
from fdfwave.wave import WaveSimulation

grid = read_grid("maps/42.fdf")
width, height = grid_size(grid)

sim = WaveSimulation(grid, stability=0.25)
for _ in range(10):
    sim.step(grid)          # grid now holds new heights and colours

print(sim.heights()[0][:5])
```

Decoding an XPM image held in memory:

```python
from fdfwave.xpm import xpm_to_image

img = xpm_to_image([
    "2 1 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
])
assert img.get_pixel(0, 0) == 0xFF0000
assert img.get_pixel(1, 0) == 0x0000FF
```

## What it does not do

This package has no window, no event loop and no command-line program. It does
not project the grid onto the screen or draw lines between points. It gives you:

- the map data,
- the simulated heights and colours,
- decoded images,
- colour conversions.

Putting these on screen is left to the code that uses the package.