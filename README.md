# mifview

`mifview` reads, edits and writes images stored in the MIF format. A MIF
file has two text lines followed by raw pixel data:

- The first line is `width;height;physical_width;physical_height;unit`.
- The second line holds the metadata as `key:value` pairs separated by `;`.
- The pixels follow row by row from the top. Each pixel is three
  little-endian unsigned 16-bit channels: red, green and blue. The value
  65535 means full intensity.

In memory a channel is a float from 0.0 to 1.0. When an image is saved,
each channel is scaled to 0–65535, truncated and clamped.

Two colours *match* when each channel of one lies within 0.05 of the same
channel of the other, inclusive.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
mifview info PATH
mifview filter PATH X Y OUTPUT [--view WIDTHxHEIGHT]
mifview detect PATH X Y OUTPUT [--view WIDTHxHEIGHT]
mifview metadata PATH OUTPUT ENTRY [ENTRY ...]
```

- `info` prints the pixel size (`Pixeles: WxH`), the physical size and unit
  (`Tamaño: WxH unit`), and the metadata as `key: value` lines.
- `filter` takes the colour of the pixel at column `X`, row `Y` as the
  reference. Every pixel that does not match it becomes grey at its own
  brightness (the mean of its channels). The result is written to `OUTPUT`.
- `detect` takes the colour at (`X`, `Y`) and the 8-connected region of
  matching pixels that contains that point. That region is painted green
  and every other pixel black. The result is written to `OUTPUT`. The
  region is not extended outward from the top-left pixel (0, 0).
- `metadata` replaces all the metadata with the given `key: value` entries
  and writes the image to `OUTPUT`. Where a key appears twice, the later
  entry wins.

With `--view WIDTHxHEIGHT`, `X` and `Y` are read as a position inside a
display area of that size. The image is taken to be scaled uniformly to fit
the area and centred in it, and the position is converted to pixel
coordinates.

The exit status is 0 on success and 1 on failure. Failures include a point
outside the image, a file that cannot be read or written, and malformed MIF
data. In each case a message is printed to standard error.

## Library use

```python
from mifview import mif
from mifview.image import Image
from mifview.pixel import Pixel
from mifview.system import System

image = Image(4, 3)
image.set_pixel(1, 1, Pixel(1.0, 0.0, 0.0))
mif.save("small.mif", image)

system = System()
system.load_image("small.mif")
print(system.pixel_size_text(), end="")
print(system.physical_size_text(), end="")
print(system.metadata_text())

system.apply_filter(Pixel(1.0, 0.0, 0.0))   # keep red, grey out the rest
system.update_metadata_text("author: someone\nsubject: test")
system.save_image("filtered.mif")
```

The modules:

- `mifview.pixel`: `Pixel`, an immutable colour with `red`, `green` and
  `blue`. It has `brightness()`, `grayscale()` and `matches(other)`.
- `mifview.metadata`: `Metadata` is a key/value store that iterates in key
  order. It has `add` (keeps an existing value), `set` (replaces), `clear`,
  `display()` (`key: value` lines) and `serialize()` (`key:value` pairs
  joined by `;`). `parse_display_text` and `parse_serialized` read those
  texts back.
- `mifview.image`: `Image` holds the pixel grid, `physical_width`,
  `physical_height`, `unit` (default `n/s`) and `metadata`. It has
  `resize`, `get_pixel`, `set_pixel`, `contains`, `iter_pixels` and
  `copy`. Access outside the grid raises `IndexError`.
- `mifview.mif`: `encode`, `decode`, `load` and `save`. Malformed data
  raises `MifError`, which is a subclass of `ValueError`.
- `mifview.processors`: the `Processor` base class and its two
  implementations, `ColorFilter(reference)` and
  `StructureDetector(x, y, reference)`. Both change an image in place.
- `mifview.system`: `System` holds the current image and applies loading,
  saving, filtering, detection and metadata editing to it.
- `mifview.view`: `widget_to_image` converts a position in a display area
  into image column and row.

## What it does not do

`mifview` has no graphical window and does not draw images on screen. To
pick a point, you give its coordinates on the command line, either directly
or relative to a display area of a stated size. It reads and writes only
MIF files.