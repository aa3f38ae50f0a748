# thzimage

A small image toolkit built around 8-bit BGRA pixels held in flat,
row-major Python lists. It has no dependencies beyond the standard library.

## Modules

- `thzimage.pixel`
  - `BGRAPixel(blue, green, red, alpha=255)`: an immutable pixel whose
    channels must be integers in 0..255 (`ValueError` otherwise).
    `distance_squared(other)` gives the squared distance of the colour
    channels (alpha ignored), `diff_abs(other)` the per-channel absolute
    difference. `a - b` gives a difference centred on neutral grey (0x80),
    wrapping like unsigned bytes and keeping `a`'s alpha; `(a - b) + b == a`.
  - `HSVAPixel(hue, saturation, value, alpha=255)`: hue in radians, the
    other channels bytes.
  - `lerp(a, b, t)`: interpolates two pixels of the same type; for
    `HSVAPixel` the hue is interpolated on the unit circle. Mixing types
    raises `TypeError`.
- `thzimage.view`
  - `Point`, and `Rectangle(x, y, width, height)` with `area()`,
    `intersection(other)` and `range()` (the pixel indices of a buffer of
    that size).
  - `ImageTransformer`: the abstract stage of a pixel chain, with
    `dimensions()`, `transform()` (the next pixel, or `None` when none is
    left), `skip()`, `reset()` and `next_image()`.
  - `ImageView(buffer, image_dimensions, region=None)`: a view onto a region
    of a buffer, clipped to the image. It walks the region row by row, is
    the start of a transformer chain, offers `sub_view(sub_region)` and
    `current_position`, and iterating it yields the remaining pixels.
- `thzimage.transformers`
  - `NullTransformer`: produces nothing; every call fails.
  - `Borders(top, right, bottom, left)` (each 0..255) and
    `BorderTransformer(wrapped, borders, color)`, which surrounds the
    wrapped image with a border of one colour. Without a wrapped stage it
    behaves like a `NullTransformer`.
  - `PixelTransformer(wrapped, transformation)` and
    `create_pixel_transformer(wrapped, transformation)`, which apply a
    pixel-to-pixel function; a class given to the helper is instantiated
    with no arguments.
- `thzimage.interfaces`
  - `ImageReader`: `image_present()`, `init()`, `dimensions()`, `read()`,
    `deinit()`, and `read_image()`, which runs a whole cycle and returns
    `(dimensions, pixels)`, calling `deinit()` even on failure.
  - `ImageWriter`: `init()`, `write(dimensions, buffer)`, `deinit()`, and
    `write_image(dimensions, buffer)` for a whole cycle.
  - `AsyncWriter(writer)`: writes images with the wrapped writer on a
    background thread. `write(dimensions, buffer)` copies the pixels and
    returns `False` while the previous image is still being written.
    `close()` (or leaving a `with` block) finishes the pending image and
    stops the thread. Write errors are logged, not raised.
- `thzimage.bmp`
  - `BmpHeader`: the 54-byte header, with `for_image(width, height,
    bit_count)`, `pack()` and `unpack(data)`.
  - `BmpReader(filepath)`: reads uncompressed 24 and 32 bit files, stored
    bottom-up or top-down; `file_type_fits()` checks the magic bytes.
    Pixels are returned top row first.
  - `BmpWriter(filepath, transparency=True)`: writes 32 bit files, or 24
    bit files with padded lines when `transparency` is false.
  - Every problem is raised as `BmpError`.
- `thzimage.series`
  - `SeriesReader(directory, reader_factory)`: reads the files of a
    directory in sorted order, skipping those whose reader's
    `file_type_fits()` is false. `deinit()` moves on to the next file;
    `current_filepath()` and `skip_file()` tell and change where it is.

## Example

```python
from thzimage.bmp import BmpReader, BmpWriter
from thzimage.pixel import BGRAPixel
from thzimage.series import SeriesReader
from thzimage.transformers import Borders, BorderTransformer
from thzimage.view import ImageView, Rectangle

dimensions = Rectangle(width=4, height=4)
buffer = [BGRAPixel(10, 20, 30) for _ in range(dimensions.area())]

framed = BorderTransformer(ImageView(buffer, dimensions), Borders(1, 1, 1, 1), BGRAPixel(0, 0, 0))
out_dims = framed.dimensions()
pixels = [framed.transform() for _ in out_dims.range()]

BmpWriter("framed.bmp").write_image(out_dims, pixels)
read_dims, read_pixels = BmpReader("framed.bmp").read_image()

series = SeriesReader(".", BmpReader)
while series.image_present():
    dims, image = series.read_image()
```

## What it does not do

The package reads and writes BMP files only: there is no support for PNG,
GIF or other formats, no conversion between `BGRAPixel` and `HSVAPixel`,
no image container class beyond plain lists, and no command-line tool.

## Installation and tests

```
pip install .[test]
pytest
```