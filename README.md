# svgraster

Turns simple SVG files into PNG images. It reads a small subset of SVG, with integer
coordinates only:

- `ellipse` (`cx`, `cy`, `rx`, `ry`, `fill`) and `circle` (`cx`, `cy`, `r`, `fill`)
- `line` (`x1`, `y1`, `x2`, `y2`, `stroke`) and `polyline` (`points`, `stroke`)
- `polygon` (`points`, `fill`) and `rect` (`x`, `y`, `width`, `height`, `fill`)
- `g`: groups, whose `transform` applies to the `circle` and `polygon` elements directly
  inside them. A nested group applies only its own transform to its own children.
  Other kinds of element inside a group are ignored.

Other elements are skipped. The root element's `width` and `height` give the size of
the image, which starts all white.

Each element may carry one `transform`: `translate(x, y)`, `rotate(deg)` or `scale(k)`,
with an optional `transform-origin="x y"` (default `0 0`). Arguments may be separated by
blanks or commas. For ellipses, circles and lines a scale factor below 1 is ignored.
A rotated `rect` is drawn as a polygon through its rotated corners.

Colours are either `#rrggbb` or one of the names `black`, `white`, `red`, `green`,
`blue` and `yellow`; anything else raises `ValueError`.

Pixels are set without anti-aliasing. Lines are drawn with Bresenham's algorithm and
filled shapes by scan lines, so results can be compared pixel by pixel.

## Installation

```
pip install .
```

## Command line

Convert a file:

```
svgtopng drawing.svg drawing.png
```

With the wrong number of arguments it prints a usage line. If the file cannot be read
or is malformed, the error is printed to standard error and the exit status is 1.

Print the element tree of an XML document, one element per line with its attributes,
children indented by two spaces:

```
xmldump drawing.svg
```

Run a set of conversion checks. The root directory must hold `input/*.svg` and
`expected/*.png`; converted images are written to `output/` (which must exist) and
details of each check go to `test_log.txt` in the root. The first argument selects the
inputs whose names begin with it; the second is the root directory, `.` by default:

```
svgraster-test "" path/to/checks
```

It prints `pass` or `fail` for each check, then a summary.

## Library

```python
from svgraster.convert import convert
from svgraster.readsvg import read_svg
from svgraster.png_image import PNGImage
from svgraster.color import parse_color
from svgraster.point import Point

convert("drawing.svg", "drawing.png")

dimensions, elements = read_svg("drawing.svg")   # Point(width, height), list of shapes

img = PNGImage(40, 30)          # starts all white
img.draw_line(Point(0, 0), Point(39, 29), parse_color("red"))
img.draw_ellipse(Point(20, 15), Point(10, 5), parse_color("#0000ff"))
img.save("shapes.png")
print(img[20, 15])              # Color(red=0, green=0, blue=255)
```

- `svgraster.color`: `Color` (a named tuple of `red`, `green`, `blue`) and `parse_color`.
- `svgraster.point`: `Point` with `translate`, `rotate` (rounding to the nearest
  integer) and `scale`.
- `svgraster.png_image`: `PNGImage` with `width`, `height`, pixel access by
  `img[x, y]` (out-of-range pixels raise `IndexError`), `draw_line`, `draw_polygon`,
  `draw_ellipse`, `save` and `PNGImage.load`.
- `svgraster.elements`: `Ellipse`, `Circle`, `Polyline`, `Line`, `Polygon`, `Rect` and
  `Group`, each with `draw(img)` and in-place `translate`, `rotate` and `scale`.
- `svgraster.transforms`: `parse_points`, `parse_transform` (returning a `Transform`
  with `kind` and `arguments`) and `parse_origin`.
- `svgraster.readsvg`: `read_svg`. Groups are flattened into the returned list.
- `svgraster.convert`: `convert`.
- `svgraster.xmldump`: `dump`, returning the tree listing as a string.
- `svgraster.testdriver`: `TestDriver` and `images_match`.

## What it does not do

There are no paths, text, gradients, stroke widths, opacity or fractional coordinates,
and only one transform per element. Shapes drawn partly outside the canvas raise
`IndexError` rather than being clipped.

## Tests

```
pip install ".[test]"
pytest
```