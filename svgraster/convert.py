"""Conversion of SVG files to PNG images, and the ``svgtopng`` command."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .png_image import PNGImage
from .readsvg import read_svg


def convert(svg_file: str | os.PathLike, png_file: str | os.PathLike) -> None:
    """Read ``svg_file``, draw its elements on a blank image and save it as ``png_file``."""
    dimensions, elements = read_svg(svg_file)
    image = PNGImage(dimensions.x, dimensions.y)
    for element in elements:
        element.draw(image)
    image.save(png_file)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert the SVG file named first on the command line to the PNG file named second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: svgtopng in_file.svg out_file.png")
        return 0
    svg_file, png_file = args
    print(f"Performing conversion ... {svg_file} --> {png_file}")
    try:
        convert(svg_file, png_file)
    except (OSError, ValueError) as exc:
        print(f"{svg_file}: {exc}", file=sys.stderr)
        return 1
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())