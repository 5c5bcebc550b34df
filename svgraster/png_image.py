"""An in-memory RGB image that can be drawn on and saved as PNG."""

from __future__ import annotations

import os
from collections.abc import Sequence

from PIL import Image

from .color import Color
from .point import Point, _lround

_WHITE = b"\xff\xff\xff"


class PNGImage:
    """An RGB raster image. New images start all white."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = bytearray(_WHITE * (width * height))

    @classmethod
    def load(cls, path: str | os.PathLike) -> PNGImage:
        """Load an image from a PNG file."""
        try:
            with Image.open(path) as source:
                rgb = source.convert("RGB")
        except OSError as exc:
            raise OSError(f"{os.fspath(path)}: could not load image!") from exc
        image = cls(rgb.width, rgb.height)
        image._pixels[:] = rgb.tobytes()
        return image

    def save(self, path: str | os.PathLike) -> None:
        """Write the image to a PNG file."""
        Image.frombytes("RGB", (self._width, self._height), bytes(self._pixels)).save(
            path, format="PNG"
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _offset(self, key: tuple[int, int]) -> int:
        x, y = key
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return (y * self._width + x) * 3

    def __getitem__(self, key: tuple[int, int]) -> Color:
        i = self._offset(key)
        return Color(*self._pixels[i : i + 3])

    def __setitem__(self, key: tuple[int, int], color: Color) -> None:
        i = self._offset(key)
        self._pixels[i : i + 3] = bytes(color)

    def draw_line(self, a: Point, b: Point, color: Color) -> None:
        """Draw a line between two points with Bresenham's algorithm."""
        x, y = a.x, a.y
        x_to, y_to = b.x, b.y
        dy = y_to - y
        dx = x_to - x
        step_x = step_y = 1
        if dy < 0:
            dy, step_y = -dy, -1
        if dx < 0:
            dx, step_x = -dx, -1
        dy *= 2
        dx *= 2
        self[x, y] = color
        if dx > dy:
            fraction = dy - dx // 2
            while x != x_to:
                if fraction >= 0:
                    y += step_y
                    fraction -= dx
                x += step_x
                fraction += dy
                self[x, y] = color
        else:
            fraction = dx - dy // 2
            while y != y_to:
                if fraction >= 0:
                    x += step_x
                    fraction -= dy
                y += step_y
                fraction += dx
                self[x, y] = color

    def draw_polygon(self, points: Sequence[Point], fill: Color) -> None:
        """Fill a polygon by scan lines and draw its outline."""
        points = list(points)
        edges = list(zip(points, points[1:] + points[:1]))
        y_min = min([self._height, *(p.y for p in points)])
        y_max = max([0, *(p.y for p in points)])

        for y in range(y_min, y_max):
            crossings = sorted(
                (y - a.y) * (b.x - a.x) / (b.y - a.y) + a.x
                for a, b in edges
                if min(a.y, b.y) <= y <= max(a.y, b.y) and a.y != b.y
            )
            i = 0
            while i + 1 < len(crossings):
                start = Point(_lround(crossings[i]), y)
                end = Point(_lround(crossings[i + 1]), y)
                if start.x == end.x:
                    i += 1
                else:
                    self.draw_line(start, end, fill)
                    i += 2

        for a, b in edges:
            self.draw_line(a, b, fill)

    def draw_ellipse(self, center: Point, radius: Point, fill: Color) -> None:
        """Fill an axis-aligned ellipse with the given radii."""
        self.draw_line(
            center.translate(Point(-radius.x, 0)), center.translate(Point(radius.x, 0)), fill
        )
        x0 = radius.x
        dx = 0
        for y in range(1, radius.y + 1):
            vy = (y / radius.y) ** 2
            x1 = x0 - (dx - 1)
            while x1 > 0:
                if radius.x and (x1 / radius.x) ** 2 + vy <= 1:
                    break
                x1 -= 1
            dx = x0 - x1
            x0 = x1
            self.draw_line(center.translate(Point(-x0, -y)), center.translate(Point(x0, -y)), fill)
            self.draw_line(center.translate(Point(-x0, y)), center.translate(Point(x0, y)), fill)