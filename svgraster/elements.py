"""Drawable SVG shapes: ellipses, circles, polylines, lines, polygons, rectangles and groups."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from .color import Color
from .png_image import PNGImage
from .point import Point

_ORIGIN = Point(0, 0)


class SVGElement(ABC):
    """A shape that can be drawn on an image and transformed in place."""

    @abstractmethod
    def draw(self, img: PNGImage) -> None:
        """Draw the element on ``img``."""

    @abstractmethod
    def translate(self, tx: int, ty: int) -> None:
        """Move the element by ``(tx, ty)``."""

    @abstractmethod
    def rotate(self, v: int) -> None:
        """Rotate the element by ``v`` degrees."""

    @abstractmethod
    def scale(self, v: int) -> None:
        """Scale the element by the factor ``v``."""


@dataclass
class Ellipse(SVGElement):
    """A filled axis-aligned ellipse."""

    fill: Color
    center: Point
    radius: Point

    def draw(self, img: PNGImage) -> None:
        img.draw_ellipse(self.center, self.radius, self.fill)

    def translate(self, tx: int, ty: int) -> None:
        self.center = self.center.translate(Point(tx, ty))

    def rotate(self, v: int) -> None:
        # Rotation happens around the ellipse's own center.
        self.center = self.center.rotate(self.center, v)

    def scale(self, v: int) -> None:
        # Scaling happens around the ellipse's own center.
        self.center = self.center.scale(self.center, v)


class Circle(Ellipse):
    """A filled circle."""

    def __init__(self, fill: Color, center: Point, radius: int) -> None:
        super().__init__(fill, center, Point(radius, radius))


@dataclass
class Polyline(SVGElement):
    """An open chain of line segments."""

    stroke: Color
    points: list[Point]

    def __post_init__(self) -> None:
        self.points = list(self.points)

    def draw(self, img: PNGImage) -> None:
        for a, b in zip(self.points, self.points[1:]):
            img.draw_line(a, b, self.stroke)

    def translate(self, tx: int, ty: int) -> None:
        offset = Point(tx, ty)
        self.points = [p.translate(offset) for p in self.points]

    def rotate(self, v: int) -> None:
        self.points = [p.rotate(_ORIGIN, v) for p in self.points]

    def scale(self, v: int) -> None:
        self.points = [p.scale(_ORIGIN, v) for p in self.points]


class Line(Polyline):
    """A single line segment."""

    def __init__(self, stroke: Color, p1: Point, p2: Point) -> None:
        super().__init__(stroke, [p1, p2])


@dataclass
class Polygon(SVGElement):
    """A filled closed polygon."""

    fill: Color
    points: list[Point]

    def __post_init__(self) -> None:
        self.points = list(self.points)

    def draw(self, img: PNGImage) -> None:
        img.draw_polygon(self.points, self.fill)

    def translate(self, tx: int, ty: int) -> None:
        offset = Point(tx, ty)
        self.points = [p.translate(offset) for p in self.points]

    def rotate(self, v: int) -> None:
        self.points = [p.rotate(_ORIGIN, v) for p in self.points]

    def scale(self, v: int) -> None:
        self.points = [p.scale(_ORIGIN, v) for p in self.points]


class Rect(Polygon):
    """A filled axis-aligned rectangle."""

    def __init__(self, fill: Color, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            fill,
            [
                Point(x, y),
                Point(x + width, y),
                Point(x + width, y + height),
                Point(x, y + height),
            ],
        )


@dataclass
class Group(SVGElement):
    """A collection of elements drawn and transformed together."""

    elements: list[SVGElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.elements = list(self.elements)

    def __iter__(self) -> Iterable[SVGElement]:
        return iter(self.elements)

    def draw(self, img: PNGImage) -> None:
        for element in self.elements:
            element.draw(img)

    def translate(self, tx: int, ty: int) -> None:
        for element in self.elements:
            element.translate(tx, ty)

    def rotate(self, v: int) -> None:
        for element in self.elements:
            element.rotate(v)

    def scale(self, v: int) -> None:
        for element in self.elements:
            element.scale(v)