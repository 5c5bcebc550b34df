"""Reading SVG documents into lists of drawable elements."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable

from .color import parse_color
from .elements import Circle, Ellipse, Line, Polygon, Polyline, Rect, SVGElement
from .point import Point
from .transforms import Transform, parse_origin, parse_points, parse_transform

_INT_ATTR_RE = re.compile(r"\s*(?:0[xX]([0-9a-fA-F]+)|([+-]?[0-9]+))")
_INT_MAX = 0x7FFFFFFF
_INT_MIN = -0x80000000
_NO_TRANSFORM = Transform()


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _int_attribute(element: ET.Element, name: str) -> int:
    """Return an integer attribute, or 0 when it is missing or unreadable."""
    text = element.get(name)
    if text is None:
        return 0
    match = _INT_ATTR_RE.match(text)
    if match is None:
        return 0
    hex_digits, decimal = match.groups()
    value = int(hex_digits, 16) if hex_digits is not None else int(decimal)
    return max(_INT_MIN, min(_INT_MAX, value))


def _required(element: ET.Element, name: str) -> str:
    text = element.get(name)
    if text is None:
        raise ValueError(f"<{_local_name(element.tag)}> is missing the {name!r} attribute")
    return text


def _own_transform(element: ET.Element) -> Transform:
    text = element.get("transform")
    return _NO_TRANSFORM if text is None else parse_transform(text)


def _argument(transform: Transform, index: int) -> int:
    try:
        return transform.arguments[index]
    except IndexError:
        raise ValueError(
            f"transform {transform.kind!r} needs at least {index + 1} argument(s)"
        ) from None


def _transform_points(
    points: list[Point],
    transform: Transform,
    element: ET.Element,
    min_scale: int | None = None,
) -> list[Point]:
    """Apply ``transform`` to ``points``, taking the origin from ``element``.

    A scale whose factor is below ``min_scale`` leaves the points unchanged.
    """
    if transform.kind == "translate":
        offset = Point(_argument(transform, 0), _argument(transform, 1))
        return [p.translate(offset) for p in points]
    if transform.kind == "rotate":
        origin = parse_origin(element.get("transform-origin"))
        degrees = _argument(transform, 0)
        return [p.rotate(origin, degrees) for p in points]
    if transform.kind == "scale":
        factor = _argument(transform, 0)
        if min_scale is not None and factor < min_scale:
            return points
        origin = parse_origin(element.get("transform-origin"))
        return [p.scale(origin, factor) for p in points]
    return points


def _scaled_radius(radius: Point, transform: Transform) -> Point:
    if transform.kind == "scale":
        factor = _argument(transform, 0)
        if factor >= 1:
            return Point(radius.x * factor, radius.y * factor)
    return radius


def _read_ellipse(element: ET.Element, transform: Transform) -> SVGElement:
    center = Point(_int_attribute(element, "cx"), _int_attribute(element, "cy"))
    radius = Point(_int_attribute(element, "rx"), _int_attribute(element, "ry"))
    fill = parse_color(_required(element, "fill"))
    radius = _scaled_radius(radius, transform)
    (center,) = _transform_points([center], transform, element, min_scale=1)
    return Ellipse(fill, center, radius)


def _read_circle(element: ET.Element, transform: Transform) -> SVGElement:
    center = Point(_int_attribute(element, "cx"), _int_attribute(element, "cy"))
    r = _int_attribute(element, "r")
    fill = parse_color(_required(element, "fill"))
    r = _scaled_radius(Point(r, r), transform).x
    (center,) = _transform_points([center], transform, element, min_scale=1)
    return Circle(fill, center, r)


def _read_polyline(element: ET.Element, transform: Transform) -> SVGElement:
    stroke = parse_color(_required(element, "stroke"))
    points = parse_points(_required(element, "points"))
    return Polyline(stroke, _transform_points(points, transform, element))


def _read_line(element: ET.Element, transform: Transform) -> SVGElement:
    stroke = parse_color(_required(element, "stroke"))
    p1 = Point(_int_attribute(element, "x1"), _int_attribute(element, "y1"))
    p2 = Point(_int_attribute(element, "x2"), _int_attribute(element, "y2"))
    p1, p2 = _transform_points([p1, p2], transform, element, min_scale=1)
    return Line(stroke, p1, p2)


def _read_polygon(element: ET.Element, transform: Transform) -> SVGElement:
    fill = parse_color(_required(element, "fill"))
    points = parse_points(_required(element, "points"))
    return Polygon(fill, _transform_points(points, transform, element))


def _read_rect(element: ET.Element, transform: Transform) -> SVGElement:
    x = _int_attribute(element, "x")
    y = _int_attribute(element, "y")
    width = _int_attribute(element, "width")
    height = _int_attribute(element, "height")
    fill = parse_color(_required(element, "fill"))

    if transform.kind == "translate":
        x += _argument(transform, 0)
        y += _argument(transform, 1)
    elif transform.kind == "rotate":
        # A rotated rectangle is no longer axis-aligned, so it becomes a polygon.
        origin = parse_origin(element.get("transform-origin"))
        degrees = _argument(transform, 0)
        corners = [
            Point(x, y),
            Point(x + width - 1, y),
            Point(x + width - 1, y + height - 1),
            Point(x, y + height - 1),
        ]
        return Polygon(fill, [corner.rotate(origin, degrees) for corner in corners])
    elif transform.kind == "scale":
        factor = _argument(transform, 0)
        origin = parse_origin(element.get("transform-origin"))
        width = width * factor - factor + 1
        height = height * factor - factor + 1
        x = origin.x + factor * (x - origin.x)
        y = origin.y + factor * (y - origin.y)

    return Rect(fill, x, y, width - 1, height - 1)


_Reader = Callable[[ET.Element, Transform], SVGElement]

_TOP_LEVEL_READERS: dict[str, _Reader] = {
    "ellipse": _read_ellipse,
    "circle": _read_circle,
    "polyline": _read_polyline,
    "line": _read_line,
    "polygon": _read_polygon,
    "rect": _read_rect,
}

_GROUP_READERS: dict[str, _Reader] = {
    "circle": _read_circle,
    "polygon": _read_polygon,
}


def _read_group(group: ET.Element, elements: list[SVGElement]) -> None:
    """Append a group's circles and polygons, transformed by the group's transform.

    Nested groups apply only their own transform.
    """
    transform = _own_transform(group)
    for child in group:
        name = _local_name(child.tag)
        if name == "g":
            _read_group(child, elements)
        elif name in _GROUP_READERS:
            elements.append(_GROUP_READERS[name](child, transform))


def read_svg(svg_file: str | os.PathLike) -> tuple[Point, list[SVGElement]]:
    """Read an SVG file and return its dimensions and its elements in document order.

    Raises OSError when the file cannot be read and ValueError when it is not
    well-formed XML or an element is malformed.
    """
    try:
        tree = ET.parse(svg_file)
    except OSError as exc:
        raise OSError(f"Unable to load {os.fspath(svg_file)}") from exc
    except ET.ParseError as exc:
        raise ValueError(f"Unable to load {os.fspath(svg_file)}") from exc

    root = tree.getroot()
    dimensions = Point(_int_attribute(root, "width"), _int_attribute(root, "height"))

    elements: list[SVGElement] = []
    for child in root:
        name = _local_name(child.tag)
        if name == "g":
            _read_group(child, elements)
        elif name in _TOP_LEVEL_READERS:
            elements.append(_TOP_LEVEL_READERS[name](child, _own_transform(child)))
    return dimensions, elements