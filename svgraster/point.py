"""Integer 2D points with translation, rotation and scaling."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _lround(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True, slots=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def translate(self, t: Point) -> Point:
        """Return this point moved by the offset ``t``."""
        return Point(self.x + t.x, self.y + t.y)

    def rotate(self, origin: Point, degrees: int) -> Point:
        """Return this point rotated by ``degrees`` around ``origin``."""
        angle = math.pi * degrees / 180.0
        dx = self.x - origin.x
        dy = self.y - origin.y
        s = math.sin(angle)
        c = math.cos(angle)
        rx = _lround(c * dx - s * dy)
        ry = _lround(s * dx + c * dy)
        return Point(origin.x + rx, origin.y + ry)

    def scale(self, origin: Point, v: int) -> Point:
        """Return this point scaled by the factor ``v`` around ``origin``."""
        return Point(origin.x + (self.x - origin.x) * v, origin.y + (self.y - origin.y) * v)