"""Parsing of point lists, transform attributes and transform origins."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .point import Point

_INT_RE = re.compile(r"[+-]?[0-9]+")
_WHITESPACE = " \t\n\v\f\r"
_INT_MAX = 0x7FFFFFFF
_INT_MIN = -0x80000000


class _Scanner:
    """Reads whitespace-separated integers and characters from a string.

    Once a read fails, every later read fails too.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.ok = True

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def read_int(self) -> int:
        """Read a decimal integer.

        Returns 0 when no integer is found and a clamped value on overflow;
        either case marks the scanner as failed.
        """
        if not self.ok:
            return 0
        self._skip_whitespace()
        match = _INT_RE.match(self._text, self._pos)
        if match is None:
            self.ok = False
            return 0
        self._pos = match.end()
        value = int(match.group())
        if value > _INT_MAX:
            self.ok = False
            return _INT_MAX
        if value < _INT_MIN:
            self.ok = False
            return _INT_MIN
        return value

    def read_char(self) -> str:
        """Read the next character that is not whitespace."""
        if not self.ok:
            return ""
        self._skip_whitespace()
        if self._pos >= len(self._text):
            self.ok = False
            return ""
        char = self._text[self._pos]
        self._pos += 1
        return char

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at the end."""
        if not self.ok or self._pos >= len(self._text):
            return ""
        return self._text[self._pos]

    def skip(self) -> None:
        """Consume one character."""
        if self.ok and self._pos < len(self._text):
            self._pos += 1

    def read_until(self, delimiter: str) -> str:
        """Read up to ``delimiter``, consuming it; read to the end if it is absent."""
        if not self.ok:
            return ""
        if self._pos >= len(self._text):
            self.ok = False
            return ""
        end = self._text.find(delimiter, self._pos)
        if end < 0:
            result = self._text[self._pos :]
            self._pos = len(self._text)
            return result
        result = self._text[self._pos : end]
        self._pos = end + 1
        return result


@dataclass(frozen=True)
class Transform:
    """A transform such as ``translate``, ``rotate`` or ``scale`` and its integer arguments."""

    kind: str = ""
    arguments: tuple[int, ...] = ()


def parse_points(text: str) -> list[Point]:
    """Parse a list of points written as ``x,y x,y ...``.

    Any single non-blank character separates the coordinates of a point and
    an optional comma may follow each point. Parsing stops at the first
    point that cannot be read.
    """
    scanner = _Scanner(text)
    points: list[Point] = []
    while True:
        x = scanner.read_int()
        scanner.read_char()
        y = scanner.read_int()
        if not scanner.ok:
            return points
        points.append(Point(x, y))
        if scanner.peek() == ",":
            scanner.skip()


def parse_transform(text: str) -> Transform:
    """Parse a transform attribute such as ``translate(10, 20)``.

    The kind is everything before the opening parenthesis. Arguments are
    integers separated by blanks or commas, up to the closing parenthesis.
    """
    scanner = _Scanner(text)
    kind = scanner.read_until("(")
    arguments: list[int] = []
    while True:
        argument = scanner.read_int()
        if not scanner.ok:
            break
        arguments.append(argument)
        if scanner.peek() == ",":
            scanner.skip()
        if scanner.peek() == ")":
            scanner.skip()
            break
    return Transform(kind, tuple(arguments))


def parse_origin(text: str | None) -> Point:
    """Parse a transform origin written as ``x y``; missing parts are 0."""
    if text is None:
        return Point(0, 0)
    scanner = _Scanner(text)
    x = scanner.read_int()
    y = scanner.read_int()
    return Point(x, y)