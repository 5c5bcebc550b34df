"""8-bit RGB colours and parsing of colour names and ``#rrggbb`` values."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import NamedTuple


class Color(NamedTuple):
    """An 8-bit RGB colour."""

    red: int
    green: int
    blue: int


NAMED_COLORS = MappingProxyType(
    {
        "black": Color(0, 0, 0),
        "white": Color(255, 255, 255),
        "red": Color(255, 0, 0),
        "green": Color(0, 255, 0),
        "blue": Color(0, 0, 255),
        "yellow": Color(255, 255, 0),
    }
)

_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_INT_MAX = 0x7FFFFFFF
_INT_MIN = -0x80000000


def parse_color(text: str) -> Color:
    """Parse a colour name or a ``#rrggbb`` hexadecimal value.

    Raises ValueError for an empty string, a malformed hexadecimal value
    or an unknown colour name.
    """
    if not text:
        raise ValueError("empty colour specification")
    if text[0] == "#":
        match = _HEX_RE.match(text, 1)
        if match is None:
            raise ValueError(f"invalid hexadecimal colour: {text!r}")
        sign, digits = match.groups()
        value = int(digits, 16)
        if sign == "-":
            value = -value
        value = max(_INT_MIN, min(_INT_MAX, value))
        return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    try:
        return NAMED_COLORS[text]
    except KeyError:
        raise ValueError(f"unknown colour name: {text!r}") from None