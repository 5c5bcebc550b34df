"""Print the element tree of an XML document with each element's attributes."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from xml.dom import minidom
from xml.parsers.expat import ExpatError


def _child_elements(element: minidom.Element) -> list[minidom.Element]:
    return [c for c in element.childNodes if c.nodeType == c.ELEMENT_NODE]


def dump(element: minidom.Element, indentation: int = 0) -> str:
    """Return one line per element, nested children indented by two spaces."""
    attributes = "".join(f' {name}="{value}"' for name, value in element.attributes.items())
    lines = [f"{' ' * indentation}{element.tagName} --> [{attributes} ] \n"]
    lines.extend(dump(child, indentation + 2) for child in _child_elements(element))
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Dump the XML file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("Usage: xmldump filename")
        return 0
    try:
        document = minidom.parse(args[0])
    except (OSError, ExpatError) as exc:
        print(f"{args[0]}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(dump(document.documentElement, 0))
    return 0


if __name__ == "__main__":
    sys.exit(main())