"""
Markup helpers shared by shapes and documents.

Leaf elements are built as ElementTree elements so that attribute values and
text are escaped by the serializer. Group and document envelopes are written
as text so nested bodies can be indented one tab per level.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict
from xml.sax.saxutils import escape

from svg_scene.core import CONFIG

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def format_number(value: float) -> str:
    """
    Format a number for markup using the configured significant digits.

    Args:
        value: Number to format

    Returns:
        Compact decimal representation (``30.0`` -> ``"30"``)
    """
    text = f"{value:.{CONFIG['number_precision']}g}"
    # Avoid emitting "-0" for values that round to zero
    return "0" if text == "-0" else text


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def attribute(name: str, value: Any, unit: str = "") -> str:
    """
    Render one ``name="value"`` pair followed by a space.

    Args:
        name: Attribute name
        value: Attribute value; numbers are formatted with format_number
        unit: Optional unit suffix such as ``"px"``

    Returns:
        Attribute fragment
    """
    text = escape(_format_value(value) + unit, _ATTRIBUTE_ENTITIES)
    return f'{name}="{text}" '


def attributes(pairs: Dict[str, Any]) -> str:
    """Render an ordered mapping of attributes as one fragment."""
    return "".join(attribute(name, value) for name, value in pairs.items())


def element_start(name: str) -> str:
    return f"<{name} "


def element_end(name: str) -> str:
    return f"</{name}>\n"


def build_element(tag: str, pairs: Dict[str, Any]) -> ET.Element:
    """
    Create an element with attributes set in insertion order.

    Args:
        tag: Element name
        pairs: Attribute mapping; numbers are formatted with format_number

    Returns:
        New element
    """
    element = ET.Element(tag)
    for name, value in pairs.items():
        element.set(name, _format_value(value))
    return element


def serialize_element(element: ET.Element) -> str:
    """Serialize an element to markup text terminated by a newline."""
    return ET.tostring(element, encoding="unicode") + "\n"


def indent(text: str) -> str:
    """
    Insert one indentation unit at the start of every line.

    A trailing empty line (the part after a final newline) is left alone, so
    indenting already-indented text stays balanced.

    Args:
        text: Markup text, usually newline-terminated

    Returns:
        Indented text
    """
    unit = CONFIG["indent_string"]
    pieces = text.split("\n")
    body = "".join(f"{unit}{piece}\n" for piece in pieces[:-1])
    tail = pieces[-1]
    return body + (unit + tail if tail else "")
