"""Vector template decomposition.

Symbol templates are SVG documents whose primitives carry encoded ids:

- ``ch`` / ``cv``: horizontal and vertical reference axes. Their lengths set
  the unit of the output grid and their midpoints its origin.
- ``pin-<name>:<halign>:<valign>``: a horizontal or vertical lead bound to the
  first pin of group ``<name>`` in the pinout.
- ``<id>:<halign>:<valign>`` on a ``rect`` or ``text``: an attribute anchored
  at the aligned point of the primitive's bounding box.
- Anything else drawn with ``path``, ``line`` or ``polyline`` is a plain line.

Supported path commands are M, L, H, V and Z in absolute and relative form.
Lengths are millimetres; ``pt`` is converted and other units are rejected.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from component_foundry.drawing.elements import Attribute, Element, PinDirection, SymbolPin
from component_foundry.errors import (
    InvalidPathDataError,
    InvalidPinIdError,
    InvalidTemplateError,
    UnknownTemplatePinError,
    UnsupportedUnitsError,
)
from component_foundry.geom.primitives import HAlign, Line, Point, Rect, VAlign
from component_foundry.geom.transform import Transform
from component_foundry.units import length_scale, parse_length

if TYPE_CHECKING:
    from component_foundry.pinout import Pinout

__all__ = ["Template", "decompose", "parse_path_data"]

logger = logging.getLogger(__name__)

H_AXIS_ID = "ch"
V_AXIS_ID = "cv"
PIN_PREFIX = "pin"
ID_SEPARATOR = ":"

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_PATH_TOKEN_RE = re.compile(rf"[A-Za-z]|{_NUMBER}")
_PATH_SEPARATOR_RE = re.compile(r"^[\s,]*$")
_PIN_NAME_RE = re.compile(r"^pin-(.+)$")
_UNIT_RE = re.compile(rf"^\s*({_NUMBER})\s*([a-zA-Z%]*)\s*$")

_PATH_ARGS = {"M": 2, "L": 2, "H": 1, "V": 1, "Z": 0}
# subtrees referenced by other elements rather than drawn in place
_NON_RENDERED_TAGS = frozenset({"defs", "symbol", "clipPath", "marker", "mask", "pattern"})


@dataclass(frozen=True)
class Template:
    """Decomposed template.

    Attributes:
        transform: Canvas transform derived from the reference axes.
        elements: Elements in template coordinates, keyed by id in document order.
    """

    transform: Transform
    elements: dict[str, Element] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class _Stroke:
    id: str
    points: tuple[Point, ...]
    width: float


@dataclass(frozen=True, slots=True)
class _Box:
    id: str
    rect: Rect
    text: str
    font_size: float
    line_width: float


# ---------------------------------------------------------------------------
# Path data
# ---------------------------------------------------------------------------


def parse_path_data(data: str) -> list[list[Point]]:
    """Parse SVG path data into subpaths of points in user units.

    Raises:
        InvalidPathDataError: For unsupported commands, missing arguments, or
            characters that are neither commands nor numbers.
    """
    if not _PATH_SEPARATOR_RE.match(_PATH_TOKEN_RE.sub(" ", data)):
        raise InvalidPathDataError(data, "unexpected characters")
    tokens = _PATH_TOKEN_RE.findall(data)

    subpaths: list[list[Point]] = []
    points: list[Point] = []
    command: str | None = None
    x = y = 0.0
    start = Point(0.0, 0.0)
    index = 0

    while index < len(tokens):
        token = tokens[index]
        if token.isalpha():
            command = token
            index += 1
            if command.upper() not in _PATH_ARGS:
                raise InvalidPathDataError(data, f"unsupported command '{command}'")
            if command.upper() == "Z":
                if points:
                    points.append(start)
                    x, y = start.x, start.y
                continue
            if index >= len(tokens) or tokens[index].isalpha():
                raise InvalidPathDataError(data, f"command '{command}' has no arguments")
            continue
        if command is None:
            raise InvalidPathDataError(data, "path must begin with a moveto command")
        if command.upper() == "Z":
            raise InvalidPathDataError(data, "closepath takes no arguments")

        count = _PATH_ARGS[command.upper()]
        args = tokens[index : index + count]
        if len(args) < count or any(arg.isalpha() for arg in args):
            raise InvalidPathDataError(data, f"command '{command}' expects {count} numbers")
        values = [float(arg) for arg in args]
        index += count
        relative = command.islower()

        upper = command.upper()
        if upper == "M":
            if points:
                subpaths.append(points)
            x, y = (x + values[0], y + values[1]) if relative else (values[0], values[1])
            start = Point(x, y)
            points = [start]
            # further coordinate pairs are implicit linetos
            command = "l" if relative else "L"
            continue
        if upper == "L":
            x, y = (x + values[0], y + values[1]) if relative else (values[0], values[1])
        elif upper == "H":
            x = x + values[0] if relative else values[0]
        else:
            y = y + values[0] if relative else values[0]
        points.append(Point(x, y))

    if points:
        subpaths.append(points)
    return subpaths


# ---------------------------------------------------------------------------
# Document parsing
# ---------------------------------------------------------------------------


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _style(element: ET.Element) -> dict[str, str]:
    style: dict[str, str] = {}
    for declaration in element.get("style", "").split(";"):
        if ":" in declaration:
            key, value = declaration.split(":", 1)
            style[key.strip()] = value.strip()
    return style


def _property(element: ET.Element, name: str) -> str | None:
    return _style(element).get(name, element.get(name))


def _length(text: str | None, scale: float, default: float = 0.0) -> float:
    if text is None:
        return default * scale
    try:
        return parse_length(text, scale)
    except UnsupportedUnitsError:
        raise
    except ValueError as exc:
        raise InvalidTemplateError(f"invalid length {text!r}") from exc


def _user_unit_scale(root: ET.Element) -> float:
    """Millimetres per user unit, from the root's width and viewBox."""
    width = root.get("width")
    if width is None:
        return 1.0
    match = _UNIT_RE.match(width)
    if match is None:
        raise InvalidTemplateError(f"invalid document width {width!r}")
    value, unit = float(match.group(1)), match.group(2)
    scale = length_scale(unit)
    view_box = root.get("viewBox")
    if view_box is None:
        return scale
    parts = view_box.replace(",", " ").split()
    if len(parts) != 4:
        raise InvalidTemplateError(f"invalid viewBox {view_box!r}")
    view_width = float(parts[2])
    if view_width <= 0.0:
        raise InvalidTemplateError(f"invalid viewBox {view_box!r}")
    return scale * value / view_width


def _iter_rendered(element: ET.Element) -> Iterator[ET.Element]:
    """Yield ``element`` and its descendants, skipping non-rendered containers."""
    yield element
    for child in element:
        if _local_name(child.tag) in _NON_RENDERED_TAGS:
            continue
        yield from _iter_rendered(child)


def _iter_primitives(root: ET.Element, scale: float) -> Iterator[_Stroke | _Box]:
    anonymous = 0
    for element in _iter_rendered(root):
        tag = _local_name(element.tag)
        if tag not in ("path", "line", "polyline", "rect", "text"):
            continue
        if element.get("transform"):
            raise InvalidTemplateError(f"transform attribute on <{tag}> is not supported")
        element_id = element.get("id")
        if not element_id:
            element_id = f"#{anonymous}"
            anonymous += 1

        if tag in ("path", "line", "polyline"):
            width = _length(_property(element, "stroke-width"), scale, default=1.0)
            for index, points in enumerate(_stroke_points(element, tag)):
                key = element_id if index == 0 else f"{element_id}#{index}"
                yield _Stroke(key, tuple(Point(p.x * scale, p.y * scale) for p in points), width)
        elif tag == "rect":
            x = _length(element.get("x"), scale)
            y = _length(element.get("y"), scale)
            w = _length(element.get("width"), scale)
            h = _length(element.get("height"), scale)
            line_width = _length(_property(element, "stroke-width"), scale)
            yield _Box(element_id, Rect(Point(x, y), Point(x + w, y + h)), "", h, line_width)
        else:
            x = _length(element.get("x"), scale)
            y = _length(element.get("y"), scale)
            font_size = _length(_property(element, "font-size"), scale, default=1.0)
            line_width = _length(_property(element, "stroke-width"), scale)
            text = "".join(element.itertext()).strip()
            # the text box sits on its baseline
            rect = Rect(Point(x, y - font_size), Point(x, y))
            yield _Box(element_id, rect, text, font_size, line_width)


def _stroke_points(element: ET.Element, tag: str) -> list[list[Point]]:
    if tag == "path":
        return parse_path_data(element.get("d", ""))
    if tag == "line":
        try:
            coords = [float(element.get(name, "0")) for name in ("x1", "y1", "x2", "y2")]
        except ValueError as exc:
            raise InvalidTemplateError("invalid <line> coordinates") from exc
        return [[Point(coords[0], coords[1]), Point(coords[2], coords[3])]]
    numbers = _PATH_TOKEN_RE.findall(element.get("points", ""))
    if len(numbers) % 2 or any(number.isalpha() for number in numbers):
        raise InvalidTemplateError("invalid <polyline> points")
    values = [float(number) for number in numbers]
    return [[Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]]


# ---------------------------------------------------------------------------
# Decomposition
# ---------------------------------------------------------------------------


def _segments(stroke: _Stroke) -> list[Line]:
    points = stroke.points
    return [Line(points[i], points[i + 1], stroke.width) for i in range(len(points) - 1)]


def _axis(strokes: dict[str, _Stroke], axis_id: str, horizontal: bool) -> tuple[float, float]:
    """Return ``(scale, offset)`` derived from a reference axis."""
    stroke = strokes.pop(axis_id, None)
    if stroke is None:
        return 1.0, 0.0
    segments = _segments(stroke)
    if len(segments) != 1:
        raise InvalidTemplateError(f"reference axis '{axis_id}' must be a single segment")
    line = segments[0]
    if (horizontal and not line.is_horizontal) or (not horizontal and not line.is_vertical):
        kind = "horizontal" if horizontal else "vertical"
        raise InvalidTemplateError(f"reference axis '{axis_id}' must be a {kind} line")
    if line.length == 0.0:
        raise InvalidTemplateError(f"reference axis '{axis_id}' has zero length")
    center = line.center
    return 1.0 / line.length, -(center.x if horizontal else center.y)


def _pin_direction(halign: HAlign, valign: VAlign) -> PinDirection:
    if halign is HAlign.CENTER:
        return PinDirection.DOWN if valign is VAlign.TOP else PinDirection.UP
    if halign is HAlign.LEFT:
        return PinDirection.RIGHT
    return PinDirection.LEFT


def _symbol_pin(line: Line, element_id: str, pinout: Pinout) -> SymbolPin:
    fields = element_id.split(ID_SEPARATOR)
    if len(fields) != 3:
        raise InvalidPinIdError(element_id)
    match = _PIN_NAME_RE.match(fields[0])
    if match is None:
        raise InvalidPinIdError(element_id)
    name = match.group(1)
    pin = pinout.get_first(name)
    if pin is None:
        raise UnknownTemplatePinError(name)

    direction = _pin_direction(HAlign.parse(fields[1]), VAlign.parse(fields[2]))
    p0, p1 = line.p0, line.p1
    if direction is PinDirection.DOWN:
        origin = Point(p0.x, max(p0.y, p1.y))
    elif direction is PinDirection.UP:
        origin = Point(p0.x, min(p0.y, p1.y))
    elif direction is PinDirection.RIGHT:
        origin = Point(min(p0.x, p1.x), p0.y)
    else:
        origin = Point(max(p0.x, p1.x), p0.y)
    return SymbolPin(pin, origin, line.length, direction)


def _attribute(box: _Box) -> Attribute:
    fields = box.id.split(ID_SEPARATOR)
    halign = HAlign.parse(fields[1]) if len(fields) > 1 else HAlign.LEFT
    valign = VAlign.parse(fields[2]) if len(fields) > 2 else VAlign.BOTTOM
    rect = box.rect
    x = {HAlign.LEFT: rect.min_x, HAlign.CENTER: rect.center.x, HAlign.RIGHT: rect.max_x}[halign]
    y = {VAlign.TOP: rect.min_y, VAlign.MIDDLE: rect.center.y, VAlign.BOTTOM: rect.max_y}[valign]
    return Attribute(
        id=fields[0],
        value=box.text,
        origin=Point(x, y),
        font_size=box.font_size,
        line_width=box.line_width,
        halign=halign,
        valign=valign,
    )


def decompose(text: str, pinout: Pinout) -> Template:
    """Decompose SVG template text into elements and a canvas transform.

    The canvas transform translates by the negated axis midpoints and then
    scales by the reciprocal axis lengths, flipping y so that it points up.

    Raises:
        InvalidTemplateError: If the text is not an SVG document or an axis is malformed.
        UnsupportedUnitsError: If a length uses a unit other than none, mm or pt.
        InvalidPathDataError: If path data cannot be decoded.
        InvalidPinIdError: If a pin id does not have three fields.
        UnknownTemplatePinError: If a pin name is missing from ``pinout``.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise InvalidTemplateError(f"XML parse error: {exc}") from exc
    if _local_name(root.tag) != "svg":
        raise InvalidTemplateError(f"root element must be <svg>, got <{_local_name(root.tag)}>")

    strokes: dict[str, _Stroke] = {}
    boxes: dict[str, _Box] = {}
    order: dict[str, None] = {}
    for primitive in _iter_primitives(root, _user_unit_scale(root)):
        if isinstance(primitive, _Stroke):
            strokes[primitive.id] = primitive
        else:
            boxes[primitive.id] = primitive
        order[primitive.id] = None

    sx, dx = _axis(strokes, H_AXIS_ID, horizontal=True)
    sy, dy = _axis(strokes, V_AXIS_ID, horizontal=False)
    transform = Transform().translate(dx, dy).scale(sx, -sy)

    elements: dict[str, Element] = {}
    for element_id in order:
        if element_id in boxes:
            elements[element_id] = _attribute(boxes[element_id])
            continue
        stroke = strokes.get(element_id)
        if stroke is None:
            continue
        segments = _segments(stroke)
        if element_id.startswith(PIN_PREFIX) and len(segments) == 1:
            line = segments[0]
            if line.is_horizontal or line.is_vertical:
                elements[element_id] = _symbol_pin(line, element_id, pinout)
                continue
        if len(segments) == 1:
            elements[element_id] = segments[0]
        else:
            for index, segment in enumerate(segments):
                key = element_id if index == 0 else f"{element_id}.{index}"
                elements[key] = segment

    logger.debug(
        "decomposed template: %d elements, axis scale (%g, %g)", len(elements), sx, sy
    )
    return Template(transform, elements)
