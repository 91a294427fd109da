"""Silkscreen, assembly and courtyard outlines of a land pattern."""

from __future__ import annotations

from collections.abc import Sequence

from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import Attribute, Pad
from component_foundry.geom.primitives import HAlign, Layer, Line, Point, Rect, VAlign
from component_foundry.settings import PatternSettings

__all__ = [
    "clip_line",
    "draw_assembly",
    "draw_attributes",
    "draw_courtyard",
    "draw_silkscreen",
]


def _subtract(begin: float, end: float, cuts: Sequence[tuple[float, float]]) -> list[tuple[float, float]]:
    pieces = [(begin, end)]
    for cut_begin, cut_end in sorted(cuts):
        remaining: list[tuple[float, float]] = []
        for lo, hi in pieces:
            if cut_end <= lo or cut_begin >= hi:
                remaining.append((lo, hi))
                continue
            if cut_begin > lo:
                remaining.append((lo, cut_begin))
            if cut_end < hi:
                remaining.append((cut_end, hi))
        pieces = remaining
    return pieces


def clip_line(line: Line, keepouts: Sequence[Rect], min_length: float = 0.0) -> list[Line]:
    """Split an axis-aligned line around keep-out rectangles.

    Pieces shorter than ``min_length`` are dropped. Diagonal lines are
    returned unchanged.
    """
    if line.is_horizontal:
        y = line.p0.y
        cuts = [(box.min_x, box.max_x) for box in keepouts if box.min_y <= y <= box.max_y]
        lo, hi = sorted((line.p0.x, line.p1.x))
        pieces = _subtract(lo, hi, cuts)
        lines = [Line(Point(a, y), Point(b, y), line.width, line.layer) for a, b in pieces]
    elif line.is_vertical:
        x = line.p0.x
        cuts = [(box.min_y, box.max_y) for box in keepouts if box.min_x <= x <= box.max_x]
        lo, hi = sorted((line.p0.y, line.p1.y))
        pieces = _subtract(lo, hi, cuts)
        lines = [Line(Point(x, a), Point(x, b), line.width, line.layer) for a, b in pieces]
    else:
        return [line]
    return [piece for piece in lines if piece.length >= min_length and piece.length > 0.0]


def draw_silkscreen(drawing: Drawing, body: Rect, pads: Sequence[Pad], settings: PatternSettings) -> list[Line]:
    """Draw the body outline on the top silkscreen, clear of the pads."""
    line_width = settings.silkscreen_line_width
    outline = body.expand(line_width / 2.0).with_style(line_width, Layer.SILKSCREEN_TOP)
    keepouts = [pad.bounds.expand(settings.pad_to_silk + line_width / 2.0) for pad in pads]
    lines = [piece for line in outline.to_lines() for piece in clip_line(line, keepouts, line_width)]
    drawing.add_lines(lines)
    return lines


def draw_assembly(drawing: Drawing, body: Rect, settings: PatternSettings) -> None:
    """Draw the body outline on the top assembly layer."""
    outline = body.with_style(settings.assembly_line_width, Layer.ASSEMBLY_TOP)
    drawing.add_lines(outline.to_lines())


def draw_courtyard(
    drawing: Drawing, body: Rect, pads: Sequence[Pad], margin: float, settings: PatternSettings
) -> Rect:
    """Draw the courtyard enclosing body and pads, expanded by ``margin``."""
    extent = body
    for pad in pads:
        extent = extent.union(pad.bounds)
    courtyard = extent.expand(margin).with_style(settings.courtyard_line_width, Layer.COURTYARD_TOP)
    drawing.add_lines(courtyard.to_lines())
    return courtyard


def draw_attributes(drawing: Drawing, courtyard: Rect, settings: PatternSettings) -> None:
    """Place the reference designator above the courtyard and the value on the body."""
    ref_des = Attribute(
        id="ref-des",
        value="U",
        origin=Point(0.0, courtyard.max_y + settings.ref_des_font_size / 2.0),
        font_size=settings.ref_des_font_size,
        line_width=settings.silkscreen_line_width,
        layer=Layer.SILKSCREEN_TOP,
        halign=HAlign.CENTER,
        valign=VAlign.MIDDLE,
    )
    value = Attribute(
        id="value",
        value="?",
        origin=Point(0.0, 0.0),
        font_size=settings.value_font_size,
        line_width=settings.assembly_line_width,
        layer=Layer.ASSEMBLY_TOP,
        halign=HAlign.CENTER,
        valign=VAlign.MIDDLE,
    )
    drawing.add_attribute(ref_des)
    drawing.add_attribute(value)
