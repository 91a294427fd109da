"""Dual-row land pattern for gull-wing packages (SOP, SOIC, TSSOP).

Pads 1..n/2 run down the left column from the top; the remaining pads run up
the right column, so numbering is counter-clockwise seen from the top.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import Pad
from component_foundry.geom.primitives import Layer, Line, PadShape, Point, Rect
from component_foundry.pattern.calc import PadProperties
from component_foundry.pattern.mask import calc_mask
from component_foundry.pattern.outline import (
    draw_assembly,
    draw_attributes,
    draw_courtyard,
    draw_silkscreen,
)
from component_foundry.settings import PatternSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DualRow:
    """Two columns of pads.

    Attributes:
        properties: Calculated pad geometry.
        body: Component body outline centered on the origin.
        lead_count: Total number of leads; must be even.
        pitch: Center distance of adjacent pads in a column.
    """

    properties: PadProperties
    body: Rect
    lead_count: int
    pitch: float

    def __post_init__(self) -> None:
        if self.lead_count < 2 or self.lead_count % 2:
            raise ValueError(f"Dual-row lead count must be a positive even number, got {self.lead_count}")

    def positions(self) -> list[tuple[str, Point]]:
        """Pad names and centers in pad number order."""
        rows = self.lead_count // 2
        half = self.properties.distance / 2.0
        top = (rows - 1) * self.pitch / 2.0
        left = [(str(i + 1), Point(-half, top - i * self.pitch)) for i in range(rows)]
        right = [(str(rows + i + 1), Point(half, -top + i * self.pitch)) for i in range(rows)]
        return left + right

    def pads(self, settings: PatternSettings) -> list[Pad]:
        pads = [
            Pad(name, origin, self.properties.size, PadShape.RECT, Layer.smd_top())
            for name, origin in self.positions()
        ]
        return calc_mask(pads, settings)

    def pin_one_marker(self, first: Pad, settings: PatternSettings) -> Line:
        """Silkscreen bar above pad 1."""
        line_width = settings.silkscreen_line_width
        bounds = first.bounds
        y = bounds.max_y + settings.pad_to_silk + line_width / 2.0
        return Line(Point(bounds.min_x, y), Point(bounds.max_x, y), line_width, Layer.SILKSCREEN_TOP)

    def draw(self, drawing: Drawing, settings: PatternSettings) -> None:
        pads = self.pads(settings)
        logger.debug("dual-row pattern with %d pads at pitch %.3f", len(pads), self.pitch)
        drawing.add_pads(pads)
        draw_silkscreen(drawing, self.body, pads, settings)
        drawing.add_line(self.pin_one_marker(pads[0], settings))
        draw_assembly(drawing, self.body, settings)
        courtyard = draw_courtyard(drawing, self.body, pads, self.properties.courtyard, settings)
        draw_attributes(drawing, courtyard, settings)
