from __future__ import annotations

import logging
from dataclasses import dataclass

from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import Pad
from component_foundry.geom.primitives import Layer, PadShape, Point, Rect
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
class TwoPin:
    """Two-terminal land pattern: pad "1" on the left, pad "2" on the right.

    Attributes:
        properties: Calculated pad geometry.
        body: Component body outline centered on the origin.
    """

    properties: PadProperties
    body: Rect

    def pads(self, settings: PatternSettings) -> list[Pad]:
        half = self.properties.distance / 2.0
        size = self.properties.size
        pads = [
            Pad("1", Point(-half, 0.0), size, PadShape.RECT, Layer.smd_top()),
            Pad("2", Point(half, 0.0), size, PadShape.RECT, Layer.smd_top()),
        ]
        return calc_mask(pads, settings)

    def draw(self, drawing: Drawing, settings: PatternSettings) -> None:
        pads = self.pads(settings)
        logger.debug(
            "two-pin pads %.2fx%.2f at distance %.2f",
            self.properties.size.x,
            self.properties.size.y,
            self.properties.distance,
        )
        drawing.add_pads(pads)
        draw_silkscreen(drawing, self.body, pads, settings)
        draw_assembly(drawing, self.body, settings)
        courtyard = draw_courtyard(drawing, self.body, pads, self.properties.courtyard, settings)
        draw_attributes(drawing, courtyard, settings)
