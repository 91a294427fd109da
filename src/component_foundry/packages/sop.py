"""Small outline gull-wing package.

Keys:
    package.lead-span: Outer-to-outer lead span.
    package.lead-length: Foot length of a lead.
    package.lead-width: Lead width.
    package.pitch: Lead pitch.
    package.lead-count: Total number of leads.
    package.body-size-x: Body width between the lead rows.
    package.body-size-y: Body length along the lead rows.
    package.body-size-z: Body height.
"""

from __future__ import annotations

import logging

from component_foundry.config import Config
from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import Box3D
from component_foundry.errors import InvalidElementTypeError
from component_foundry.geom.primitives import Point, Rect
from component_foundry.pattern.calc import Ipc7351B, PackageType
from component_foundry.pattern.dual import DualRow
from component_foundry.settings import PatternSettings

logger = logging.getLogger(__name__)


class SopPackage:
    """Package strategy for ``package.type: sop``."""

    def calculator(self, config: Config, settings: PatternSettings) -> Ipc7351B:
        return Ipc7351B(
            package_type=PackageType.SOP,
            lead_span=config.get_range("package.lead-span"),
            lead_len=config.get_range("package.lead-length"),
            lead_width=config.get_range("package.lead-width"),
            body=config.get_range("package.body-size-x").nom,
            pitch=config.get_float("package.pitch"),
        ).with_settings(settings)

    def draw_pattern(self, config: Config) -> Drawing:
        logger.debug("draw SOP pattern")
        settings = PatternSettings.from_config(config)
        properties = self.calculator(config, settings).calc().post_process(config, settings)
        lead_count = config.get_int("package.lead-count")
        if lead_count < 2 or lead_count % 2:
            raise InvalidElementTypeError("package.lead-count", "even integer >= 2")
        body = Rect.from_center(
            Point(0.0, 0.0),
            config.get_range("package.body-size-x").nom,
            config.get_range("package.body-size-y").nom,
        )
        drawing = Drawing()
        DualRow(properties, body, lead_count, config.get_float("package.pitch")).draw(drawing, settings)
        return drawing

    def draw_model(self, config: Config) -> Drawing:
        logger.debug("draw SOP model")
        drawing = Drawing()
        drawing.add_box3d(
            Box3D.centered(
                config.get_range("package.body-size-x").nom,
                config.get_range("package.body-size-y").nom,
                config.get_range("package.body-size-z").nom,
            )
        )
        return drawing
