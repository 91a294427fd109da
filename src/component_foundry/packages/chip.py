"""Two-terminal chip package (resistors, capacitors, inductors).

Keys:
    package.body-size-x: Chip length, used as the lead span.
    package.body-size-y: Chip width, used as the lead width.
    package.body-size-z: Chip height.
    package.lead-length: Terminal length.
"""

from __future__ import annotations

import logging

from component_foundry.config import Config
from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import Box3D
from component_foundry.geom.primitives import Point, Rect
from component_foundry.pattern.calc import Ipc7351B, PackageType
from component_foundry.pattern.two_pin import TwoPin
from component_foundry.settings import PatternSettings

logger = logging.getLogger(__name__)


class ChipPackage:
    """Package strategy for ``package.type: chip``."""

    def calculator(self, config: Config, settings: PatternSettings) -> Ipc7351B:
        lead_height = None
        if config.contains("package.body-size-z"):
            lead_height = config.get_range("package.body-size-z")
        return Ipc7351B(
            package_type=PackageType.CHIP,
            lead_span=config.get_range("package.body-size-x"),
            lead_len=config.get_range("package.lead-length"),
            lead_width=config.get_range("package.body-size-y"),
            lead_height=lead_height,
        ).with_settings(settings)

    def draw_pattern(self, config: Config) -> Drawing:
        logger.debug("draw chip pattern")
        settings = PatternSettings.from_config(config)
        properties = self.calculator(config, settings).calc().post_process(config, settings)
        body = Rect.from_center(
            Point(0.0, 0.0),
            config.get_range("package.body-size-x").nom,
            config.get_range("package.body-size-y").nom,
        )
        drawing = Drawing()
        TwoPin(properties, body).draw(drawing, settings)
        return drawing

    def draw_model(self, config: Config) -> Drawing:
        logger.debug("draw chip model")
        drawing = Drawing()
        drawing.add_box3d(
            Box3D.centered(
                config.get_range("package.body-size-x").nom,
                config.get_range("package.body-size-y").nom,
                config.get_range("package.body-size-z").nom,
            )
        )
        return drawing
