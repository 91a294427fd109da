from __future__ import annotations

import logging

from component_foundry.config import Config
from component_foundry.drawing.drawing import Drawing
from component_foundry.pinout import Pin, PinKind, Pinout
from component_foundry.symbols.base import load_template
from component_foundry.symbols.symbol import Symbol

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "capacitor"
DEFAULT_PINS = (Pin("L", "1", PinKind.PASSIVE), Pin("R", "2", PinKind.PASSIVE))


class CapacitorSymbol:
    """Symbol strategy for ``symbol.type: capacitor``.

    The pinout defaults to ``L`` -> 1 and ``R`` -> 2 for any lead the
    component does not name itself.
    """

    def pinout(self, config: Config) -> Pinout:
        pinout = Pinout.from_config(config)
        for pin in DEFAULT_PINS:
            if pin.name not in pinout:
                pinout.add_pin(pin)
        return pinout

    def draw(self, config: Config) -> Symbol:
        logger.debug("draw capacitor symbol")
        part = Drawing.from_svg(load_template(TEMPLATE_NAME), self.pinout(config))
        return Symbol.from_parts([part], show_pin_numbers=False, show_pin_names=False)
