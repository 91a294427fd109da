"""Generated box symbol for integrated circuits.

Pin groups listed under ``symbol.left`` and ``symbol.right`` are placed on
the respective side of the box, top to bottom. Without explicit lists the
pinout's names are split in order so both sides carry about half of the
pins, with all pins of one name on the same side. Every pin of a group gets
its own lead.
"""

from __future__ import annotations

import logging

from component_foundry.config import Config
from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import Attribute, PinDirection, SymbolPin
from component_foundry.errors import InvalidElementTypeError, UnknownTemplatePinError
from component_foundry.geom.primitives import HAlign, Line, Point, Rect, VAlign
from component_foundry.pinout import Pin, Pinout
from component_foundry.settings import SymbolSettings
from component_foundry.symbols.symbol import DEFAULT_REF_DES, Symbol

logger = logging.getLogger(__name__)


def _side_names(config: Config, path: str) -> list[str] | None:
    if not config.contains(path):
        return None
    names = config.get_list(path)
    if not all(isinstance(name, (str, int)) and not isinstance(name, bool) for name in names):
        raise InvalidElementTypeError(path, "array of pin names")
    return [str(name) for name in names]


def _balanced_split(counts: list[int]) -> int:
    """Index splitting ``counts`` into two runs of nearly equal sum.

    Ties keep more pins on the left.
    """
    total = sum(counts)
    best, best_diff = 0, total
    left = 0
    for index, count in enumerate(counts, start=1):
        left += count
        diff = abs(total - 2 * left)
        if diff < best_diff or (diff == best_diff and left * 2 >= total):
            best, best_diff = index, diff
    return best


class IcSymbol:
    """Symbol strategy for ``symbol.type: ic``."""

    def sides(self, config: Config, pinout: Pinout) -> tuple[list[Pin], list[Pin]]:
        left_names = _side_names(config, "symbol.left")
        right_names = _side_names(config, "symbol.right")
        if left_names is None and right_names is None:
            names = pinout.names()
            middle = _balanced_split([len(pinout.get(name)) for name in names])
            left_names, right_names = names[:middle], names[middle:]
        sides: list[list[Pin]] = []
        for names in (left_names or [], right_names or []):
            pins: list[Pin] = []
            for name in names:
                group = pinout.get(name)
                if not group:
                    raise UnknownTemplatePinError(name)
                pins.extend(group)
            sides.append(pins)
        return sides[0], sides[1]

    def draw(self, config: Config) -> Symbol:
        logger.debug("draw IC symbol")
        settings = SymbolSettings.from_config(config)
        pinout = Pinout.from_config(config)
        left, right = self.sides(config, pinout)

        space = settings.pin_space
        rows = max(len(left), len(right), 1)
        half_w = settings.body_width / 2.0
        half_h = (rows + 1) * space / 2.0
        body = Rect(Point(-half_w, -half_h), Point(half_w, half_h), settings.line_width)

        part = Drawing()
        part.add_lines(body.to_lines())
        for index, pin in enumerate(left):
            y = half_h - (index + 1) * space
            origin = Point(-half_w - settings.pin_length, y)
            part.add_symbol_pin(SymbolPin(pin, origin, settings.pin_length, PinDirection.RIGHT))
        for index, pin in enumerate(right):
            y = half_h - (index + 1) * space
            origin = Point(half_w + settings.pin_length, y)
            part.add_symbol_pin(SymbolPin(pin, origin, settings.pin_length, PinDirection.LEFT))

        value = config.get_str("name") if config.contains("name") else "?"
        part.add_attribute(
            Attribute(
                id="ref-des",
                value=DEFAULT_REF_DES,
                origin=Point(-half_w, half_h + space / 2.0),
                font_size=settings.ref_des_font_size,
                halign=HAlign.LEFT,
                valign=VAlign.BOTTOM,
            )
        )
        part.add_attribute(
            Attribute(
                id="value",
                value=value,
                origin=Point(-half_w, -half_h - space / 2.0),
                font_size=settings.value_font_size,
                halign=HAlign.LEFT,
                valign=VAlign.TOP,
            )
        )
        return Symbol.from_parts([part])
