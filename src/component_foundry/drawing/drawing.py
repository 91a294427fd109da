from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING, TypeVar

from component_foundry.drawing.elements import (
    Attribute,
    Box3D,
    Element,
    Pad,
    SymbolPin,
    transform_element,
)
from component_foundry.drawing.svg import decompose
from component_foundry.geom.primitives import Line
from component_foundry.geom.transform import Transform

if TYPE_CHECKING:
    from component_foundry.pinout import Pinout

__all__ = ["Drawing"]

logger = logging.getLogger(__name__)

_E = TypeVar("_E", Attribute, Box3D, Line, Pad, SymbolPin)


class Drawing:
    """Ordered drawing elements plus the canvas transform applied on insertion.

    Every planar element added to a drawing is mapped through the current
    canvas transform before it is stored, so stored coordinates are always in
    the normalized output frame.

    A frozen drawing rejects further insertions and transform changes.
    """

    __slots__ = ("_elements", "_frozen", "_transform")

    def __init__(self, transform: Transform | None = None) -> None:
        self._elements: list[Element] = []
        self._transform = transform or Transform()
        self._frozen = False

    @classmethod
    def from_svg(cls, text: str, pinout: Pinout) -> Drawing:
        """Decompose a vector template into a new drawing."""
        drawing = cls()
        drawing.add_svg(text, pinout)
        return drawing

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Drawing:
        """Make the drawing read-only and return it."""
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenInstanceError("cannot modify a frozen drawing")

    def set_transform(self, transform: Transform) -> None:
        self._check_mutable()
        self._transform = transform

    # -- insertion ---------------------------------------------------------

    def add(self, element: Element) -> None:
        self._check_mutable()
        self._elements.append(transform_element(element, self._transform))

    def extend(self, elements: Iterable[Element]) -> None:
        for element in elements:
            self.add(element)

    def add_attribute(self, attribute: Attribute) -> None:
        self.add(attribute)

    def add_line(self, line: Line) -> None:
        self.add(line)

    def add_lines(self, lines: Iterable[Line]) -> None:
        self.extend(lines)

    def add_pad(self, pad: Pad) -> None:
        self.add(pad)

    def add_pads(self, pads: Iterable[Pad]) -> None:
        self.extend(pads)

    def add_symbol_pin(self, pin: SymbolPin) -> None:
        self.add(pin)

    def add_box3d(self, box: Box3D) -> None:
        self.add(box)

    def add_svg(self, text: str, pinout: Pinout) -> None:
        """Add the primitives of a vector template, replacing the canvas transform.

        See :func:`component_foundry.drawing.svg.decompose`.
        """
        self._check_mutable()
        template = decompose(text, pinout)
        self._transform = template.transform
        logger.debug("adding %d template elements", len(template.elements))
        self.extend(template.elements.values())

    # -- queries -----------------------------------------------------------

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def _of_type(self, kind: type[_E]) -> list[_E]:
        return [element for element in self._elements if isinstance(element, kind)]

    def attributes(self) -> list[Attribute]:
        return self._of_type(Attribute)

    def lines(self) -> list[Line]:
        return self._of_type(Line)

    def pads(self) -> list[Pad]:
        return self._of_type(Pad)

    def symbol_pins(self) -> list[SymbolPin]:
        return self._of_type(SymbolPin)

    def boxes(self) -> list[Box3D]:
        return self._of_type(Box3D)

    def find_attribute(self, attribute_id: str) -> Attribute | None:
        for attribute in self.attributes():
            if attribute.id == attribute_id:
                return attribute
        return None

    def transformed(self, transform: Transform) -> Drawing:
        """Return a copy with ``transform`` applied to every stored element.

        The copy is mutable even when this drawing is frozen.
        """
        drawing = Drawing(self._transform.then(transform))
        drawing._elements = [transform_element(element, transform) for element in self._elements]
        return drawing

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Drawing(elements={len(self._elements)})"
