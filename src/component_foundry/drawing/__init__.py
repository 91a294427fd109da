"""Drawing model shared by symbol parts, land patterns and 3-D models."""

from component_foundry.drawing.drawing import Drawing
from component_foundry.drawing.elements import (
    Attribute,
    Box3D,
    Element,
    Pad,
    PinDirection,
    SymbolPin,
    transform_element,
)
from component_foundry.drawing.svg import Template, decompose

__all__ = [
    "Attribute",
    "Box3D",
    "Drawing",
    "Element",
    "Pad",
    "PinDirection",
    "SymbolPin",
    "Template",
    "decompose",
    "transform_element",
]
