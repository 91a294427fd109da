"""Drawing elements.

A drawing holds a closed set of element types:

- :class:`Attribute`: positioned text such as the reference designator
- :class:`~component_foundry.geom.primitives.Line`: a stroke
- :class:`SymbolPin`: a schematic pin lead
- :class:`Pad`: a land pattern pad
- :class:`Box3D`: a body box for 3-D models, never planar-transformed
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Union

from component_foundry.geom.primitives import HAlign, Layer, Line, PadShape, Point, Rect, Size, VAlign

if TYPE_CHECKING:
    from component_foundry.geom.transform import Transform
    from component_foundry.pinout import Pin

__all__ = [
    "Attribute",
    "Box3D",
    "Element",
    "Pad",
    "PinDirection",
    "SymbolPin",
    "transform_element",
]


class PinDirection(Enum):
    """Direction a symbol pin points from its anchor towards the body."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Attribute:
    """Positioned text.

    Attributes:
        id: Role of the text, e.g. ``ref-des`` or ``value``.
        value: Literal text.
        origin: Anchor point.
        font_size: Text height.
        line_width: Stroke width of the glyphs.
        layer: Board layers; ``Layer.NONE`` in symbols.
        halign: Horizontal alignment relative to ``origin``.
        valign: Vertical alignment relative to ``origin``.
        visible: Whether the text is shown.
    """

    id: str
    value: str
    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))
    font_size: float = 1.0
    line_width: float = 0.0
    layer: Layer = Layer.NONE
    halign: HAlign = HAlign.CENTER
    valign: VAlign = VAlign.MIDDLE
    visible: bool = True

    def with_value(self, value: str) -> Attribute:
        return replace(self, value=value)

    def transform(self, transform: Transform) -> Attribute:
        scale = transform.effective_scale
        return replace(
            self,
            origin=self.origin.transform(transform),
            font_size=self.font_size * scale,
            line_width=self.line_width * scale,
        )


@dataclass(frozen=True, slots=True)
class SymbolPin:
    """Schematic pin lead.

    Attributes:
        pin: The pinout record this lead represents.
        origin: Outer end of the lead, where wires connect.
        length: Lead length.
        direction: Direction from ``origin`` towards the symbol body.
    """

    pin: Pin
    origin: Point
    length: float
    direction: PinDirection

    def transform(self, transform: Transform) -> SymbolPin:
        return replace(
            self,
            origin=self.origin.transform(transform),
            length=self.length * transform.effective_scale,
        )


@dataclass(frozen=True, slots=True)
class Pad:
    """Land pattern pad.

    Attributes:
        name: Pad designator matched against pin numbers.
        origin: Pad center.
        size: Pad extent along x and y.
        shape: Copper shape.
        layers: Copper, mask and paste layers.
        mask: Solder mask expansion.
        hole: Drill diameter, None for surface mount pads.
    """

    name: str
    origin: Point
    size: Size
    shape: PadShape = PadShape.RECT
    layers: Layer = Layer.COPPER_TOP | Layer.MASK_TOP | Layer.PASTE_TOP
    mask: float = 0.0
    hole: float | None = None

    @property
    def is_smd(self) -> bool:
        return self.hole is None

    @property
    def bounds(self) -> Rect:
        return Rect.from_center(self.origin, self.size.x, self.size.y)

    def with_mask(self, mask: float) -> Pad:
        return replace(self, mask=mask)

    def transform(self, transform: Transform) -> Pad:
        return replace(
            self,
            origin=self.origin.transform(transform),
            size=self.size.transform(transform),
            mask=self.mask * transform.effective_scale,
        )


@dataclass(frozen=True, slots=True)
class Box3D:
    """Axis-aligned body box of a 3-D model.

    Attributes:
        origin: Minimum corner ``(x, y, z)``.
        dimensions: Extent ``(x, y, z)``.
    """

    origin: tuple[float, float, float]
    dimensions: tuple[float, float, float]

    @classmethod
    def centered(cls, x: float, y: float, z: float) -> Box3D:
        """Box centered on the origin in x and y, sitting on the board."""
        return cls((-x / 2.0, -y / 2.0, 0.0), (x, y, z))


Element = Union[Attribute, Box3D, Line, Pad, SymbolPin]


def transform_element(element: Element, transform: Transform) -> Element:
    """Apply ``transform`` to a planar element; Box3D passes through unchanged."""
    if isinstance(element, Box3D):
        return element
    if isinstance(element, (Attribute, Line, Pad, SymbolPin)):
        return element.transform(transform)
    raise TypeError(f"Unsupported drawing element: {type(element).__name__}")
