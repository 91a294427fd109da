"""Planar geometry primitives shared by symbols and land patterns.

All lengths are floating-point millimetres for land patterns and grid units
for symbols. The output frame is right-handed with +y pointing up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, IntFlag
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from component_foundry.geom.transform import Transform


class Layer(IntFlag):
    """Board layers an element is drawn on."""

    NONE = 0
    COPPER_TOP = 0x1
    COPPER_BOTTOM = 0x2
    SILKSCREEN_TOP = 0x4
    SILKSCREEN_BOTTOM = 0x8
    MASK_TOP = 0x10
    MASK_BOTTOM = 0x20
    PASTE_TOP = 0x40
    PASTE_BOTTOM = 0x80
    ASSEMBLY_TOP = 0x100
    ASSEMBLY_BOTTOM = 0x200
    COURTYARD_TOP = 0x400
    COURTYARD_BOTTOM = 0x800
    BOARD = 0x10000000

    @classmethod
    def smd_top(cls) -> Layer:
        """Layer set of a top-side surface mount pad."""
        return cls.COPPER_TOP | cls.MASK_TOP | cls.PASTE_TOP


class HAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, text: str) -> HAlign:
        """Parse an alignment keyword, defaulting to LEFT."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return cls.LEFT


class VAlign(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, text: str) -> VAlign:
        """Parse an alignment keyword, defaulting to BOTTOM."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return cls.BOTTOM


class PadShape(Enum):
    """Pad shape types."""

    CIRCLE = "circle"
    RECT = "rect"
    ROUNDRECT = "roundrect"
    OVAL = "oval"


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def transform(self, transform: Transform) -> Point:
        return Point(*transform.apply(self.x, self.y))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Size:
    """Extent along x and y."""

    x: float
    y: float

    def transform(self, transform: Transform) -> Size:
        """Scale the extents by the transform's axis scale magnitudes."""
        return Size(self.x * transform.scale_x, self.y * transform.scale_y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Line:
    """Straight stroke between two points.

    Attributes:
        p0: Start point.
        p1: End point.
        width: Stroke width.
        layer: Board layers; ``Layer.NONE`` for symbol graphics.
    """

    p0: Point
    p1: Point
    width: float = 0.0
    layer: Layer = Layer.NONE

    @classmethod
    def from_coords(
        cls, x0: float, y0: float, x1: float, y1: float, width: float = 0.0, layer: Layer = Layer.NONE
    ) -> Line:
        return cls(Point(x0, y0), Point(x1, y1), width, layer)

    @property
    def length(self) -> float:
        return self.p0.distance_to(self.p1)

    @property
    def center(self) -> Point:
        return Point((self.p0.x + self.p1.x) / 2.0, (self.p0.y + self.p1.y) / 2.0)

    @property
    def is_horizontal(self) -> bool:
        return self.p0.y == self.p1.y

    @property
    def is_vertical(self) -> bool:
        return self.p0.x == self.p1.x

    def with_layer(self, layer: Layer) -> Line:
        return replace(self, layer=layer)

    def transform(self, transform: Transform) -> Line:
        """Map both endpoints and rescale the width by the effective scale."""
        return Line(
            self.p0.transform(transform),
            self.p1.transform(transform),
            self.width * transform.effective_scale,
            self.layer,
        )


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle spanned by two corners.

    Attributes:
        p0: First corner.
        p1: Opposite corner.
        line_width: Outline stroke width.
        layer: Board layers.
    """

    p0: Point
    p1: Point
    line_width: float = 0.0
    layer: Layer = Layer.NONE

    @classmethod
    def from_center(cls, center: Point, width: float, height: float) -> Rect:
        half_w, half_h = width / 2.0, height / 2.0
        return cls(Point(center.x - half_w, center.y - half_h), Point(center.x + half_w, center.y + half_h))

    @property
    def min_x(self) -> float:
        return min(self.p0.x, self.p1.x)

    @property
    def max_x(self) -> float:
        return max(self.p0.x, self.p1.x)

    @property
    def min_y(self) -> float:
        return min(self.p0.y, self.p1.y)

    @property
    def max_y(self) -> float:
        return max(self.p0.y, self.p1.y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def normalized(self) -> Rect:
        """Return the same rectangle with ``p0`` at the minimum corner."""
        return replace(self, p0=Point(self.min_x, self.min_y), p1=Point(self.max_x, self.max_y))

    def expand(self, margin: float) -> Rect:
        return replace(
            self,
            p0=Point(self.min_x - margin, self.min_y - margin),
            p1=Point(self.max_x + margin, self.max_y + margin),
        )

    def union(self, other: Rect) -> Rect:
        return replace(
            self,
            p0=Point(min(self.min_x, other.min_x), min(self.min_y, other.min_y)),
            p1=Point(max(self.max_x, other.max_x), max(self.max_y, other.max_y)),
        )

    def with_style(self, line_width: float, layer: Layer) -> Rect:
        return replace(self, line_width=line_width, layer=layer)

    def to_lines(self) -> list[Line]:
        """Outline as four lines, counter-clockwise from the minimum corner."""
        x0, y0, x1, y1 = self.min_x, self.min_y, self.max_x, self.max_y
        corners = [Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)]
        return [
            Line(corners[i], corners[(i + 1) % 4], self.line_width, self.layer) for i in range(4)
        ]

    def transform(self, transform: Transform) -> Rect:
        return Rect(
            self.p0.transform(transform),
            self.p1.transform(transform),
            self.line_width * transform.effective_scale,
            self.layer,
        )
