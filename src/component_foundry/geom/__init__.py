"""Geometry primitives and affine transforms."""

from component_foundry.geom.primitives import HAlign, Layer, Line, PadShape, Point, Rect, Size, VAlign
from component_foundry.geom.transform import Transform

__all__ = [
    "HAlign",
    "Layer",
    "Line",
    "PadShape",
    "Point",
    "Rect",
    "Size",
    "Transform",
    "VAlign",
]
