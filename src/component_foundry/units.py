"""Numeric micro-grammars used by component documents and vector templates.

Ranges describe a toleranced dimension and accept:
  - A bare number: ``5`` -> (5, 5)
  - A span: ``"1.0..2.0"`` -> (1.0, 2.0)
  - A nominal with symmetric tolerance: ``"5 +/- 1.1"`` -> (3.9, 6.1)
  - A two-element sequence: ``[2.25, 6.5]``

Pairs accept ``"a;b"`` or a two-element sequence.

Template lengths are millimetres; unitless and ``mm`` values pass through and
``pt`` values are converted with 25.4/72.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from component_foundry.errors import UnsupportedUnitsError

__all__ = [
    "MM_PER_PT",
    "Pair",
    "Range",
    "length_scale",
    "parse_length",
    "parse_pair",
    "parse_range",
    "round_to",
]

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_NUMBER_RE = re.compile(rf"^\s*({_NUMBER})\s*$")
_RANGE_RE = re.compile(rf"^\s*({_NUMBER})\s*(\.\.|\+/-)\s*({_NUMBER})\s*$")
_PAIR_RE = re.compile(rf"^\s*({_NUMBER})\s*;\s*({_NUMBER})\s*$")
_LENGTH_RE = re.compile(rf"^\s*({_NUMBER}(?:[eE][+-]?\d+)?)\s*([a-zA-Z%]*)\s*$")

MM_PER_PT = 25.4 / 72.0

_LENGTH_SCALES: dict[str, float] = {
    "": 1.0,
    "mm": 1.0,
    "pt": MM_PER_PT,
}


@dataclass(frozen=True, slots=True)
class Range:
    """Toleranced dimension ``[min, max]``.

    Attributes:
        min: Lower bound.
        max: Upper bound.
    """

    min: float
    max: float

    @property
    def nom(self) -> float:
        """Nominal value, the midpoint of the range."""
        return (self.min + self.max) / 2.0

    @property
    def tol(self) -> float:
        """Total tolerance, ``max - min``."""
        return self.max - self.min

    def to_tuple(self) -> tuple[float, float]:
        return (self.min, self.max)


@dataclass(frozen=True, slots=True)
class Pair:
    """Two related values such as a pad size ``(x, y)``."""

    first: float
    second: float

    def to_tuple(self) -> tuple[float, float]:
        return (self.first, self.second)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _two_numbers(value: Sequence[Any], type_name: str) -> tuple[float, float]:
    if len(value) != 2:
        raise ValueError(f"{type_name} sequence must have exactly two elements, got {len(value)}")
    first, second = value
    if not (_is_number(first) and _is_number(second)):
        raise ValueError(f"{type_name} sequence must contain numbers, got {list(value)!r}")
    return float(first), float(second)


def parse_range(value: Any) -> Range:
    """Parse a range value.

    Raises:
        ValueError: If the value is not one of the accepted range forms.
    """
    if _is_number(value):
        return Range(float(value), float(value))
    if isinstance(value, str):
        match = _RANGE_RE.match(value)
        if match:
            first, op, second = match.groups()
            a, b = float(first), float(second)
            if op == "..":
                return Range(a, b)
            return Range(a - b, a + b)
        match = _NUMBER_RE.match(value)
        if match:
            number = float(match.group(1))
            return Range(number, number)
        raise ValueError(f"Range string must be formatted like '1.0..2.0' or '5 +/- 0.1', got {value!r}")
    if isinstance(value, (list, tuple)):
        return Range(*_two_numbers(value, "Range"))
    raise ValueError(f"Unsupported Range value: {value!r}")


def parse_pair(value: Any) -> Pair:
    """Parse a pair value.

    Raises:
        ValueError: If the value is neither ``"a;b"`` nor a two-element sequence.
    """
    if isinstance(value, str):
        match = _PAIR_RE.match(value)
        if not match:
            raise ValueError(f"Pair string must be formatted like '1.2;0.6', got {value!r}")
        return Pair(float(match.group(1)), float(match.group(2)))
    if isinstance(value, (list, tuple)):
        return Pair(*_two_numbers(value, "Pair"))
    raise ValueError(f"Unsupported Pair value: {value!r}")


def length_scale(unit: str) -> float:
    """Return the millimetre scale factor for a template length unit.

    Raises:
        UnsupportedUnitsError: For any unit other than none, ``mm`` or ``pt``.
    """
    scale = _LENGTH_SCALES.get(unit.lower())
    if scale is None:
        raise UnsupportedUnitsError(unit)
    return scale


def parse_length(text: str, default_scale: float = 1.0) -> float:
    """Parse a template length such as ``"0.5"``, ``"2mm"`` or ``"12pt"`` to millimetres.

    Unitless values are multiplied by ``default_scale``, which carries the
    document's user-unit scale.

    Raises:
        ValueError: If the text is not a number with an optional unit suffix.
        UnsupportedUnitsError: If the unit suffix is not supported.
    """
    match = _LENGTH_RE.match(text)
    if not match:
        raise ValueError(f"Invalid length value: {text!r}")
    number_text, unit = match.groups()
    if not unit:
        return float(number_text) * default_scale
    return float(number_text) * length_scale(unit)


def round_to(value: float, step: float) -> float:
    """Round ``value`` to the nearest multiple of ``step``, halves away from zero."""
    scaled = value / step
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) * step
