"""Pinout resolver.

Expands the compact pin grammar found under a component's ``pinout`` key into
concrete :class:`Pin` records grouped by name.

Grammar:
  - A key holds one or more comma-separated name tokens. A token is a bare
    name (``GND``) or a range ``D0..D7`` whose prefixes must match.
  - A leaf value is an integer, a string, or a sequence of those. A string
    may be a range ``1..8`` or a BGA span ``A1..C4``. Row letters skip
    I, O, Q, S and X and continue with two-letter rows after Z.
  - A mapping value is a named group: its pins are also registered under
    the group key.

Example:
    >>> pinout = Pinout.from_mapping({"D0..D1": ["A7..A8"], "GND": [3, 4]})
    >>> [(pin.name, pin.number) for pin in pinout]
    [('D0', 'A7'), ('D1', 'A8'), ('GND', '3'), ('GND', '4')]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from component_foundry.config import Config
from component_foundry.errors import (
    InvalidElementTypeError,
    InvalidPinNameError,
    InvalidPinNumberError,
    PinCountMismatchError,
    PinNameRangeError,
)

__all__ = [
    "PINOUT_KEY",
    "ROW_LETTERS",
    "Pin",
    "PinKind",
    "PinShape",
    "Pinout",
    "expand_pin_names",
    "expand_pin_numbers",
]

logger = logging.getLogger(__name__)

PINOUT_KEY = "pinout"

_SINGLE_ROWS = [letter for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ" if letter not in "IOQSX"]
ROW_LETTERS: tuple[str, ...] = (
    "",
    *_SINGLE_ROWS,
    *(first + second for i, first in enumerate(_SINGLE_ROWS) for second in _SINGLE_ROWS[i:]),
)
_ROW_INDEX = {row: index for index, row in enumerate(ROW_LETTERS)}

_NAME_RANGE_RE = re.compile(r"^(\D*)(\d+)\s*\.\.\s*(\D*)(\d+)$")
_NUMBER_RANGE_RE = re.compile(r"^([A-Z]*)(\d+)\s*\.\.\s*([A-Z]*)(\d+)$")


class PinKind(Enum):
    """Electrical kind of a pin."""

    UNSPECIFIED = "unspecified"
    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"
    TRISTATE = "tristate"
    PASSIVE = "passive"
    POWER_INPUT = "power-input"
    POWER_OUTPUT = "power-output"
    OPEN_COLLECTOR = "open-collector"
    OPEN_EMITTER = "open-emitter"
    NOT_CONNECTED = "not-connected"


class PinShape(Enum):
    """Decoration drawn on a symbol pin."""

    LINE = "line"
    INVERTED = "inverted"
    CLOCK = "clock"
    INVERTED_CLOCK = "inverted-clock"
    LOW_INPUT = "low-input"
    LOW_OUTPUT = "low-output"
    FALLING_EDGE = "falling-edge"
    NON_LOGIC = "non-logic"


@dataclass(frozen=True, slots=True)
class Pin:
    """One physical lead.

    Attributes:
        name: Logical name shared by electrically equivalent leads.
        number: Physical pad or ball designator.
        kind: Electrical kind.
        shape: Symbol decoration.
    """

    name: str
    number: str
    kind: PinKind = PinKind.UNSPECIFIED
    shape: PinShape = PinShape.LINE

    def with_kind(self, kind: PinKind) -> Pin:
        return replace(self, kind=kind)

    def with_shape(self, shape: PinShape) -> Pin:
        return replace(self, shape=shape)


def expand_pin_names(text: str) -> list[str]:
    """Expand comma-separated name tokens.

    A blank key expands to no names.

    Raises:
        PinNameRangeError: If a range uses two different prefixes.
        InvalidPinNameError: If a token is empty or a range is inverted.
    """
    names: list[str] = []
    if not text.strip():
        return names
    for token in text.split(","):
        token = token.strip()
        if not token:
            raise InvalidPinNameError(text, "empty name")
        match = _NAME_RANGE_RE.match(token)
        if match is None:
            names.append(token)
            continue
        prefix, begin_text, end_prefix, end_text = match.groups()
        if prefix != end_prefix:
            raise PinNameRangeError(token, prefix, end_prefix)
        begin, end = int(begin_text), int(end_text)
        if begin >= end:
            raise InvalidPinNameError(token, "range end must be greater than its beginning")
        names.extend(f"{prefix}{index}" for index in range(begin, end + 1))
    return names


def _row_index(row: str, text: str) -> int:
    index = _ROW_INDEX.get(row)
    if index is None:
        raise InvalidPinNumberError(text, f"unknown row '{row}'")
    return index


def _expand_number_text(text: str) -> list[str]:
    normalized = text.strip().upper()
    if not normalized:
        raise InvalidPinNumberError(text, "empty number")
    match = _NUMBER_RANGE_RE.match(normalized)
    if match is None:
        if ".." in normalized:
            raise InvalidPinNumberError(text, "malformed range")
        return [normalized]
    row_begin_text, col_begin_text, row_end_text, col_end_text = match.groups()
    row_begin = _row_index(row_begin_text, text)
    row_end = _row_index(row_end_text, text)
    col_begin, col_end = int(col_begin_text), int(col_end_text)
    if row_end < row_begin or col_end < col_begin:
        raise InvalidPinNumberError(text, "inverted range")
    if row_begin == row_end and col_begin == col_end:
        raise InvalidPinNumberError(text, "degenerate range")
    return [
        f"{ROW_LETTERS[row]}{col}"
        for row in range(row_begin, row_end + 1)
        for col in range(col_begin, col_end + 1)
    ]


def expand_pin_numbers(value: Any) -> list[str]:
    """Expand a leaf value into pin numbers.

    Raises:
        InvalidPinNumberError: For unsupported values and malformed ranges.
    """
    if isinstance(value, bool):
        raise InvalidPinNumberError(str(value), "boolean is not a pin number")
    if isinstance(value, int):
        return [str(value)]
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidPinNumberError(str(value), "pin number must be an integer")
        return [str(int(value))]
    if isinstance(value, str):
        return _expand_number_text(value)
    if isinstance(value, list):
        numbers: list[str] = []
        for item in value:
            numbers.extend(expand_pin_numbers(item))
        return numbers
    raise InvalidPinNumberError(repr(value), "unsupported pin number value")


class Pinout:
    """Insertion-ordered pins plus name groups of pin indices."""

    __slots__ = ("_groups", "_pins")

    def __init__(self) -> None:
        self._pins: list[Pin] = []
        self._groups: dict[str, list[int]] = {}

    @classmethod
    def from_config(cls, config: Config) -> Pinout:
        """Resolve the ``pinout`` subtree of a component document.

        A document without a pinout yields an empty Pinout.
        """
        pinout = cls()
        if not config.contains(PINOUT_KEY):
            return pinout
        pinout.add_mapping(config.get_object(PINOUT_KEY))
        return pinout

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Pinout:
        pinout = cls()
        pinout.add_mapping(mapping)
        return pinout

    def add_mapping(self, mapping: Mapping[str, Any]) -> list[int]:
        """Add every binding in ``mapping`` and return the new pin indices."""
        if not isinstance(mapping, Mapping):
            raise InvalidElementTypeError(PINOUT_KEY, "object")
        indices: list[int] = []
        for key, value in mapping.items():
            indices.extend(self._add_entry(str(key), value))
        return indices

    def _add_entry(self, key: str, value: Any) -> list[int]:
        if isinstance(value, Mapping):
            indices = self.add_mapping(value)
            self._register(key, indices)
            return indices

        names = expand_pin_names(key)
        numbers = expand_pin_numbers(value)
        if len(names) > 1 and len(names) != len(numbers):
            raise PinCountMismatchError(names, numbers)
        if not names:
            return []
        if len(names) == 1:
            names = names * len(numbers)
        return [self.add_pin(Pin(name, number)) for name, number in zip(names, numbers)]

    def _register(self, group: str, indices: list[int]) -> None:
        members = self._groups.setdefault(group, [])
        members.extend(index for index in indices if index not in members)

    def add_pin(self, pin: Pin) -> int:
        """Append a pin, index it under its name, and return its index."""
        index = len(self._pins)
        self._pins.append(pin)
        self._register(pin.name, [index])
        return index

    def replace_pin(self, index: int, pin: Pin) -> None:
        """Swap the pin at ``index`` for one with the same name."""
        if self._pins[index].name != pin.name:
            raise ValueError(f"Cannot rename pin {self._pins[index].name!r} to {pin.name!r}")
        self._pins[index] = pin

    def get(self, name: str) -> list[Pin]:
        """Return every pin in the group ``name`` (empty if unknown)."""
        return [self._pins[index] for index in self._groups.get(name, [])]

    def get_first(self, name: str) -> Pin | None:
        indices = self._groups.get(name)
        if not indices:
            return None
        return self._pins[indices[0]]

    def indices(self, name: str) -> list[int]:
        return list(self._groups.get(name, []))

    @property
    def pins(self) -> tuple[Pin, ...]:
        return tuple(self._pins)

    @property
    def groups(self) -> dict[str, tuple[int, ...]]:
        return {name: tuple(indices) for name, indices in self._groups.items()}

    def names(self) -> list[str]:
        """Pin names in first-appearance order, excluding enclosing groups."""
        seen: dict[str, None] = {}
        for pin in self._pins:
            seen.setdefault(pin.name, None)
        return list(seen)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self._groups.get(name))

    def __iter__(self) -> Iterator[Pin]:
        return iter(self._pins)

    def __len__(self) -> int:
        return len(self._pins)

    def __repr__(self) -> str:
        return f"Pinout(pins={len(self._pins)}, groups={len(self._groups)})"
