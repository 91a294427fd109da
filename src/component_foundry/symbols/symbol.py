from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from component_foundry.drawing.drawing import Drawing
from component_foundry.errors import InvalidSymbolNoPartsError

DEFAULT_REF_DES = "U"
REF_DES_ATTRIBUTE = "ref-des"


@dataclass(frozen=True, slots=True)
class Symbol:
    """Schematic symbol made of one drawing per part.

    Attributes:
        parts: Part drawings; multi-gate components have several.
        ref_des: Reference designator prefix, e.g. ``C`` or ``U``.
        show_pin_numbers: Whether pin numbers are rendered.
        show_pin_names: Whether pin names are rendered.
        power: Whether the symbol is a power symbol.
    """

    parts: tuple[Drawing, ...]
    ref_des: str = DEFAULT_REF_DES
    show_pin_numbers: bool = True
    show_pin_names: bool = True
    power: bool = False

    def __post_init__(self) -> None:
        if not self.parts:
            raise InvalidSymbolNoPartsError()

    @classmethod
    def from_parts(
        cls,
        parts: Sequence[Drawing],
        *,
        show_pin_numbers: bool = True,
        show_pin_names: bool = True,
        power: bool = False,
    ) -> Symbol:
        """Build a symbol, taking the prefix from the first part's ``ref-des`` attribute."""
        if not parts:
            raise InvalidSymbolNoPartsError()
        attribute = parts[0].find_attribute(REF_DES_ATTRIBUTE)
        ref_des = attribute.value if attribute is not None and attribute.value else DEFAULT_REF_DES
        return cls(
            parts=tuple(parts),
            ref_des=ref_des,
            show_pin_numbers=show_pin_numbers,
            show_pin_names=show_pin_names,
            power=power,
        )
