"""Land pattern calculation and drawing."""

from component_foundry.pattern.calc import (
    Goals,
    Ipc7351B,
    PackageType,
    PadProperties,
    goals_for,
    round_place,
    round_size,
)
from component_foundry.pattern.dual import DualRow
from component_foundry.pattern.mask import calc_mask
from component_foundry.pattern.two_pin import TwoPin

__all__ = [
    "DualRow",
    "Goals",
    "Ipc7351B",
    "PackageType",
    "PadProperties",
    "TwoPin",
    "calc_mask",
    "goals_for",
    "round_place",
    "round_size",
]
