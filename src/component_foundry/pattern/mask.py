from __future__ import annotations

from collections.abc import Sequence

from component_foundry.drawing.elements import Pad
from component_foundry.settings import PatternSettings


def pad_spacing(first: Pad, second: Pad) -> float:
    """Edge-to-edge spacing of two pads along the axis that separates them most."""
    hspace = abs(second.origin.x - first.origin.x) - (first.size.x + second.size.x) / 2.0
    vspace = abs(second.origin.y - first.origin.y) - (first.size.y + second.size.y) / 2.0
    return max(hspace, vspace)


def calc_mask(pads: Sequence[Pad], settings: PatternSettings) -> list[Pad]:
    """Return ``pads`` with solder mask expansion applied.

    Every pad starts at ``pad_to_mask``. When the mask web left between two
    pads would be narrower than ``mask_width``, both masks shrink to share the
    remaining space, never below zero. Each pad keeps the smallest mask any
    of its neighbours requires.
    """
    masks = [settings.pad_to_mask] * len(pads)
    for i in range(len(pads)):
        for j in range(i + 1, len(pads)):
            space = pad_spacing(pads[i], pads[j])
            mask = settings.pad_to_mask
            if space - 2.0 * mask < settings.mask_width:
                mask = max(0.0, (space - settings.mask_width) / 2.0)
            masks[i] = min(masks[i], mask)
            masks[j] = min(masks[j], mask)
    return [pad.with_mask(mask) for pad, mask in zip(pads, masks)]
