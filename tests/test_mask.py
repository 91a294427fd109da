# SPDX-License-Identifier: MIT
"""Unit tests for solder mask clearance."""

from __future__ import annotations

import pytest

from component_foundry.drawing.elements import Pad
from component_foundry.geom.primitives import Point, Size
from component_foundry.pattern.mask import calc_mask, pad_spacing
from component_foundry.settings import PatternSettings


def pad(name: str, x: float, y: float = 0.0) -> Pad:
    return Pad(name, Point(x, y), Size(1.0, 1.0))


class TestPadSpacing:
    """Tests for pad_spacing."""

    def test_horizontal(self) -> None:
        assert pad_spacing(pad("1", -1.0), pad("2", 1.0)) == pytest.approx(1.0)

    def test_vertical(self) -> None:
        assert pad_spacing(pad("1", 0.0, 0.0), pad("2", 0.0, 1.5)) == pytest.approx(0.5)


class TestCalcMask:
    """Tests for calc_mask."""

    def test_default_expansion(self) -> None:
        pads = calc_mask([pad("1", -1.0), pad("2", 1.0)], PatternSettings())
        assert [p.mask for p in pads] == [0.05, 0.05]

    def test_shrinks_to_keep_mask_web(self) -> None:
        """The mask web between pads never drops below the minimum width."""
        pads = calc_mask([pad("1", -1.0), pad("2", 1.0)], PatternSettings(mask_width=0.95))
        assert [p.mask for p in pads] == pytest.approx([0.025, 0.025])

    def test_never_negative(self) -> None:
        pads = calc_mask([pad("1", -1.0), pad("2", 1.0)], PatternSettings(mask_width=2.0))
        assert [p.mask for p in pads] == [0.0, 0.0]

    def test_each_pad_keeps_its_minimum(self) -> None:
        pads = calc_mask(
            [pad("1", 0.0), pad("2", 1.2), pad("3", 4.0)],
            PatternSettings(pad_to_mask=0.1, mask_width=0.1),
        )
        # pads 1 and 2 are 0.2 apart; pad 3 is far from both
        assert pads[0].mask == pytest.approx(0.05)
        assert pads[1].mask == pytest.approx(0.05)
        assert pads[2].mask == pytest.approx(0.1)

    def test_input_unchanged(self) -> None:
        original = [pad("1", -1.0), pad("2", 1.0)]
        calc_mask(original, PatternSettings())
        assert [p.mask for p in original] == [0.0, 0.0]
