# SPDX-License-Identifier: MIT
"""Unit tests for silkscreen, assembly and courtyard outlines."""

from __future__ import annotations

import pytest

from component_foundry.drawing import Drawing, Pad
from component_foundry.geom.primitives import Layer, Line, Point, Rect, Size
from component_foundry.pattern.outline import (
    clip_line,
    draw_assembly,
    draw_attributes,
    draw_courtyard,
    draw_silkscreen,
)
from component_foundry.settings import PatternSettings


@pytest.fixture
def settings() -> PatternSettings:
    return PatternSettings()


class TestClipLine:
    """Tests for clip_line."""

    def test_horizontal_split(self) -> None:
        keepout = Rect(Point(-0.5, -1.0), Point(0.5, 1.0))
        pieces = clip_line(Line.from_coords(-2.0, 0.0, 2.0, 0.0), [keepout])
        assert [(p.p0.x, p.p1.x) for p in pieces] == [(-2.0, -0.5), (0.5, 2.0)]

    def test_vertical_split(self) -> None:
        keepout = Rect(Point(-1.0, 0.0), Point(1.0, 1.0))
        pieces = clip_line(Line.from_coords(0.0, -1.0, 0.0, 3.0), [keepout])
        assert [(p.p0.y, p.p1.y) for p in pieces] == [(-1.0, 0.0), (1.0, 3.0)]

    def test_keepout_off_the_line(self) -> None:
        keepout = Rect(Point(-0.5, 1.0), Point(0.5, 2.0))
        line = Line.from_coords(-2.0, 0.0, 2.0, 0.0)
        assert clip_line(line, [keepout]) == [line]

    def test_short_pieces_dropped(self) -> None:
        keepout = Rect(Point(-1.9, -1.0), Point(1.0, 1.0))
        pieces = clip_line(Line.from_coords(-2.0, 0.0, 2.0, 0.0), [keepout], min_length=0.5)
        assert [(p.p0.x, p.p1.x) for p in pieces] == [(1.0, 2.0)]

    def test_fully_covered(self) -> None:
        keepout = Rect(Point(-3.0, -1.0), Point(3.0, 1.0))
        assert clip_line(Line.from_coords(-2.0, 0.0, 2.0, 0.0), [keepout]) == []

    def test_diagonal_unchanged(self) -> None:
        line = Line.from_coords(0.0, 0.0, 1.0, 1.0)
        assert clip_line(line, [Rect(Point(0.0, 0.0), Point(1.0, 1.0))]) == [line]


class TestOutlines:
    """Tests for the outline drawing helpers."""

    def test_silkscreen_clears_pads(self, settings: PatternSettings) -> None:
        """No silkscreen line comes within pad-to-silk of a pad."""
        body = Rect.from_center(Point(0.0, 0.0), 4.0, 2.0)
        pads = [Pad("1", Point(-2.0, 0.0), Size(1.0, 1.0)), Pad("2", Point(2.0, 0.0), Size(1.0, 1.0))]
        drawing = Drawing()
        lines = draw_silkscreen(drawing, body, pads, settings)
        assert lines
        assert all(line.layer is Layer.SILKSCREEN_TOP for line in lines)
        assert all(line.width == settings.silkscreen_line_width for line in lines)
        keepouts = [p.bounds.expand(settings.pad_to_silk) for p in pads]
        for line in lines:
            for keepout in keepouts:
                inside_x = keepout.min_x < line.center.x < keepout.max_x
                inside_y = keepout.min_y < line.center.y < keepout.max_y
                assert not (inside_x and inside_y)
        # top and bottom stay whole, each side keeps a stub above and below its pad
        assert len(lines) == 6

    def test_assembly(self, settings: PatternSettings) -> None:
        drawing = Drawing()
        draw_assembly(drawing, Rect.from_center(Point(0.0, 0.0), 2.0, 1.0), settings)
        lines = drawing.lines()
        assert len(lines) == 4
        assert all(line.layer is Layer.ASSEMBLY_TOP for line in lines)

    def test_courtyard_encloses_body_and_pads(self, settings: PatternSettings) -> None:
        body = Rect.from_center(Point(0.0, 0.0), 2.0, 1.0)
        pads = [Pad("1", Point(-1.5, 0.0), Size(1.0, 1.2)), Pad("2", Point(1.5, 0.0), Size(1.0, 1.2))]
        drawing = Drawing()
        courtyard = draw_courtyard(drawing, body, pads, 0.25, settings)
        assert (courtyard.min_x, courtyard.max_x) == pytest.approx((-2.25, 2.25))
        assert (courtyard.min_y, courtyard.max_y) == pytest.approx((-0.85, 0.85))
        assert courtyard.layer is Layer.COURTYARD_TOP
        assert len(drawing.lines()) == 4

    def test_attributes(self, settings: PatternSettings) -> None:
        drawing = Drawing()
        courtyard = Rect.from_center(Point(0.0, 0.0), 4.0, 2.0)
        draw_attributes(drawing, courtyard, settings)
        ref_des = drawing.find_attribute("ref-des")
        value = drawing.find_attribute("value")
        assert ref_des is not None and value is not None
        assert ref_des.origin == Point(0.0, 1.5)
        assert ref_des.layer is Layer.SILKSCREEN_TOP
        assert value.origin == Point(0.0, 0.0)
        assert value.layer is Layer.ASSEMBLY_TOP
