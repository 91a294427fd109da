# SPDX-License-Identifier: MIT
"""Unit tests for vector template decomposition."""

from __future__ import annotations

import pytest

from component_foundry.drawing import Attribute, Drawing, PinDirection, SymbolPin, decompose
from component_foundry.drawing.svg import parse_path_data
from component_foundry.errors import (
    InvalidPathDataError,
    InvalidPinIdError,
    InvalidTemplateError,
    UnknownTemplatePinError,
    UnsupportedUnitsError,
)
from component_foundry.geom.primitives import HAlign, Line, Point, VAlign
from component_foundry.pinout import Pinout

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def svg(body: str, attributes: str = "") -> str:
    return f"<svg {SVG_NS} {attributes}>{body}</svg>"


def points(subpath: list[Point]) -> list[tuple[float, float]]:
    return [point.to_tuple() for point in subpath]


class TestParsePathData:
    """Tests for path data decoding."""

    def test_absolute_commands(self) -> None:
        subpaths = parse_path_data("M 0 0 L 10 0 H 20 V 5 Z")
        assert len(subpaths) == 1
        assert points(subpaths[0]) == [(0, 0), (10, 0), (20, 0), (20, 5), (0, 0)]

    def test_relative_commands(self) -> None:
        subpaths = parse_path_data("m 1 1 l 2 0 h 1 v 1")
        assert points(subpaths[0]) == [(1, 1), (3, 1), (4, 1), (4, 2)]

    def test_implicit_lineto(self) -> None:
        assert points(parse_path_data("M0,0 1,1 2,2")[0]) == [(0, 0), (1, 1), (2, 2)]

    def test_multiple_subpaths(self) -> None:
        subpaths = parse_path_data("M 0 0 L 1 0 M 5 5 L 6 5")
        assert [points(subpath) for subpath in subpaths] == [[(0, 0), (1, 0)], [(5, 5), (6, 5)]]

    @pytest.mark.parametrize(
        "data",
        [
            "M 0 0 C 1 2 3 4 5 6",
            "M 0 0 L 1",
            "1 2 M 0 0",
            "M 0 0 L # 1",
            "M 0 0 L V 1",
        ],
    )
    def test_invalid(self, data: str) -> None:
        with pytest.raises(InvalidPathDataError) as exc_info:
            parse_path_data(data)
        assert exc_info.value.data == data


class TestDecompose:
    """Tests for decompose."""

    def test_reference_axes_define_grid(self) -> None:
        """Axis lengths set the unit, axis midpoints the origin, and y points up."""
        template = decompose(
            svg(
                '<path id="ch" d="M 0 0 H 10"/>'
                '<path id="cv" d="M 0 1 V 3"/>'
                '<path id="line" d="M 0 0 L 10 0"/>'
            ),
            Pinout(),
        )
        assert set(template.elements) == {"line"}
        assert template.transform.apply(0.0, 0.0) == pytest.approx((-0.5, 1.0))
        assert template.transform.apply(10.0, 0.0) == pytest.approx((0.5, 1.0))

        drawing = Drawing()
        drawing.set_transform(template.transform)
        drawing.extend(template.elements.values())
        line = drawing.lines()[0]
        assert line.p0.to_tuple() == pytest.approx((-0.5, 1.0))
        assert line.p1.to_tuple() == pytest.approx((0.5, 1.0))

    def test_without_axes_only_flips_y(self) -> None:
        template = decompose(svg('<path id="a" d="M 1 2 L 3 2"/>'), Pinout())
        assert template.transform.apply(1.0, 2.0) == pytest.approx((1.0, -2.0))

    def test_document_units(self) -> None:
        """Root width over viewBox width scales user units to millimetres."""
        template = decompose(
            svg('<path id="a" d="M 0 0 L 100 0" stroke-width="2"/>', 'width="50mm" viewBox="0 0 100 100"'),
            Pinout(),
        )
        line = template.elements["a"]
        assert isinstance(line, Line)
        assert line.p1.x == pytest.approx(50.0)
        assert line.width == pytest.approx(1.0)

    def test_segment_and_subpath_keys(self) -> None:
        template = decompose(
            svg('<path id="outline" d="M 0 0 L 1 0 L 1 1"/><path id="bars" d="M 0 0 L 1 0 M 2 0 L 3 0"/>'),
            Pinout(),
        )
        assert list(template.elements) == ["outline", "outline.1", "bars", "bars#1"]

    def test_anonymous_ids(self) -> None:
        template = decompose(svg('<line x1="0" y1="0" x2="1" y2="0"/><polyline points="0,0 1,1"/>'), Pinout())
        assert list(template.elements) == ["#0", "#1"]

    def test_pin_binding(self) -> None:
        pinout = Pinout.from_mapping({"A": 1})
        template = decompose(svg('<path id="pin-A:left:middle" d="M 20 0 H 45"/>'), pinout)
        pin = template.elements["pin-A:left:middle"]
        assert isinstance(pin, SymbolPin)
        assert pin.pin.number == "1"
        assert pin.direction is PinDirection.RIGHT
        assert pin.origin == Point(20.0, 0.0)
        assert pin.length == pytest.approx(25.0)

    def test_right_pin_anchor(self) -> None:
        pinout = Pinout.from_mapping({"B": 2})
        template = decompose(svg('<path id="pin-B:right:middle" d="M 55 0 H 80"/>'), pinout)
        pin = template.elements["pin-B:right:middle"]
        assert isinstance(pin, SymbolPin)
        assert pin.direction is PinDirection.LEFT
        assert pin.origin == Point(80.0, 0.0)

    def test_unknown_pin(self) -> None:
        with pytest.raises(UnknownTemplatePinError) as exc_info:
            decompose(svg('<path id="pin-Z:left:middle" d="M 0 0 H 1"/>'), Pinout())
        assert exc_info.value.name == "Z"

    def test_malformed_pin_id(self) -> None:
        with pytest.raises(InvalidPinIdError):
            decompose(svg('<path id="pin-A:left" d="M 0 0 H 1"/>'), Pinout.from_mapping({"A": 1}))

    def test_rect_attribute(self) -> None:
        template = decompose(
            svg('<rect id="label:center:middle" x="0" y="0" width="4" height="2"/>'), Pinout()
        )
        attribute = template.elements["label:center:middle"]
        assert isinstance(attribute, Attribute)
        assert attribute.id == "label"
        assert attribute.origin == Point(2.0, 1.0)
        assert (attribute.halign, attribute.valign) == (HAlign.CENTER, VAlign.MIDDLE)

    def test_text_attribute(self) -> None:
        template = decompose(
            svg('<text id="ref-des:left:top" x="5" y="30" font-size="10">R</text>'), Pinout()
        )
        attribute = template.elements["ref-des:left:top"]
        assert isinstance(attribute, Attribute)
        assert attribute.value == "R"
        assert attribute.origin == Point(5.0, 20.0)
        assert attribute.font_size == 10.0

    def test_point_units(self) -> None:
        template = decompose(svg('<path id="a" d="M 0 0 H 1" stroke-width="72pt"/>'), Pinout())
        assert template.elements["a"].width == pytest.approx(25.4)

    def test_unsupported_stroke_unit(self) -> None:
        with pytest.raises(UnsupportedUnitsError):
            decompose(svg('<path id="a" d="M 0 0 H 1" stroke-width="1in"/>'), Pinout())

    def test_unsupported_document_unit(self) -> None:
        with pytest.raises(UnsupportedUnitsError):
            decompose(svg("", 'width="4in" viewBox="0 0 100 100"'), Pinout())

    def test_percent_document_width(self) -> None:
        with pytest.raises(UnsupportedUnitsError) as excinfo:
            decompose(svg("", 'width="100%" viewBox="0 0 100 100"'), Pinout())
        assert "%" in str(excinfo.value)

    def test_defs_are_not_drawn(self) -> None:
        """Primitives inside defs, markers and clip paths are skipped."""
        template = decompose(
            svg(
                '<defs><path id="arrow" d="M 0 0 L 1 1"/>'
                '<path id="pin-X:left:middle" d="M 0 0 H 1"/></defs>'
                '<clipPath id="clip"><rect id="clip-box" x="0" y="0" width="1" height="1"/></clipPath>'
                '<marker id="dot"><path id="dot-path" d="M 0 0 H 1"/></marker>'
                '<g><path id="a" d="M 0 0 H 1"/></g>'
            ),
            Pinout(),
        )
        assert list(template.elements) == ["a"]

    def test_transform_attribute_rejected(self) -> None:
        with pytest.raises(InvalidTemplateError):
            decompose(svg('<path id="a" d="M 0 0 H 1" transform="rotate(90)"/>'), Pinout())

    def test_diagonal_axis_rejected(self) -> None:
        with pytest.raises(InvalidTemplateError):
            decompose(svg('<path id="ch" d="M 0 0 L 1 1"/>'), Pinout())

    def test_not_svg(self) -> None:
        with pytest.raises(InvalidTemplateError):
            decompose("<html/>", Pinout())

    def test_malformed_xml(self) -> None:
        with pytest.raises(InvalidTemplateError):
            decompose("<svg", Pinout())
