# SPDX-License-Identifier: MIT
"""Unit tests for the package strategies."""

from __future__ import annotations

import pytest

from component_foundry.config import Config
from component_foundry.drawing import Box3D
from component_foundry.errors import InvalidElementTypeError, InvalidPackageTypeError, MissingElementError
from component_foundry.packages import ChipPackage, PackageHandler, Packages, SopPackage


class TestPackages:
    """Tests for the package registry."""

    def test_builtin_types(self) -> None:
        packages = Packages()
        assert packages.names() == ["chip", "sop"]
        assert isinstance(packages.get_handler("chip"), ChipPackage)
        assert "sop" in packages

    def test_unknown_type(self) -> None:
        with pytest.raises(InvalidPackageTypeError) as exc_info:
            Packages().get_handler("bga")
        assert exc_info.value.name == "bga"

    def test_register(self) -> None:
        packages = Packages(factories={})
        packages.register("soic", SopPackage())
        assert packages.names() == ["soic"]

    def test_register_rejects_non_handler(self) -> None:
        with pytest.raises(TypeError):
            Packages().register("bad", object())  # type: ignore[arg-type]

    def test_handlers_satisfy_protocol(self) -> None:
        assert isinstance(ChipPackage(), PackageHandler)
        assert isinstance(SopPackage(), PackageHandler)


class TestChipPackage:
    """Tests for ChipPackage."""

    def test_pattern(self, capacitor_config: Config) -> None:
        pads = ChipPackage().draw_pattern(capacitor_config).pads()
        assert [pad.name for pad in pads] == ["1", "2"]
        assert pads[0].size.to_tuple() == pytest.approx((0.84, 0.93))
        assert pads[0].origin.x == pytest.approx(-0.75)
        assert pads[1].origin.x == pytest.approx(0.75)

    def test_override(self, capacitor_config: Config) -> None:
        config = capacitor_config.merge(Config.from_yaml("pattern: {pad-size: '1.0;1.0'}"))
        pads = ChipPackage().draw_pattern(config).pads()
        assert pads[0].size.to_tuple() == (1.0, 1.0)

    def test_model(self, capacitor_config: Config) -> None:
        boxes = ChipPackage().draw_model(capacitor_config).boxes()
        assert len(boxes) == 1
        assert boxes[0].dimensions == pytest.approx((1.6, 0.8, 0.5))
        assert isinstance(boxes[0], Box3D)

    def test_missing_key(self, library_defaults: Config) -> None:
        config = library_defaults.merge(Config.from_yaml("package: {type: chip, body-size-x: 1.6}"))
        with pytest.raises(MissingElementError):
            ChipPackage().draw_pattern(config)


class TestSopPackage:
    """Tests for SopPackage."""

    def test_pattern(self, sop8_config: Config) -> None:
        drawing = SopPackage().draw_pattern(sop8_config)
        pads = drawing.pads()
        assert len(pads) == 8
        assert pads[0].origin.x < 0.0 < pads[7].origin.x
        gap = pads[7].origin.x - pads[0].origin.x - pads[0].size.x
        assert gap >= 3.9 - 0.1 - 1e-9
        assert pads[0].size.y <= 1.27

    def test_pin_one_marker(self, sop8_config: Config) -> None:
        drawing = SopPackage().draw_pattern(sop8_config)
        first = drawing.pads()[0]
        markers = [
            line
            for line in drawing.lines()
            if line.is_horizontal and line.p0.x == first.bounds.min_x and line.p1.x == first.bounds.max_x
        ]
        assert markers

    def test_odd_lead_count(self, sop8_config: Config) -> None:
        config = sop8_config.merge(Config.from_yaml("package: {lead-count: 7}"))
        with pytest.raises(InvalidElementTypeError) as exc_info:
            SopPackage().draw_pattern(config)
        assert exc_info.value.path == "package.lead-count"

    def test_model(self, sop8_config: Config) -> None:
        (box,) = SopPackage().draw_model(sop8_config).boxes()
        assert box.dimensions == pytest.approx((3.9, 4.9, 1.55))
        assert box.origin == pytest.approx((-1.95, -2.45, 0.0))
