# SPDX-License-Identifier: MIT
"""Tests for the Library batch driver."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from component_foundry.config import Config
from component_foundry.errors import (
    CompilationError,
    InvalidPackageTypeError,
    LibraryError,
    MissingConfigFileError,
    MissingElementError,
)
from component_foundry.library import Library, load_library_defaults

BROKEN_YAML = """\
name: BROKEN
symbol: {type: capacitor}
package: {type: bga}
"""


class TestLibraryDefaults:
    """Tests for the bundled library document."""

    def test_defaults(self, library_defaults: Config) -> None:
        assert library_defaults.get_str("pattern.density-level") == "N"
        assert library_defaults.get_float("pattern.clearance.pad-to-mask") == 0.05
        assert library_defaults.get_float("symbol.pin-length") == 2.0

    def test_fresh_copy(self) -> None:
        first = load_library_defaults()
        first.insert("pattern.density-level", "L")
        assert load_library_defaults().get_str("pattern.density-level") == "N"

    def test_user_override(self) -> None:
        library = Library(Config.from_yaml("pattern: {clearance: {pad-to-mask: 0.1}}"))
        assert library.config.get_float("pattern.clearance.pad-to-mask") == 0.1
        assert library.config.get_float("pattern.clearance.pad-to-silk") == 0.2


class TestLibrary:
    """Tests for compiling component documents."""

    def test_add_component(self, capacitor_yaml: str) -> None:
        library = Library()
        component = library.add_component("c0603", capacitor_yaml)
        assert component is not None
        assert component.name == "C0603"
        assert library.components == [component]
        assert library.failures == []

    def test_parse_component_does_not_record(self, capacitor_yaml: str) -> None:
        library = Library()
        library.parse_component("c0603", capacitor_yaml)
        assert library.components == []

    def test_library_override_reaches_pads(self, capacitor_yaml: str) -> None:
        library = Library(Config.from_yaml("pattern: {clearance: {pad-to-mask: 0.1}}"))
        component = library.parse_component("c0603", capacitor_yaml)
        assert [pad.mask for pad in component.pattern.pads()] == [0.1, 0.1]

    def test_outline(self, soic8_yaml: str) -> None:
        """Package dimensions come from the referenced outline."""
        component = Library().parse_component("soic8", soic8_yaml)
        assert [pad.name for pad in component.pattern.pads()] == [str(i) for i in range(1, 9)]
        assert component.model.boxes()[0].dimensions == pytest.approx((3.9, 4.9, 1.55))

    def test_component_overrides_outline(self, soic8_yaml: str) -> None:
        text = soic8_yaml + "  body-size-z: 1.5\n"
        component = Library().parse_component("soic8", text)
        assert component.model.boxes()[0].dimensions[2] == pytest.approx(1.5)

    def test_unknown_outline(self) -> None:
        text = "name: X\nsymbol: {type: ic}\npackage: {outline: jedec/mo-999}\n"
        with pytest.raises(MissingConfigFileError):
            Library().parse_component("x", text)

    def test_failure_raises_by_default(self) -> None:
        with pytest.raises(InvalidPackageTypeError):
            Library().add_component("broken", BROKEN_YAML)

    def test_keep_going(
        self, capacitor_yaml: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Failures are recorded and compilation continues."""
        library = Library(keep_going=True)
        with caplog.at_level(logging.WARNING, logger="component_foundry.library"):
            compiled = library.add_components({"broken": BROKEN_YAML, "c0603": capacitor_yaml})
        assert [component.name for component in compiled] == ["C0603"]
        assert len(library.failures) == 1
        failure = library.failures[0]
        assert isinstance(failure, CompilationError)
        assert isinstance(failure, LibraryError)
        assert failure.component_id == "broken"
        assert isinstance(failure.cause, InvalidPackageTypeError)
        assert "broken" in caplog.text

    def test_keep_going_missing_element(self) -> None:
        library = Library(keep_going=True)
        assert library.add_component("nameless", "symbol: {type: capacitor}\n") is None
        assert isinstance(library.failures[0].cause, MissingElementError)

    def test_load_component_file(self, tmp_path: Path, capacitor_yaml: str) -> None:
        path = tmp_path / "C0603.yaml"
        path.write_text(capacitor_yaml, encoding="utf-8")
        library = Library()
        component = library.load_component_file(path)
        assert component is not None
        assert library.components == [component]

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MissingConfigFileError):
            Library().load_component_file(tmp_path / "absent.yaml")
