"""Exception hierarchy for component compilation.

Every failure raised while compiling a component derives from
:class:`ComponentFoundryError`. Each exception keeps the values it was
raised with as attributes so callers can build their own messages.

Hierarchy:
    ComponentFoundryError
      ConfigError
        MissingElementError
        InvalidElementTypeError
        InvalidConfigError
        MissingConfigFileError
      PinoutError
        PinNameRangeError
        InvalidPinNameError
        InvalidPinNumberError
        PinCountMismatchError
      TemplateError
        UnsupportedUnitsError
        InvalidTemplateError
        InvalidPathDataError
        InvalidPinIdError
        UnknownTemplatePinError
      StrategyError
        InvalidPackageTypeError
        InvalidSymbolTypeError
      InvalidSymbolNoPartsError
      LibraryError
        CompilationError
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "CompilationError",
    "ComponentFoundryError",
    "ConfigError",
    "InvalidConfigError",
    "InvalidElementTypeError",
    "InvalidPackageTypeError",
    "InvalidPathDataError",
    "InvalidPinIdError",
    "InvalidPinNameError",
    "InvalidPinNumberError",
    "InvalidSymbolNoPartsError",
    "InvalidSymbolTypeError",
    "InvalidTemplateError",
    "LibraryError",
    "MissingConfigFileError",
    "MissingElementError",
    "PinCountMismatchError",
    "PinNameRangeError",
    "PinoutError",
    "StrategyError",
    "TemplateError",
    "UnknownTemplatePinError",
    "UnsupportedUnitsError",
]


class ComponentFoundryError(Exception):
    """Base class for all component compilation failures."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(ComponentFoundryError, ValueError):
    """Base class for configuration document failures."""


class MissingElementError(ConfigError):
    """Raised when a dot-path resolves to nothing."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"missing element '{path}' in config")


class InvalidElementTypeError(ConfigError):
    """Raised when a config element exists but cannot be read as ``expected``."""

    def __init__(self, path: str, expected: str) -> None:
        self.path = path
        self.expected = expected
        super().__init__(f"type of config element '{path}' is expected to be of type '{expected}'")


class InvalidConfigError(ConfigError):
    """Raised when a configuration document cannot be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid config: {reason}")


class MissingConfigFileError(ConfigError):
    """Raised when a configuration file does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"missing config file '{name}'")


# ---------------------------------------------------------------------------
# Pinout
# ---------------------------------------------------------------------------


class PinoutError(ComponentFoundryError, ValueError):
    """Base class for pinout grammar failures."""


class PinNameRangeError(PinoutError):
    """Raised when both ends of a pin name range use different prefixes."""

    def __init__(self, text: str, first: str, second: str) -> None:
        self.text = text
        self.first = first
        self.second = second
        super().__init__(f"invalid pin name range '{text}': prefix '{first}' differs from '{second}'")


class InvalidPinNameError(PinoutError):
    """Raised for an empty or inverted pin name range."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid pin name '{text}': {reason}")


class InvalidPinNumberError(PinoutError):
    """Raised for a malformed pin number or pin number range."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid pin number '{text}': {reason}")


class PinCountMismatchError(PinoutError):
    """Raised when several names are bound to a different count of numbers."""

    def __init__(self, names: Sequence[str], numbers: Sequence[str]) -> None:
        self.names = tuple(names)
        self.numbers = tuple(numbers)
        super().__init__(
            "invalid pin count, it should be the same at both sides: "
            f"{len(self.names)} != {len(self.numbers)}"
        )


# ---------------------------------------------------------------------------
# Vector templates
# ---------------------------------------------------------------------------


class TemplateError(ComponentFoundryError, ValueError):
    """Base class for vector template failures."""


class UnsupportedUnitsError(TemplateError):
    """Raised when a template length uses a unit other than none, mm or pt."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"unsupported units '{unit}' in template")


class InvalidTemplateError(TemplateError):
    """Raised when template text is not a well-formed SVG document."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid template: {reason}")


class InvalidPathDataError(TemplateError):
    """Raised when a path's ``d`` attribute cannot be decoded."""

    def __init__(self, data: str, reason: str) -> None:
        self.data = data
        self.reason = reason
        super().__init__(f"invalid path data '{data}': {reason}")


class InvalidPinIdError(TemplateError):
    """Raised when a pin element id is not ``pin-<name>:<halign>:<valign>``."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"invalid pin id '{element_id}', expected 'pin-<name>:<halign>:<valign>'")


class UnknownTemplatePinError(TemplateError):
    """Raised when a template pin name is not present in the pinout."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid pin name '{name}' in template: not found in pinout")


# ---------------------------------------------------------------------------
# Strategy selection
# ---------------------------------------------------------------------------


class StrategyError(ComponentFoundryError, LookupError):
    """Base class for unknown strategy lookups."""


class InvalidPackageTypeError(StrategyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid package type: '{name}'")


class InvalidSymbolTypeError(StrategyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid symbol type: '{name}'")


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class InvalidSymbolNoPartsError(ComponentFoundryError):
    """Raised when a symbol is assembled without any part drawing."""

    def __init__(self) -> None:
        super().__init__("invalid symbol: no parts")


class LibraryError(ComponentFoundryError):
    """Base class for batch compilation failures."""


class CompilationError(LibraryError):
    """Records the failure that aborted compilation of one component."""

    def __init__(self, component_id: str, cause: ComponentFoundryError) -> None:
        self.component_id = component_id
        self.cause = cause
        super().__init__(f"component '{component_id}' failed: {cause}")
