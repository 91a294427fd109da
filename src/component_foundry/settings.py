"""Validated pattern and symbol settings read from a configuration document.

Settings are gathered from their dot-paths in a merged :class:`Config` and
validated with pydantic. Paths absent from the document take the model
default; present values that fail validation raise
:class:`InvalidElementTypeError` naming the offending path.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from component_foundry.config import Config
from component_foundry.errors import InvalidElementTypeError

__all__ = ["DensityLevel", "PatternSettings", "SymbolSettings", "parse_density_level"]


class DensityLevel(Enum):
    """IPC-7351 land pattern density level."""

    MOST = "most"
    NOMINAL = "nominal"
    LEAST = "least"

    @property
    def index(self) -> int:
        """Column of this level in the goal tables."""
        return _DENSITY_INDEX[self]


_DENSITY_INDEX = {DensityLevel.MOST: 0, DensityLevel.NOMINAL: 1, DensityLevel.LEAST: 2}


def parse_density_level(value: Any) -> DensityLevel:
    """Parse ``M``/``most`` and ``L``/``least``; any other string is nominal."""
    if isinstance(value, DensityLevel):
        return value
    if not isinstance(value, str):
        raise ValueError(f"density level must be a string, got {value!r}")
    if value in ("M", "m", "most"):
        return DensityLevel.MOST
    if value in ("L", "l", "least"):
        return DensityLevel.LEAST
    return DensityLevel.NOMINAL


DensityLevelField = Annotated[DensityLevel, BeforeValidator(parse_density_level)]
NonNegative = Annotated[float, Field(ge=0.0)]
Positive = Annotated[float, Field(gt=0.0)]

_S = TypeVar("_S", bound="_SettingsBase")


class _SettingsBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # field name -> config dot-path
    PATHS: ClassVar[dict[str, str]] = {}

    @classmethod
    def from_config(cls: type[_S], config: Config) -> _S:
        data = {
            field: config.get_element(path)
            for field, path in cls.PATHS.items()
            if config.contains(path)
        }
        try:
            return cls.model_validate(data, strict=True)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else ""
            expected = _expected_type(cls, field)
            raise InvalidElementTypeError(cls.PATHS.get(field, field), expected) from exc


def _expected_type(model: type[BaseModel], field: str) -> str:
    info = model.model_fields.get(field)
    if info is None or info.annotation is None:
        return "unknown"
    annotation = info.annotation
    if annotation is DensityLevel:
        return "density level"
    return getattr(annotation, "__name__", str(annotation))


class PatternSettings(_SettingsBase):
    """Land pattern settings under ``pattern.*``."""

    PATHS: ClassVar[dict[str, str]] = {
        "density_level": "pattern.density-level",
        "fabrication_tolerance": "pattern.tolerance.fabrication",
        "placement_tolerance": "pattern.tolerance.placement",
        "pad_to_pad": "pattern.clearance.pad-to-pad",
        "pad_to_mask": "pattern.clearance.pad-to-mask",
        "pad_to_silk": "pattern.clearance.pad-to-silk",
        "mask_width": "pattern.minimum.mask-width",
        "space_for_iron": "pattern.minimum.space-for-iron",
        "always_calculate": "pattern.always-calculate",
        "silkscreen_line_width": "pattern.line-width.silkscreen",
        "assembly_line_width": "pattern.line-width.assembly",
        "courtyard_line_width": "pattern.line-width.courtyard",
        "ref_des_font_size": "pattern.font-size.ref-des",
        "value_font_size": "pattern.font-size.value",
    }

    density_level: DensityLevelField = DensityLevel.NOMINAL
    fabrication_tolerance: NonNegative = Field(0.05, description="PCB fabrication tolerance")
    placement_tolerance: NonNegative = Field(0.025, description="Part placement tolerance")
    pad_to_pad: NonNegative = Field(0.0, description="Minimum copper gap between pads")
    pad_to_mask: NonNegative = Field(0.05, description="Solder mask expansion around pads")
    pad_to_silk: NonNegative = Field(0.2, description="Clearance from pads to silkscreen")
    mask_width: NonNegative = Field(0.0, description="Minimum solder mask web between pads")
    space_for_iron: NonNegative = Field(0.0, description="Minimum pad extension past the lead toe")
    always_calculate: bool = False
    silkscreen_line_width: Positive = 0.12
    assembly_line_width: Positive = 0.1
    courtyard_line_width: Positive = 0.05
    ref_des_font_size: Positive = 1.0
    value_font_size: Positive = 1.0


class SymbolSettings(_SettingsBase):
    """Schematic symbol settings under ``symbol.*``, in symbol grid units."""

    PATHS: ClassVar[dict[str, str]] = {
        "line_width": "symbol.line-width",
        "ref_des_font_size": "symbol.font-size.ref-des",
        "value_font_size": "symbol.font-size.value",
        "name_font_size": "symbol.font-size.name",
        "pin_font_size": "symbol.font-size.pin",
        "pin_length": "symbol.pin-length",
        "pin_space": "symbol.pin-space",
        "body_width": "symbol.body-width",
    }

    line_width: NonNegative = 0.1
    ref_des_font_size: Positive = 1.0
    value_font_size: Positive = 1.0
    name_font_size: Positive = 1.0
    pin_font_size: Positive = 0.8
    pin_length: Positive = 2.0
    pin_space: Positive = 1.0
    body_width: Positive = 10.0
