"""IPC-7351B land pattern calculator.

Pads are sized by stacking the lead tolerances against the toe, heel and side
solder fillet goals of the selected density level:

    s_min = span.min - 2 * len.max
    s_max = span.max - 2 * len.min
    s_tol_rms = sqrt(span.tol^2 + 2 * len.tol^2)
    new_s_max = s_max - (s_max - s_min - s_tol_rms) / 2

    z_max = span.min + 2 * toe + sqrt(span.tol^2 + 4f^2 + 4p^2)
    g_min = new_s_max - 2 * heel - sqrt(new_s_tol^2 + 4f^2 + 4p^2)
    y_ref = width.min + 2 * side + sqrt(width.tol^2 + 4f^2 + 4p^2)

Pad width is ``(z_max - g_min) / 2`` and pad height ``y_ref``, both rounded to
0.01; the pad center distance ``(z_max + g_min) / 2`` is rounded to 0.02.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from component_foundry.config import Config
from component_foundry.geom.primitives import Size
from component_foundry.settings import DensityLevel, PatternSettings
from component_foundry.units import Range, round_to

__all__ = [
    "Goals",
    "Ipc7351B",
    "PackageType",
    "PadProperties",
    "goals_for",
    "round_place",
    "round_size",
]

logger = logging.getLogger(__name__)

SIZE_ROUNDOFF = 0.01
PLACE_ROUNDOFF = 0.02
BODY_GAP_MARGIN = 0.1


class PackageType(Enum):
    """Package family selecting the goal table."""

    CHIP = "chip"
    SOP = "sop"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Goals:
    """Solder fillet goals and courtyard excess for one density level."""

    toe: float
    heel: float
    side: float
    courtyard: float


# (upper lead span bound, toe, heel, side, courtyard), columns most/nominal/least
_CHIP_GOALS: tuple[tuple[float, tuple[float, ...], tuple[float, ...], tuple[float, ...], tuple[float, ...]], ...] = (
    (0.5, (0.06, 0.05, 0.04), (-0.02, -0.03, -0.04), (-0.02, -0.03, -0.04), (0.2, 0.15, 0.1)),
    (0.75, (0.12, 0.1, 0.08), (-0.01, -0.02, -0.03), (-0.01, -0.02, -0.03), (0.2, 0.15, 0.1)),
    (1.3, (0.25, 0.2, 0.15), (0.0, -0.01, -0.02), (0.0, -0.01, -0.02), (0.2, 0.15, 0.1)),
    (2.85, (0.4, 0.3, 0.2), (0.0, 0.0, 0.0), (0.05, 0.0, -0.05), (0.4, 0.2, 0.1)),
    (3.85, (0.45, 0.35, 0.25), (0.0, 0.0, 0.0), (0.05, 0.0, -0.05), (0.4, 0.2, 0.1)),
    (4.75, (0.5, 0.4, 0.3), (0.0, 0.0, 0.0), (0.05, 0.0, -0.05), (0.4, 0.2, 0.1)),
    (math.inf, (0.6, 0.5, 0.4), (0.0, 0.0, 0.0), (0.05, 0.0, -0.05), (0.4, 0.2, 0.1)),
)

# Gull-wing and other leaded families
_LEADED_GOALS = ((0.55, 0.35, 0.15), (0.45, 0.35, 0.25), (0.05, 0.03, 0.01), (0.5, 0.25, 0.12))


def goals_for(package_type: PackageType, lead_span: Range, density: DensityLevel) -> Goals:
    """Look up the goals for a package family and density level.

    Chip goals are bracketed by the nominal lead span (the chip length).
    """
    i = density.index
    if package_type is PackageType.CHIP:
        length = lead_span.nom
        for bound, toe, heel, side, courtyard in _CHIP_GOALS:
            if length <= bound:
                return Goals(toe[i], heel[i], side[i], courtyard[i])
    toe, heel, side, courtyard = _LEADED_GOALS
    return Goals(toe[i], heel[i], side[i], courtyard[i])


def round_size(value: float) -> float:
    return round_to(value, SIZE_ROUNDOFF)


def round_place(value: float) -> float:
    return round_to(value, PLACE_ROUNDOFF)


@dataclass(frozen=True, slots=True)
class PadProperties:
    """Calculated pad geometry of a two-row pattern.

    Attributes:
        size: Pad extent; x runs along the lead, y across it.
        distance: Center-to-center distance of opposing pads.
        courtyard: Courtyard excess for the density level.
        lead_span: Nominal lead span the pads were calculated for.
    """

    size: Size
    distance: float
    courtyard: float
    lead_span: float

    @property
    def gap(self) -> float:
        """Copper gap between opposing pads."""
        return self.distance - self.size.x

    @property
    def span(self) -> float:
        """Outer-to-outer extent of opposing pads."""
        return self.distance + self.size.x

    def post_process(self, config: Config, settings: PatternSettings | None = None) -> PadProperties:
        """Apply explicit pad overrides and the space-for-iron minimum.

        Overrides are skipped when ``pattern.always-calculate`` is set. Later
        overrides win: ``pad-size`` replaces ``pad-size-x``/``pad-size-y``, and
        ``pad-span``/``pad-space`` replace ``pad-distance``.
        """
        settings = settings or PatternSettings.from_config(config)
        width, height, distance = self.size.x, self.size.y, self.distance

        if not settings.always_calculate:
            if config.contains("pattern.pad-size-x"):
                width = config.get_float("pattern.pad-size-x")
            if config.contains("pattern.pad-size-y"):
                height = config.get_float("pattern.pad-size-y")
            if config.contains("pattern.pad-size"):
                width, height = config.get_pair("pattern.pad-size").to_tuple()
            if config.contains("pattern.pad-distance"):
                distance = config.get_float("pattern.pad-distance")
            if config.contains("pattern.pad-span"):
                distance = config.get_float("pattern.pad-span") - width
            if config.contains("pattern.pad-space"):
                distance = config.get_float("pattern.pad-space") + width

        if settings.space_for_iron > 0.0:
            lead_to_pad = (distance + width - self.lead_span) / 2.0
            if lead_to_pad < settings.space_for_iron:
                shortfall = settings.space_for_iron - lead_to_pad
                width += shortfall
                distance += shortfall

        return replace(self, size=Size(width, height), distance=distance)


@dataclass(frozen=True, slots=True)
class Ipc7351B:
    """Calculator inputs.

    Attributes:
        package_type: Family selecting the goal table.
        lead_span: Outer-to-outer lead span.
        lead_len: Length of the lead's solderable foot.
        lead_width: Width of the lead.
        lead_height: Lead height, informative only.
        body: Body width between the pad rows; pads are kept clear of it.
        pitch: Lead pitch; pad height is capped to keep pad-to-pad clearance.
        density: Density level.
        fab_tol: Fabrication tolerance.
        place_tol: Placement tolerance.
        clearance: Minimum pad-to-pad copper gap.
    """

    package_type: PackageType
    lead_span: Range
    lead_len: Range
    lead_width: Range
    lead_height: Range | None = None
    body: float | None = None
    pitch: float | None = None
    density: DensityLevel = DensityLevel.NOMINAL
    fab_tol: float = 0.05
    place_tol: float = 0.025
    clearance: float = 0.0

    def with_settings(self, settings: PatternSettings) -> Ipc7351B:
        return replace(
            self,
            density=settings.density_level,
            fab_tol=settings.fabrication_tolerance,
            place_tol=settings.placement_tolerance,
            clearance=settings.pad_to_pad,
        )

    @property
    def goals(self) -> Goals:
        return goals_for(self.package_type, self.lead_span, self.density)

    def calc(self) -> PadProperties:
        goals = self.goals
        span_tol = self.lead_span.tol
        len_tol = self.lead_len.tol
        width_tol = self.lead_width.tol

        s_min = self.lead_span.min - 2.0 * self.lead_len.max
        s_max = self.lead_span.max - 2.0 * self.lead_len.min
        s_tol = s_max - s_min
        s_tol_rms = math.sqrt(span_tol * span_tol + 2.0 * len_tol * len_tol)
        s_diff = s_tol - s_tol_rms

        new_s_min = s_min + s_diff / 2.0
        new_s_max = s_max - s_diff / 2.0
        new_s_tol = new_s_max - new_s_min

        process = 4.0 * self.fab_tol * self.fab_tol + 4.0 * self.place_tol * self.place_tol
        toe_tol = math.sqrt(span_tol * span_tol + process)
        heel_tol = math.sqrt(new_s_tol * new_s_tol + process)
        side_tol = math.sqrt(width_tol * width_tol + process)

        z_max = self.lead_span.min + 2.0 * goals.toe + toe_tol
        g_min = new_s_max - 2.0 * goals.heel - heel_tol
        y_ref = self.lead_width.min + 2.0 * goals.side + side_tol

        pad_width = round_size((z_max - g_min) / 2.0)
        pad_height = round_size(y_ref)
        pad_distance = round_place((z_max + g_min) / 2.0)

        gap = pad_distance - pad_width
        span = pad_distance + pad_width
        trim = False
        if gap < self.clearance:
            gap = self.clearance
            trim = True
        if self.body is not None and gap < self.body - BODY_GAP_MARGIN:
            gap = self.body - BODY_GAP_MARGIN
            trim = True
        if trim:
            logger.debug("trimming pads to gap %.3f", gap)
            pad_width = round_size((span - gap) / 2.0)
            pad_distance = round_place((span + gap) / 2.0)

        if self.pitch is not None and pad_height > self.pitch - self.clearance:
            pad_height = self.pitch - self.clearance

        return PadProperties(
            size=Size(pad_width, pad_height),
            distance=pad_distance,
            courtyard=goals.courtyard,
            lead_span=self.lead_span.nom,
        )
