"""Package strategy protocol.

A package strategy turns a merged component document into the land pattern
drawing and the 3-D model drawing of one package family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from component_foundry.config import Config
    from component_foundry.drawing.drawing import Drawing


@runtime_checkable
class PackageHandler(Protocol):
    """Protocol implemented by every package family."""

    def draw_pattern(self, config: Config) -> Drawing:
        """Draw the land pattern.

        Args:
            config: Merged component document.

        Returns:
            Drawing with pads, outlines and attributes.

        Raises:
            ComponentFoundryError: If a required key is missing or malformed.
        """
        ...

    def draw_model(self, config: Config) -> Drawing:
        """Draw the 3-D model as body boxes."""
        ...
