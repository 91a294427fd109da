"""Standard package outlines.

An outline is a partial component document holding the package dimensions
of a standard drawing. Components refer to one with ``package.outline``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from component_foundry.config import Config
from component_foundry.paths import get_outline_path

__all__ = ["OUTLINE_IDS", "Outlines", "load_outline"]

logger = logging.getLogger(__name__)

OUTLINE_IDS = ("jedec/ms-012",)


@lru_cache(maxsize=None)
def _outline_text(outline_id: str) -> str:
    return get_outline_path(outline_id).read_text(encoding="utf-8")


def load_outline(outline_id: str) -> Config:
    """Load a bundled outline document."""
    return Config.from_yaml(_outline_text(outline_id.lower()))


class Outlines:
    """Registry of outline documents keyed by id."""

    def __init__(self, outline_ids: tuple[str, ...] = OUTLINE_IDS) -> None:
        self._outlines = {outline_id: load_outline(outline_id) for outline_id in outline_ids}

    def get(self, outline_id: str) -> Config | None:
        """Return a copy of the outline document, or None if unknown."""
        outline = self._outlines.get(outline_id.lower())
        if outline is None:
            return None
        return Config(outline.to_dict())

    def register(self, outline_id: str, outline: Config) -> None:
        self._outlines[outline_id.lower()] = outline

    def ids(self) -> list[str]:
        return sorted(self._outlines)

    def __contains__(self, outline_id: object) -> bool:
        return isinstance(outline_id, str) and outline_id.lower() in self._outlines
