from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from component_foundry.paths import get_template_path

if TYPE_CHECKING:
    from component_foundry.config import Config
    from component_foundry.symbols.symbol import Symbol


@runtime_checkable
class SymbolHandler(Protocol):
    """Protocol implemented by every symbol family."""

    def draw(self, config: Config) -> Symbol:
        """Draw the symbol of a merged component document."""
        ...


@lru_cache(maxsize=None)
def load_template(name: str) -> str:
    """Return the text of a bundled symbol template.

    Raises:
        FileNotFoundError: If no template is bundled under ``name``.
    """
    return get_template_path(name).read_text(encoding="utf-8")
