"""Symbol strategies selected by ``symbol.type``.

Supported types:
- capacitor: non-polarized capacitor from a bundled template
- ic: generated box symbol
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from component_foundry.errors import InvalidSymbolTypeError

from .base import SymbolHandler, load_template
from .capacitor import CapacitorSymbol
from .ic import IcSymbol
from .symbol import Symbol

__all__ = [
    "SYMBOL_FACTORIES",
    "CapacitorSymbol",
    "IcSymbol",
    "Symbol",
    "SymbolHandler",
    "Symbols",
    "load_template",
]

logger = logging.getLogger(__name__)

SYMBOL_FACTORIES: dict[str, Callable[[], SymbolHandler]] = {
    "capacitor": CapacitorSymbol,
    "ic": IcSymbol,
}


class Symbols:
    """Registry of symbol strategies keyed by type name."""

    def __init__(self, factories: Mapping[str, Callable[[], SymbolHandler]] | None = None) -> None:
        source = SYMBOL_FACTORIES if factories is None else factories
        self._handlers: dict[str, SymbolHandler] = {name: factory() for name, factory in source.items()}

    def register(self, name: str, handler: SymbolHandler) -> None:
        if not isinstance(handler, SymbolHandler):
            raise TypeError(f"{type(handler).__name__} does not implement SymbolHandler")
        self._handlers[name] = handler

    def get_handler(self, name: str) -> SymbolHandler:
        """Return the strategy for ``name``.

        Raises:
            InvalidSymbolTypeError: If no strategy is registered under ``name``.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise InvalidSymbolTypeError(name)
        logger.debug("symbol handler '%s'", name)
        return handler

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers
