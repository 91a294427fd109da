"""Package strategies selected by ``package.type``.

Supported types:
- chip: two-terminal chip components
- sop: small outline gull-wing packages
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from component_foundry.errors import InvalidPackageTypeError

from .base import PackageHandler
from .chip import ChipPackage
from .sop import SopPackage

__all__ = [
    "PACKAGE_FACTORIES",
    "ChipPackage",
    "PackageHandler",
    "Packages",
    "SopPackage",
]

logger = logging.getLogger(__name__)

PACKAGE_FACTORIES: dict[str, Callable[[], PackageHandler]] = {
    "chip": ChipPackage,
    "sop": SopPackage,
}


class Packages:
    """Registry of package strategies keyed by type name."""

    def __init__(self, factories: Mapping[str, Callable[[], PackageHandler]] | None = None) -> None:
        source = PACKAGE_FACTORIES if factories is None else factories
        self._handlers: dict[str, PackageHandler] = {name: factory() for name, factory in source.items()}

    def register(self, name: str, handler: PackageHandler) -> None:
        if not isinstance(handler, PackageHandler):
            raise TypeError(f"{type(handler).__name__} does not implement PackageHandler")
        self._handlers[name] = handler

    def get_handler(self, name: str) -> PackageHandler:
        """Return the strategy for ``name``.

        Raises:
            InvalidPackageTypeError: If no strategy is registered under ``name``.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise InvalidPackageTypeError(name)
        logger.debug("package handler '%s'", name)
        return handler

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers
