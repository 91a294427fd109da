from __future__ import annotations

import logging
from dataclasses import dataclass

from component_foundry.config import Config
from component_foundry.drawing.drawing import Drawing
from component_foundry.hashing import short_digest
from component_foundry.packages import Packages
from component_foundry.symbols import Symbol, Symbols

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Component:
    """Compiled component.

    Attributes:
        name: Component name.
        symbol: Schematic symbol.
        pattern: Land pattern drawing.
        model: 3-D model drawing.
        digest: SHA-256 fingerprint of the merged document.

    The pattern, model and symbol part drawings are frozen on construction.
    """

    name: str
    symbol: Symbol
    pattern: Drawing
    model: Drawing
    digest: str

    def __post_init__(self) -> None:
        self.pattern.freeze()
        self.model.freeze()
        for part in self.symbol.parts:
            part.freeze()

    @property
    def digest_short(self) -> str:
        return short_digest(self.digest)

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        packages: Packages | None = None,
        symbols: Symbols | None = None,
    ) -> Component:
        """Compile a merged component document.

        Args:
            config: Component document merged over the library defaults.
            packages: Package strategies; the built-in set when omitted.
            symbols: Symbol strategies; the built-in set when omitted.

        Returns:
            The compiled component.

        Raises:
            MissingElementError: If ``name``, ``symbol.type`` or ``package.type`` is missing.
            InvalidSymbolTypeError: If ``symbol.type`` names no strategy.
            InvalidPackageTypeError: If ``package.type`` names no strategy.
            ComponentFoundryError: Any failure raised by the strategies.
        """
        packages = packages or Packages()
        symbols = symbols or Symbols()

        name = config.get_str("name")
        symbol_handler = symbols.get_handler(config.get_str("symbol.type"))
        package_handler = packages.get_handler(config.get_str("package.type"))

        symbol = symbol_handler.draw(config)
        pattern = package_handler.draw_pattern(config)
        model = package_handler.draw_model(config)
        digest = config.calc_digest()
        logger.debug("component '%s' digest %s", name, short_digest(digest))
        return cls(name=name, symbol=symbol, pattern=pattern, model=model, digest=digest)
