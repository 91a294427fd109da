"""Batch compilation of component documents.

A :class:`Library` owns the library-wide document (bundled defaults with an
optional user override merged on top) and compiles component documents
against it. Each component document is merged as::

    library defaults <- outline (if package.outline is set) <- component

With ``keep_going`` set, failures are recorded as :class:`CompilationError`
and compilation continues with the next component.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from component_foundry.component import Component
from component_foundry.config import Config
from component_foundry.errors import CompilationError, ComponentFoundryError, MissingConfigFileError
from component_foundry.outlines import Outlines
from component_foundry.packages import Packages
from component_foundry.paths import LIBRARY_DEFAULTS_PATH
from component_foundry.symbols import Symbols

__all__ = ["Library", "load_library_defaults"]

logger = logging.getLogger(__name__)

OUTLINE_PATH = "package.outline"


@lru_cache(maxsize=1)
def _library_defaults_text() -> str:
    return LIBRARY_DEFAULTS_PATH.read_text(encoding="utf-8")


def load_library_defaults() -> Config:
    """Return a fresh copy of the bundled library defaults."""
    return Config.from_yaml(_library_defaults_text())


class Library:
    """Compiles component documents against a shared library document.

    Args:
        config: Library-wide override merged over the bundled defaults.
        keep_going: Record failing components instead of raising.
        packages: Package strategies; the built-in set when omitted.
        symbols: Symbol strategies; the built-in set when omitted.
        outlines: Outline registry; the bundled set when omitted.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        keep_going: bool = False,
        packages: Packages | None = None,
        symbols: Symbols | None = None,
        outlines: Outlines | None = None,
    ) -> None:
        defaults = load_library_defaults()
        self.config = defaults.merge(config) if config is not None else defaults
        self.keep_going = keep_going
        self.packages = packages or Packages()
        self.symbols = symbols or Symbols()
        self.outlines = outlines or Outlines()
        self.components: list[Component] = []
        self.failures: list[CompilationError] = []

    def component_config(self, component: Config) -> Config:
        """Merge a component document over the library and its outline.

        Raises:
            MissingConfigFileError: If ``package.outline`` names an unknown outline.
        """
        merged = self.config
        if component.contains(OUTLINE_PATH):
            outline_id = component.get_str(OUTLINE_PATH)
            outline = self.outlines.get(outline_id)
            if outline is None:
                raise MissingConfigFileError(outline_id)
            logger.debug("using outline '%s'", outline_id)
            merged = merged.merge(outline)
        return merged.merge(component)

    def parse_component(self, component_id: str, text: str) -> Component:
        """Compile one YAML component document without recording it."""
        logger.debug("compiling component '%s'", component_id)
        config = self.component_config(Config.from_yaml(text))
        return Component.from_config(config, packages=self.packages, symbols=self.symbols)

    def add_component(self, component_id: str, text: str) -> Component | None:
        """Compile and record one component.

        Returns:
            The compiled component, or None if it failed and ``keep_going`` is set.
        """
        try:
            component = self.parse_component(component_id, text)
        except ComponentFoundryError as exc:
            if not self.keep_going:
                raise
            failure = CompilationError(component_id, exc)
            logger.warning("%s", failure)
            self.failures.append(failure)
            return None
        logger.info("component '%s' compiled (%s)", component_id, component.digest_short)
        self.components.append(component)
        return component

    def add_components(self, sources: Mapping[str, str]) -> list[Component]:
        """Compile every document in ``sources`` in insertion order."""
        compiled = []
        for component_id, text in sources.items():
            component = self.add_component(component_id, text)
            if component is not None:
                compiled.append(component)
        return compiled

    def load_component_file(self, path: Path) -> Component | None:
        """Compile the YAML document at ``path``; its stem is the component id.

        Raises:
            MissingConfigFileError: If the file does not exist.
        """
        path = Path(path)
        if not path.is_file():
            raise MissingConfigFileError(str(path))
        return self.add_component(path.stem.lower(), path.read_text(encoding="utf-8"))
