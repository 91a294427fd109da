"""Component Foundry: declarative electronic component compiler.

Component descriptions written as YAML documents are merged over library
defaults and compiled into a schematic symbol, a land pattern sized with the
IPC-7351B calculator, and a simple 3-D body model.

Public API
----------
- :class:`Library` - Compile component documents against library defaults
- :class:`Component` - A compiled component and its content digest
- :class:`Config` - Dot-path addressed configuration document
- :class:`Pinout` - Pin table expanded from compact pin name grammar
- :class:`Drawing` - Element list shared by symbols, patterns and models

Example
-------
>>> from component_foundry import Library
>>> library = Library()
>>> component = library.add_component("soic8", SOIC8_YAML)
>>> [pad.name for pad in component.pattern.pads()]
['1', '2', '3', '4', '5', '6', '7', '8']
"""

from __future__ import annotations

from component_foundry.component import Component
from component_foundry.config import Config
from component_foundry.drawing import Drawing
from component_foundry.errors import CompilationError, ComponentFoundryError
from component_foundry.library import Library, load_library_defaults
from component_foundry.outlines import Outlines
from component_foundry.pinout import Pin, Pinout
from component_foundry.settings import DensityLevel, PatternSettings, SymbolSettings
from component_foundry.symbols import Symbol

__version__ = "0.1.0"

__all__ = [
    "CompilationError",
    "Component",
    "ComponentFoundryError",
    "Config",
    "DensityLevel",
    "Drawing",
    "Library",
    "Outlines",
    "PatternSettings",
    "Pin",
    "Pinout",
    "Symbol",
    "SymbolSettings",
    "__version__",
    "load_library_defaults",
]
