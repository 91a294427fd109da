"""Hierarchical configuration document.

A :class:`Config` wraps a tree of plain Python values (``None``, ``bool``,
``int``, ``float``, ``str``, lists and string-keyed dicts) addressed by
dot-separated paths such as ``"package.body-size-x"``.

Documents are combined with :meth:`Config.merge`, which never mutates either
operand: mappings merge recursively while scalars and sequences from the
override replace the base.

Example:
    >>> base = Config.from_yaml("pattern: {density-level: N, tolerance: {fabrication: 0.05}}")
    >>> comp = Config.from_yaml("pattern: {density-level: L}")
    >>> merged = base.merge(comp)
    >>> merged.get_str("pattern.density-level")
    'L'
    >>> merged.get_float("pattern.tolerance.fabrication")
    0.05
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from component_foundry.errors import (
    InvalidConfigError,
    InvalidElementTypeError,
    MissingConfigFileError,
    MissingElementError,
)
from component_foundry.hashing import digest_tree, short_digest
from component_foundry.units import Pair, Range, parse_pair, parse_range, round_to

__all__ = ["Config", "PATH_SEPARATOR"]

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


def _normalize(value: Any, where: str) -> Any:
    """Copy a loaded tree, rejecting anything outside the supported value kinds."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if isinstance(key, bool) or not isinstance(key, (str, int, float)):
                raise InvalidConfigError(f"unsupported mapping key {key!r} at '{where}'")
            key_text = str(key)
            result[key_text] = _normalize(item, f"{where}.{key_text}" if where else key_text)
        return result
    if isinstance(value, (list, tuple)):
        return [_normalize(item, where) for item in value]
    raise InvalidConfigError(f"unsupported value of type {type(value).__name__} at '{where}'")


def _merge_trees(base: Any, override: Any) -> Any:
    if isinstance(base, dict) and isinstance(override, dict):
        merged = {key: copy.deepcopy(value) for key, value in base.items()}
        for key, value in override.items():
            if key in merged:
                merged[key] = _merge_trees(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(override)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Config:
    """Configuration document addressed by dot-separated paths."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _normalize(data or {}, "")

    # -- construction -------------------------------------------------------

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        """Parse a YAML document.

        Raises:
            InvalidConfigError: If the text is not valid YAML or its root is not a mapping.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidConfigError(f"YAML parse error: {exc}") from exc
        return cls._from_loaded(data)

    @classmethod
    def from_json(cls, text: str) -> Config:
        """Parse a JSON document.

        Raises:
            InvalidConfigError: If the text is not valid JSON or its root is not an object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidConfigError(f"JSON parse error: {exc}") from exc
        return cls._from_loaded(data)

    @classmethod
    def from_file(cls, path: Path) -> Config:
        """Load a YAML (or ``.json``) document from disk.

        Raises:
            MissingConfigFileError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        if not path.is_file():
            raise MissingConfigFileError(str(path))
        text = path.read_text(encoding="utf-8")
        logger.debug("loading config from %s", path)
        if path.suffix.lower() == ".json":
            return cls.from_json(text)
        return cls.from_yaml(text)

    @classmethod
    def _from_loaded(cls, data: Any) -> Config:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidConfigError(f"document root must be a mapping, got {type(data).__name__}")
        return cls(data)

    # -- element access -----------------------------------------------------

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        for key in path.split(PATH_SEPARATOR):
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node

    def contains(self, path: str) -> bool:
        return self._lookup(path) is not None

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.contains(path)

    def get_element(self, path: str) -> Any:
        """Return the raw element at ``path``.

        Raises:
            MissingElementError: If the path resolves to nothing.
        """
        value = self._lookup(path)
        if value is None:
            raise MissingElementError(path)
        return value

    def get_bool(self, path: str) -> bool:
        value = self.get_element(path)
        if not isinstance(value, bool):
            raise InvalidElementTypeError(path, "bool")
        return value

    def get_float(self, path: str) -> float:
        value = self.get_element(path)
        if not _is_number(value):
            raise InvalidElementTypeError(path, "float")
        return float(value)

    def get_int(self, path: str) -> int:
        """Return an integer element, rounding floats half away from zero."""
        value = self.get_element(path)
        if not _is_number(value):
            raise InvalidElementTypeError(path, "int")
        if isinstance(value, int):
            return value
        return int(round_to(value, 1.0))

    def get_str(self, path: str) -> str:
        value = self.get_element(path)
        if not isinstance(value, str):
            raise InvalidElementTypeError(path, "string")
        return value

    def get_object(self, path: str) -> dict[str, Any]:
        """Return a deep copy of the mapping at ``path``."""
        value = self.get_element(path)
        if not isinstance(value, dict):
            raise InvalidElementTypeError(path, "object")
        return copy.deepcopy(value)

    def get_list(self, path: str) -> list[Any]:
        value = self.get_element(path)
        if not isinstance(value, list):
            raise InvalidElementTypeError(path, "array")
        return copy.deepcopy(value)

    def get_range(self, path: str) -> Range:
        value = self.get_element(path)
        try:
            return parse_range(value)
        except ValueError as exc:
            raise InvalidElementTypeError(path, "range: a..b or a +/- b") from exc

    def get_pair(self, path: str) -> Pair:
        value = self.get_element(path)
        try:
            return parse_pair(value)
        except ValueError as exc:
            raise InvalidElementTypeError(path, "pair: a;b") from exc

    def get_config(self, path: str) -> Config:
        """Return the mapping at ``path`` as its own document."""
        return Config(self.get_object(path))

    # -- mutation and combination -------------------------------------------

    def insert(self, path: str, value: Any) -> None:
        """Set ``value`` at ``path``, creating intermediate mappings.

        Raises:
            InvalidElementTypeError: If an intermediate element is not a mapping.
        """
        keys = path.split(PATH_SEPARATOR)
        node = self._data
        for depth, key in enumerate(keys[:-1]):
            child = node.get(key)
            if child is None:
                child = {}
                node[key] = child
            elif not isinstance(child, dict):
                raise InvalidElementTypeError(PATH_SEPARATOR.join(keys[: depth + 1]), "object")
            node = child
        node[keys[-1]] = _normalize(value, path)

    def merge(self, override: Config) -> Config:
        """Return a new document with ``override`` deep-merged over this one."""
        return Config(_merge_trees(self._data, override._data))

    # -- export ------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self._data, sort_keys=False)

    def calc_digest(self) -> str:
        """Return the SHA-256 content fingerprint of this document."""
        return digest_tree(self._data)

    def digest_short(self) -> str:
        return short_digest(self.calc_digest())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Config({self._data!r})"
