"""Structural fingerprint of a configuration tree.

The digest walks the tree depth first. Mapping keys are visited in sorted
order and each key's UTF-8 bytes are hashed before its value, so two
documents with the same content hash identically regardless of the order
their keys were written in.

Value encodings:
  - string: UTF-8 bytes
  - number: little-endian IEEE-754 double
  - bool: one byte, 0 or 1
  - sequence: each element in order
  - null: nothing
"""

from __future__ import annotations

import hashlib
import struct
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["SHORT_DIGEST_LENGTH", "digest_tree", "short_digest"]

SHORT_DIGEST_LENGTH = 12


def digest_tree(tree: Any) -> str:
    """Return the hex SHA-256 digest of a configuration tree."""
    hasher = hashlib.sha256()
    _feed(hasher, tree)
    return hasher.hexdigest()


def short_digest(digest: str) -> str:
    return digest[:SHORT_DIGEST_LENGTH]


def _feed(hasher: Any, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool):
        hasher.update(b"\x01" if value else b"\x00")
    elif isinstance(value, (int, float)):
        hasher.update(struct.pack("<d", float(value)))
    elif isinstance(value, str):
        hasher.update(value.encode("utf-8"))
    elif isinstance(value, Mapping):
        for key in sorted(value):
            hasher.update(key.encode("utf-8"))
            _feed(hasher, value[key])
    elif isinstance(value, Sequence):
        for item in value:
            _feed(hasher, item)
    else:
        raise TypeError(f"Cannot hash config value of type {type(value).__name__}")
