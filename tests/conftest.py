# SPDX-License-Identifier: MIT
"""Pytest configuration and shared fixtures for the test suite.

This module provides:
- Deterministic test environment setup
- The bundled library document
- Sample component documents for the built-in package and symbol types
"""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from component_foundry.config import Config
from component_foundry.library import load_library_defaults


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).resolve().parent
ROOT_DIR = TESTS_DIR.parent

CAPACITOR_0603_YAML = """\
name: C0603
description: Ceramic capacitor, 0603
symbol:
  type: capacitor
package:
  type: chip
  body-size-x: 1.5..1.7
  body-size-y: 0.7..0.9
  body-size-z: 0.45..0.55
  lead-length: 0.2..0.5
"""

SOIC8_YAML = """\
name: DUAL-BUFFER
symbol:
  type: ic
pinout:
  IN0..IN3: 1..4
  OUT0..OUT3: 5..8
package:
  outline: jedec/ms-012
"""

SOP8_YAML = """\
name: SOP8
symbol:
  type: ic
pinout:
  A, B, C, D: 1..4
  GND: [5, 6]
  VCC: [7, 8]
package:
  type: sop
  lead-count: 8
  pitch: 1.27
  lead-span: 5.85..6.2
  lead-length: 0.4..1.27
  lead-width: 0.31..0.51
  body-size-x: 3.8..4.0
  body-size-y: 4.8..5.0
  body-size-z: 1.35..1.75
"""


# ---------------------------------------------------------------------------
# Environment Setup
# ---------------------------------------------------------------------------


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest environment for determinism."""
    deterministic_env = {
        "LC_ALL": "C",
        "LANG": "C",
        "TZ": "UTC",
        "PYTHONHASHSEED": "0",
    }
    for key, value in deterministic_env.items():
        os.environ.setdefault(key, value)


# ---------------------------------------------------------------------------
# Fixtures: Documents
# ---------------------------------------------------------------------------


@pytest.fixture
def library_defaults() -> Config:
    """Fresh copy of the bundled library document."""
    return load_library_defaults()


@pytest.fixture
def capacitor_yaml() -> str:
    return CAPACITOR_0603_YAML


@pytest.fixture
def soic8_yaml() -> str:
    return SOIC8_YAML


@pytest.fixture
def sop8_yaml() -> str:
    return SOP8_YAML


@pytest.fixture
def capacitor_config(library_defaults: Config) -> Config:
    """Capacitor 0603 merged over the library defaults."""
    return library_defaults.merge(Config.from_yaml(CAPACITOR_0603_YAML))


@pytest.fixture
def sop8_config(library_defaults: Config) -> Config:
    """SOP-8 IC merged over the library defaults."""
    return library_defaults.merge(Config.from_yaml(SOP8_YAML))


# ---------------------------------------------------------------------------
# Fixtures: Test Environment
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Path to the project root directory."""
    return ROOT_DIR
