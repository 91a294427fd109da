from __future__ import annotations

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_ROOT / "data"
LIBRARY_DEFAULTS_PATH = DATA_DIR / "library.yaml"
TEMPLATE_DIR = DATA_DIR / "templates"
OUTLINE_DIR = DATA_DIR / "outlines"

OUTLINE_ID_SEPARATOR = "/"


def parse_outline_id(outline_id: str) -> tuple[str, str]:
    """Parse an outline id of the form 'standard/name' into components."""
    if OUTLINE_ID_SEPARATOR not in outline_id:
        raise ValueError(f"Outline id must be 'standard/name', got {outline_id!r}")
    standard, name = outline_id.lower().split(OUTLINE_ID_SEPARATOR, 1)
    if not standard or not name:
        raise ValueError(f"Outline id must be 'standard/name', got {outline_id!r}")
    return standard, name


def get_template_path(name: str) -> Path:
    """Return the path to a bundled symbol template."""
    return TEMPLATE_DIR / f"{name}.svg"


def get_outline_path(outline_id: str) -> Path:
    """Return the path to a bundled outline document."""
    standard, name = parse_outline_id(outline_id)
    return OUTLINE_DIR / standard / f"{name}.yaml"
