"""
Access to the preset and template catalog shipped inside the package.
"""
from importlib import resources
from typing import Any, Dict

import yaml

CATALOG_ROOT = resources.files(__package__) / "catalog"


def read_text(*parts: str) -> str:
    """
    Reads a catalog file.

    :param parts: Path components below the catalog root.
    :return: The file content.
    """
    entry = CATALOG_ROOT
    for part in parts:
        entry = entry / part
    return entry.read_text(encoding="utf-8")


def load_index() -> Dict[str, Any]:
    """
    Loads ``index.yml``, which lists presets and templates in registration order.
    """
    data = yaml.safe_load(read_text("index.yml")) or {}
    return {
        "presets": list(data.get("presets", [])),
        "templates": dict(data.get("templates", {})),
    }
