# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Registry of the presets available for project initialization.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional

import yaml

from ..MODELS.preset import Preset, PresetFile
from . import catalog


class PresetRegistry:
    """
    Read-only lookup over registered presets.

    Presets keep the order they were registered in; languages and preset
    lists offered to the user follow that order.
    """

    def __init__(self, presets: Iterable[Preset] = ()):
        """
        Initialize the registry.

        Args:
            presets: Presets in registration order. Identifiers must be unique.
        """
        entries: Dict[str, Preset] = {}
        for preset in presets:
            if preset.identifier in entries:
                raise ValueError(f"Duplicate preset {preset.identifier}")
            entries[preset.identifier] = preset
        self._presets = MappingProxyType(entries)

    @classmethod
    def load_bundled(cls) -> "PresetRegistry":
        """Build the registry from the presets shipped with the package."""
        index = catalog.load_index()
        presets = []
        for identifier in index["presets"]:
            manifest = yaml.safe_load(catalog.read_text("presets", f"{identifier}.yml"))
            presets.append(cls.preset_from_manifest(identifier, manifest))
        return cls(presets)

    @staticmethod
    def preset_from_manifest(identifier: str, manifest: Dict[str, Any]) -> Preset:
        """
        Build a preset from its catalog manifest.

        Args:
            identifier: The preset key.
            manifest: Parsed manifest with ``language``, ``meta`` and ``files``.

        Returns:
            The preset.
        """
        return Preset(
            identifier=identifier,
            language=manifest["language"],
            meta={str(k): str(v) for k, v in (manifest.get("meta") or {}).items()},
            files=[
                PresetFile(name=entry["name"], content=entry["content"])
                for entry in manifest.get("files") or []
            ],
        )

    def get(self, preset: str) -> Optional[Preset]:
        return self._presets.get(preset)

    def exists(self, preset: str) -> bool:
        return preset in self._presets

    def get_languages(self) -> List[str]:
        """Distinct languages, first registration wins the position."""
        languages: List[str] = []
        for preset in self._presets.values():
            if preset.language not in languages:
                languages.append(preset.language)
        return languages

    def get_presets(self, language: str) -> List[str]:
        """Preset identifiers for *language*, in registration order."""
        return [key for key, preset in self._presets.items() if preset.language == language]

    def get_preset_meta_value(self, preset: str, key: str) -> str:
        """Metadata value, or an empty string for an unknown preset or key."""
        found = self._presets.get(preset)
        if found is None:
            return ""
        return found.meta_value(key)

    def look_up_files(self, preset: str) -> List[str]:
        """File names declared by *preset*; empty for an unknown preset."""
        found = self._presets.get(preset)
        if found is None:
            return []
        return found.file_names

    def get_preset_contents(self, preset: str) -> Dict[str, str]:
        """File name to content mapping; empty for an unknown preset."""
        found = self._presets.get(preset)
        if found is None:
            return {}
        return found.contents()

    def __iter__(self):
        return iter(self._presets.values())

    def __len__(self) -> int:
        return len(self._presets)
