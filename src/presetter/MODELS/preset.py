"""
Models for presets: named bundles of project initialization files.
"""
from typing import List, Dict
from pydantic import BaseModel, ConfigDict, Field

# Metadata key holding the comma separated database choices of a preset.
ASK_DATABASE = "ask_database"


class PresetFile(BaseModel):
    """
    A file the preset writes, with its content verbatim.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    content: str


class Preset(BaseModel):
    """
    A preset as registered in the catalog.
    """
    model_config = ConfigDict(frozen=True)

    identifier: str
    language: str
    files: List[PresetFile] = []
    meta: Dict[str, str] = Field(default_factory=dict)

    @property
    def file_names(self) -> List[str]:
        """File names in declaration order."""
        return [f.name for f in self.files]

    def contents(self) -> Dict[str, str]:
        """Mapping of file name to content, in declaration order."""
        return {f.name: f.content for f in self.files}

    def meta_value(self, key: str) -> str:
        """Metadata value for *key*, or an empty string when unset."""
        return self.meta.get(key, "")

    @property
    def database_options(self) -> List[str]:
        """Database display names offered by this preset."""
        value = self.meta_value(ASK_DATABASE)
        if not value:
            return []
        return [option.strip() for option in value.split(",") if option.strip()]
