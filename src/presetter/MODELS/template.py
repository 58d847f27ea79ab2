"""
Models for the reusable service templates the compose file is built from.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict


class TemplateCategory(str, Enum):
    """
    Kinds of services a template can describe.
    """
    APP = "app"
    DATABASE = "database"
    CACHE = "cache"


class Template(BaseModel):
    """
    A single service fragment, kept as the raw YAML text it was shipped in.
    """
    model_config = ConfigDict(frozen=True)

    category: TemplateCategory
    name: str
    content: str
