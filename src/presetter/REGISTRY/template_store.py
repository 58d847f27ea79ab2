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
Read-only store of service templates (app runtimes, databases, caches).
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple, Union

from ..errors import TemplateNotFoundError
from ..MODELS.template import Template, TemplateCategory
from . import catalog


class TemplateStore:
    """
    Registry of templates keyed by (category, name).

    Populated once and never modified afterwards.
    """

    def __init__(self, templates: Iterable[Template] = ()):
        """
        Initialize the store.

        Args:
            templates: Templates to register. Names must be unique per category.
        """
        entries: Dict[Tuple[TemplateCategory, str], Template] = {}
        for template in templates:
            key = (template.category, template.name)
            if key in entries:
                raise ValueError(f"Duplicate {template.category.value} template {template.name}")
            entries[key] = template
        self._templates = MappingProxyType(entries)

    @classmethod
    def load_bundled(cls) -> "TemplateStore":
        """Build the store from the templates shipped with the package."""
        index = catalog.load_index()
        templates = []
        for category, names in index["templates"].items():
            for name in names:
                templates.append(
                    Template(
                        category=TemplateCategory(category),
                        name=name,
                        content=catalog.read_text("templates", category, name),
                    )
                )
        return cls(templates)

    def get(self, category: Union[TemplateCategory, str], name: str) -> str:
        """
        Get the raw text of a template.

        Args:
            category: Template category.
            name: Template name, e.g. ``mysql57.yml``.

        Returns:
            The template YAML text.

        Raises:
            TemplateNotFoundError: If no such template is registered.
        """
        category = TemplateCategory(category)
        template = self._templates.get((category, name))
        if template is None:
            raise TemplateNotFoundError(category.value, name)
        return template.content

    def has(self, category: Union[TemplateCategory, str], name: str) -> bool:
        return (TemplateCategory(category), name) in self._templates

    def names(self, category: Union[TemplateCategory, str]) -> List[str]:
        """Template names registered under *category*, in registration order."""
        category = TemplateCategory(category)
        return [name for (cat, name) in self._templates if cat == category]
