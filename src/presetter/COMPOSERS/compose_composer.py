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
Builds docker-compose.yml documents out of service templates.
"""
from collections import OrderedDict
from typing import Optional

import yaml

from ..errors import TemplateNotFoundError, TemplateParseError
from ..MODELS.template import TemplateCategory
from ..REGISTRY.template_store import TemplateStore
from ..UTILS.key_normalizer import KeyNormalizer
from ..UTILS.ordered_yaml import dump_ordered, load_ordered

COMPOSE_FILE = "docker-compose.yml"


class ComposeComposer:
    """
    Assembles a compose file from an app template, an optional database
    template and a cache template.

    The resulting document always has the shape::

        version: '3.7'
        services:
          app: ...
          database: ...   # only when a database was chosen
          cache: ...
    """
    DEFAULT_VERSION = "3.7"
    DEFAULT_APP_TEMPLATE = "php74.yml"
    DEFAULT_CACHE_TEMPLATE = "redis6.yml"

    def __init__(self,
                 store: TemplateStore,
                 normalizer: Optional[KeyNormalizer] = None,
                 app_template: str = DEFAULT_APP_TEMPLATE,
                 cache_template: str = DEFAULT_CACHE_TEMPLATE,
                 version: str = DEFAULT_VERSION):
        """
        Initializes the composer.

        :param store: Where templates are looked up.
        :param normalizer: Turns database display names into template names.
        :param app_template: Name of the app template to use.
        :param cache_template: Name of the cache template to use.
        :param version: Value written under the top level ``version`` key.
        """
        self.store = store
        self.normalizer = normalizer or KeyNormalizer()
        self.app_template = app_template
        self.cache_template = cache_template
        self.version = version

    def build(self, database: str = "", file_name: str = COMPOSE_FILE) -> OrderedDict:
        """
        Builds the ordered compose document.

        :param database: Database display name, or empty for no database service.
        :param file_name: The file being generated, used in error reports.
        :return: The compose document.
        :raises TemplateParseError: If a template is missing or is not a YAML mapping.
        """
        document = OrderedDict()
        document["version"] = self.version

        services = OrderedDict()
        services["app"] = self._load(TemplateCategory.APP, self.app_template, file_name)

        if database:
            database_template = self.normalizer.lookup_key(database)
            services["database"] = self._load(TemplateCategory.DATABASE, database_template, file_name)

        services["cache"] = self._load(TemplateCategory.CACHE, self.cache_template, file_name)

        document["services"] = services
        return document

    def compose(self, database: str = "", file_name: str = COMPOSE_FILE) -> str:
        """
        Builds the compose document and serializes it to YAML.

        :param database: Database display name, or empty for no database service.
        :param file_name: The file being generated, used in error reports.
        :return: The compose file content.
        """
        return dump_ordered(self.build(database, file_name))

    def _load(self, category: TemplateCategory, name: str, file_name: str) -> OrderedDict:
        try:
            content = self.store.get(category, name)
        except TemplateNotFoundError as e:
            raise e.for_file(file_name) from e

        try:
            return load_ordered(content)
        except (yaml.YAMLError, ValueError) as e:
            raise TemplateParseError(file_name, category.value, name, str(e)) from e
