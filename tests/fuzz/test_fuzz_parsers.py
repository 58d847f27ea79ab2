import random
import string

import yaml

from presetter.COMPOSERS.compose_composer import ComposeComposer
from presetter.errors import TemplateParseError
from presetter.MODELS.template import Template, TemplateCategory
from presetter.REGISTRY.template_store import TemplateStore
from presetter.UTILS.key_normalizer import KeyNormalizer
from presetter.UTILS.ordered_yaml import load_ordered


def random_string(length):
    return ''.join(random.choice(string.printable) for _ in range(length))


def test_fuzz_ordered_loader():
    for _ in range(100):
        content = random_string(random.randint(0, 500))
        try:
            load_ordered(content)
        except (yaml.YAMLError, ValueError):
            # Garbage must fail with one of the errors the composer translates
            pass


def test_fuzz_composer_only_raises_parse_errors():
    for _ in range(50):
        store = TemplateStore([
            Template(category=TemplateCategory.APP, name="php74.yml", content=random_string(random.randint(0, 200))),
            Template(category=TemplateCategory.CACHE, name="redis6.yml", content="image: redis\n"),
        ])
        try:
            ComposeComposer(store).compose("")
        except TemplateParseError:
            pass


def test_fuzz_key_normalizer():
    normalizer = KeyNormalizer()
    for _ in range(100):
        name = random_string(random.randint(0, 50))
        key = normalizer.normalize(name)
        assert ' ' not in key
        assert '.' not in key
        assert key == key.lower()
        assert normalizer.normalize(key) == key
