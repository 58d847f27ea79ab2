"""
YAML loading and dumping that keeps mapping keys in document order.
"""
from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

import yaml


class OrderedLoader(yaml.SafeLoader):
    """
    Safe loader that builds every mapping as an OrderedDict.
    """


class OrderedDumper(yaml.SafeDumper):
    """
    Safe dumper that writes OrderedDict keys in insertion order and never
    emits anchors or aliases.
    """

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _construct_ordered_mapping(loader: OrderedLoader, node: yaml.MappingNode) -> OrderedDict:
    loader.flatten_mapping(node)
    pairs = loader.construct_pairs(node)
    for (key_node, _), (key, _) in zip(node.value, pairs):
        if not isinstance(key, Hashable):
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping", node.start_mark,
                "found unhashable key", key_node.start_mark)
    return OrderedDict(pairs)


def _represent_ordered_mapping(dumper: OrderedDumper, data: OrderedDict) -> yaml.MappingNode:
    # Passing items() rather than the mapping keeps the dumper from sorting.
    return dumper.represent_mapping(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, data.items())


OrderedLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_ordered_mapping)
OrderedDumper.add_representer(OrderedDict, _represent_ordered_mapping)


def load_ordered(content: str) -> OrderedDict:
    """
    Parses a YAML document whose root must be a mapping.

    :param content: YAML text.
    :return: The document as nested OrderedDicts.
    :raises ValueError: If the document is empty or its root is not a mapping.
    :raises yaml.YAMLError: If the text is not valid YAML.
    """
    data = yaml.load(content, Loader=OrderedLoader)
    if data is None:
        raise ValueError("empty document")
    if not isinstance(data, OrderedDict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    return data


def dump_ordered(document: OrderedDict) -> str:
    """
    Serializes an ordered document back to block style YAML.

    :param document: The document to serialize.
    :return: YAML text with keys in insertion order.
    """
    return yaml.dump(
        document,
        Dumper=OrderedDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
