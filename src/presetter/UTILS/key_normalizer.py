"""
Turns database display names ("MySQL 5.7") into template lookup keys ("mysql57.yml").
"""
from typing import Dict, Iterable, List


class KeyNormalizer:
    """
    Normalizes display names by removing a fixed set of characters and
    lower-casing the rest.

    Only the characters in *strip_chars* are removed; any other punctuation
    is kept as-is, so "MariaDB-10" becomes "mariadb-10".
    """
    DEFAULT_STRIP_CHARS = " ."
    DEFAULT_SUFFIX = ".yml"

    def __init__(self, strip_chars: str = DEFAULT_STRIP_CHARS, suffix: str = DEFAULT_SUFFIX):
        """
        :param strip_chars: Characters removed from display names.
        :param suffix: Suffix appended to build the template name.
        """
        self.strip_chars = strip_chars
        self.suffix = suffix
        self._table = str.maketrans("", "", strip_chars)

    def normalize(self, display_name: str) -> str:
        return display_name.translate(self._table).lower()

    def lookup_key(self, display_name: str) -> str:
        return self.normalize(display_name) + self.suffix

    def check_collisions(self, display_names: Iterable[str]) -> Dict[str, List[str]]:
        """
        Groups distinct display names that normalize to the same key.

        :param display_names: Names to check.
        :return: Mapping of key to the colliding names; empty when collision-free.
        """
        seen: Dict[str, List[str]] = {}
        for name in display_names:
            names = seen.setdefault(self.normalize(name), [])
            if name not in names:
                names.append(name)
        return {key: names for key, names in seen.items() if len(names) > 1}
