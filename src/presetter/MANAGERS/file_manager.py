"""
Conflict detection and writing of preset files in the destination directory.
"""
import os
from typing import Iterable, List, Tuple

from ..errors import FileWriteError


class FileManager:
    """
    Reads and writes preset files relative to a base directory.
    """
    def __init__(self, base_dir: str = "."):
        """
        Initializes the file manager.

        :param base_dir: Directory the preset files are written into.
        """
        self.base_dir = os.path.abspath(base_dir)

    def resolve(self, file_name: str) -> str:
        return os.path.join(self.base_dir, file_name)

    def check_existing(self, file_names: Iterable[str]) -> List[str]:
        """
        Lists which of the given files already exist.

        :param file_names: File names to check, relative to the base directory.
        :return: The existing ones, in the given order.
        """
        return [name for name in file_names if os.path.exists(self.resolve(name))]

    def write_file(self, file_name: str, content: str) -> str:
        """
        Writes one file, replacing any existing content.

        :param file_name: File name relative to the base directory.
        :param content: Content to write.
        :return: The absolute path written.
        :raises FileWriteError: If the file cannot be written.
        """
        path = self.resolve(file_name)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise FileWriteError(file_name, str(e)) from e
        return path

    def write_all(self, files: Iterable[Tuple[str, str]]) -> List[str]:
        """
        Writes files one at a time, stopping at the first failure.

        Files written before a failure are left in place.

        :param files: (file name, content) pairs.
        :return: The absolute paths written.
        """
        return [self.write_file(name, content) for name, content in files]
