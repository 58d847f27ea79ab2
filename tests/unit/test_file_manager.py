"""
Unit tests for conflict detection and preset file writing.
"""
import os

import pytest

from presetter.errors import FileWriteError
from presetter.MANAGERS.file_manager import FileManager


class TestFileManager:
    """Tests for FileManager."""

    def test_check_existing(self, tmp_path):
        """Only the files present at the destination are reported."""
        (tmp_path / "a.txt").write_text("existing")
        fm = FileManager(base_dir=str(tmp_path))
        assert fm.check_existing(["a.txt", "b.txt"]) == ["a.txt"]

    def test_check_existing_empty_directory(self, tmp_path):
        fm = FileManager(base_dir=str(tmp_path))
        assert fm.check_existing(["a.txt", "b.txt"]) == []

    def test_write_file(self, tmp_path):
        fm = FileManager(base_dir=str(tmp_path))
        path = fm.write_file("kool.yml", "scripts: {}\n")
        assert path == os.path.join(str(tmp_path), "kool.yml")
        assert (tmp_path / "kool.yml").read_text() == "scripts: {}\n"

    def test_write_file_overwrites(self, tmp_path):
        (tmp_path / "kool.yml").write_text("old")
        fm = FileManager(base_dir=str(tmp_path))
        fm.write_file("kool.yml", "new")
        assert (tmp_path / "kool.yml").read_text() == "new"

    def test_write_failure_is_wrapped(self, tmp_path):
        fm = FileManager(base_dir=str(tmp_path))
        with pytest.raises(FileWriteError) as exc:
            fm.write_file("missing-dir/kool.yml", "content")
        assert exc.value.file_name == "missing-dir/kool.yml"

    def test_write_all_stops_at_first_failure(self, tmp_path):
        """Files written before the failure stay, later files are not attempted."""
        fm = FileManager(base_dir=str(tmp_path))
        with pytest.raises(FileWriteError):
            fm.write_all([
                ("first.yml", "1"),
                ("missing-dir/second.yml", "2"),
                ("third.yml", "3"),
            ])
        assert (tmp_path / "first.yml").exists()
        assert not (tmp_path / "third.yml").exists()
