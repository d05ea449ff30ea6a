"""
Tests unitaires pour FileSystemAdapter.

Utilise de vrais fichiers dans tmp_path.
"""

import os
import sys
from pathlib import Path

import pytest

from reelscan.adapters.file_system import FileSystemAdapter


@pytest.fixture
def adapter() -> FileSystemAdapter:
    return FileSystemAdapter()


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    root = tmp_path / "library"
    (root / "B").mkdir(parents=True)
    (root / "A" / "nested").mkdir(parents=True)
    (root / "b.mkv").write_bytes(b"")
    (root / "a.mkv").write_bytes(b"")
    (root / "B" / "c.mp4").write_bytes(b"")
    (root / "A" / "nested" / "d.avi").write_bytes(b"")
    (root / "A" / "notes.txt").write_text("hello")
    return root


class TestWalkFiles:
    def test_lists_all_files_recursively(self, adapter, library_root: Path) -> None:
        files = list(adapter.walk_files(library_root))

        relative = {path.relative_to(library_root).as_posix() for path in files}
        assert relative == {"a.mkv", "b.mkv", "B/c.mp4", "A/notes.txt", "A/nested/d.avi"}

    def test_order_is_deterministic(self, adapter, library_root: Path) -> None:
        first = list(adapter.walk_files(library_root))
        second = list(adapter.walk_files(library_root))
        assert first == second

    def test_missing_root_raises(self, adapter, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(adapter.walk_files(tmp_path / "absent"))

    def test_file_root_raises(self, adapter, library_root: Path) -> None:
        with pytest.raises(NotADirectoryError):
            list(adapter.walk_files(library_root / "a.mkv"))

    @pytest.mark.skipif(sys.platform == "win32", reason="liens symboliques POSIX")
    def test_directory_symlinks_are_not_followed(self, adapter, library_root: Path) -> None:
        os.symlink(library_root, library_root / "loop")

        files = list(adapter.walk_files(library_root))

        assert all("loop" not in path.parts for path in files)


class TestExists:
    def test_exists(self, adapter, library_root: Path) -> None:
        assert adapter.exists(library_root / "a.mkv")
        assert not adapter.exists(library_root / "gone.mkv")
