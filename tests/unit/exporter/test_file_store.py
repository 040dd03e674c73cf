"""Unit tests for exporter.file_store module."""

import os
from unittest.mock import patch

import pytest

from src.exporter.errors import FilesystemError
from src.exporter.file_store import LocalFileStore


class TestEnsureDirectory:
    """Test cases for LocalFileStore.ensure_directory."""

    def test_creates_nested_directories(self, tmp_path):
        """Missing parents should be created."""
        target = tmp_path / "a" / "b"
        LocalFileStore().ensure_directory(str(target))
        assert target.is_dir()

    def test_existing_directory_is_not_an_error(self, tmp_path):
        """Creating an existing directory is a no-op."""
        store = LocalFileStore()
        store.ensure_directory(str(tmp_path))
        store.ensure_directory(str(tmp_path))
        assert tmp_path.is_dir()

    def test_creation_failure_is_ignored(self, tmp_path):
        """OS errors on directory creation are swallowed."""
        with patch('src.exporter.file_store.os.makedirs', side_effect=PermissionError("denied")):
            LocalFileStore().ensure_directory(str(tmp_path / "x"))


class TestListNames:
    """Test cases for LocalFileStore.list_names."""

    def test_lists_files_and_directories(self, tmp_path):
        (tmp_path / "board.svg").write_text("x")
        (tmp_path / "folder").mkdir()

        assert LocalFileStore().list_names(str(tmp_path)) == {"board.svg", "folder"}

    def test_missing_directory_is_empty(self, tmp_path):
        assert LocalFileStore().list_names(str(tmp_path / "missing")) == set()


class TestWriteBytes:
    """Test cases for LocalFileStore.write_bytes."""

    def test_writes_bytes(self, tmp_path):
        target = tmp_path / "board.png"
        LocalFileStore().write_bytes(str(target), b"\x89PNG")
        assert target.read_bytes() == b"\x89PNG"

    def test_encodes_text_as_utf8(self, tmp_path):
        target = tmp_path / "board.svg"
        LocalFileStore().write_bytes(str(target), "<svg>ü</svg>")
        assert target.read_bytes() == "<svg>ü</svg>".encode("utf-8")

    def test_no_temp_file_left_behind(self, tmp_path):
        LocalFileStore().write_bytes(str(tmp_path / "board.pdf"), b"%PDF")
        assert os.listdir(tmp_path) == ["board.pdf"]

    def test_failed_replace_cleans_up_and_raises(self, tmp_path):
        """A failed write leaves no file with the final or temporary name."""
        target = tmp_path / "board.pdf"

        with patch('src.exporter.file_store.os.replace', side_effect=OSError("disk full")):
            with pytest.raises(FilesystemError) as exc_info:
                LocalFileStore().write_bytes(str(target), b"%PDF")

        assert exc_info.value.operation == 'write'
        assert "disk full" in str(exc_info.value)
        assert os.listdir(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FilesystemError):
            LocalFileStore().write_bytes(str(tmp_path / "missing" / "board.svg"), b"x")
