"""Unit tests for exporter.path_namer module."""

import pytest

from src.exporter.errors import InvalidIdentifierError
from src.exporter.models import ExportFormat
from src.exporter.path_namer import PathNamer


class TestName:
    """Test cases for PathNamer.name method."""

    def test_strips_base_url(self):
        """The base URL prefix should be removed."""
        assert PathNamer().name("https://whimsical.com/roadmap-2024-7Zq3") == "roadmap-2024-7Zq3"

    def test_trailing_slash_ignored(self):
        """A trailing slash should not be part of the name."""
        assert PathNamer().name("https://whimsical.com/team-NvYx/") == "team-NvYx"

    def test_deterministic(self):
        """The same URL always maps to the same name."""
        namer = PathNamer()
        url = "https://whimsical.com/flow-Ab12"
        assert namer.name(url) == namer.name(url)

    def test_case_preserved(self):
        """Names keep the case of the URL."""
        assert PathNamer().name("https://whimsical.com/MyBoard-XyZ") == "MyBoard-XyZ"

    def test_custom_base_url_without_slash(self):
        """A base URL without trailing slash is normalized."""
        namer = PathNamer("https://staging.whimsical.com")
        assert namer.name("https://staging.whimsical.com/board-1") == "board-1"

    def test_foreign_url_rejected(self):
        """URLs outside the base URL violate the precondition."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            PathNamer().name("https://example.com/board-1")

        assert exc_info.value.identifier == "https://example.com/board-1"
        assert exc_info.value.base_url == "https://whimsical.com/"

    def test_base_url_itself_rejected(self):
        """The service root is not an item."""
        with pytest.raises(InvalidIdentifierError):
            PathNamer().name("https://whimsical.com/")

    def test_nested_path_rejected(self):
        """A name may not contain path separators."""
        with pytest.raises(InvalidIdentifierError):
            PathNamer().name("https://whimsical.com/folder/board")

    def test_parent_directory_rejected(self):
        """'..' must never become a directory name."""
        with pytest.raises(InvalidIdentifierError):
            PathNamer().name("https://whimsical.com/..")


class TestFilename:
    """Test cases for PathNamer.filename method."""

    @pytest.mark.parametrize("file_format,expected", [
        (ExportFormat.SVG, "roadmap-7Zq3.svg"),
        (ExportFormat.PNG, "roadmap-7Zq3.png"),
        (ExportFormat.PDF, "roadmap-7Zq3.pdf"),
    ])
    def test_extension_per_format(self, file_format, expected):
        """Each format uses its own extension."""
        assert PathNamer().filename("https://whimsical.com/roadmap-7Zq3", file_format) == expected
