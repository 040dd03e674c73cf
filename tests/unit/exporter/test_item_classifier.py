"""Unit tests for exporter.item_classifier module."""

from unittest.mock import MagicMock, Mock

from playwright.sync_api import Error as PlaywrightError

from src.exporter.item_classifier import ItemClassifier
from src.exporter.models import ExporterConfig, ItemKind
from src.whimsical_client.errors import NavigationError
from src.whimsical_client.session import CanvasSession
from tests.helpers import FakeBoard, FakeCanvasSession, FakeFolder, item_url


FOLDER = item_url("team-NvYx")
BOARD = item_url("roadmap-7Zq3")
EMPTY = item_url("blank-Qq01")


def _session():
    return FakeCanvasSession({
        FOLDER: FakeFolder(children=[BOARD]),
        BOARD: FakeBoard(),
        EMPTY: FakeBoard(has_canvas=False),
    })


class TestClassify:
    """Test cases for ItemClassifier.classify."""

    def test_folder(self):
        assert ItemClassifier().classify(_session(), FOLDER) is ItemKind.FOLDER

    def test_board(self):
        assert ItemClassifier().classify(_session(), BOARD) is ItemKind.DOCUMENT

    def test_empty_board(self):
        assert ItemClassifier().classify(_session(), EMPTY) is ItemKind.EMPTY_DOCUMENT

    def test_board_visited_once_by_default(self):
        """Without the SVG view check only the item page is loaded."""
        session = _session()
        ItemClassifier().classify(session, BOARD)
        assert session.navigations == [BOARD]

    def test_already_on_item_does_not_navigate(self):
        session = _session()
        session.goto(BOARD)

        ItemClassifier().classify(session, BOARD)

        assert session.navigations == [BOARD]

    def test_navigation_failure_is_empty(self):
        """Unreachable items are skipped, not fatal."""
        session = Mock()
        session.goto_if_needed.side_effect = NavigationError(BOARD, "timeout")

        assert ItemClassifier().classify(session, BOARD) is ItemKind.EMPTY_DOCUMENT


class TestVectorViewProbe:
    """Test cases for the optional SVG view check."""

    def _classifier(self):
        return ItemClassifier(ExporterConfig(probe_vector_view=True))

    def test_missing_vector_view_is_folder(self):
        """An item without folder marker whose SVG view is missing is a folder."""
        session = FakeCanvasSession({BOARD: FakeBoard(has_vector_view=False)})
        assert self._classifier().classify(session, BOARD) is ItemKind.FOLDER

    def test_board_returns_to_item_page(self):
        session = _session()

        assert self._classifier().classify(session, BOARD) is ItemKind.DOCUMENT
        assert session.navigations == [BOARD, f"{BOARD}/svg", BOARD]

    def test_folder_marker_wins_before_vector_view_check(self):
        session = _session()

        assert self._classifier().classify(session, FOLDER) is ItemKind.FOLDER
        assert session.navigations == [FOLDER]


class TestPageFailures:
    """Test cases for pages that break during classification."""

    def test_destroyed_context_is_empty(self):
        """A Playwright failure while probing markers skips the item."""
        page = MagicMock()
        page.url = "about:blank"
        page.query_selector.side_effect = PlaywrightError("Execution context was destroyed")

        assert ItemClassifier().classify(CanvasSession(page), BOARD) is ItemKind.EMPTY_DOCUMENT

    def test_unreadable_title_is_empty(self):
        page = MagicMock()
        page.url = "about:blank"
        page.query_selector.return_value = None
        page.title.side_effect = PlaywrightError("Target closed")

        classifier = ItemClassifier(ExporterConfig(probe_vector_view=True))

        assert classifier.classify(CanvasSession(page), BOARD) is ItemKind.EMPTY_DOCUMENT
