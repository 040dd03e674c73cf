"""Classification of remote items into folders, boards and empty boards."""

import logging
from typing import Optional

from src.whimsical_client.errors import WhimsicalError
from src.whimsical_client.session import CanvasSession

from .models import ExporterConfig, ItemKind

logger = logging.getLogger(__name__)


class ItemClassifier:
    """Decides what a remote item is by probing its rendered page.

    Probe order:
    1. Folder-content marker present → FOLDER
    2. Only with ``probe_vector_view``: the item's SVG view is titled
       "Not Found" → FOLDER
    3. Board canvas marker present → DOCUMENT
    4. Otherwise → EMPTY_DOCUMENT

    Classification only navigates; it never writes files or counts items.
    Pages that fail to load are reported as EMPTY_DOCUMENT so the item is
    skipped and retried on the next run.
    """

    def __init__(self, config: Optional[ExporterConfig] = None):
        self._config = config or ExporterConfig()

    def classify(self, session: CanvasSession, identifier: str) -> ItemKind:
        """Classify one item.

        Args:
            session: Shared session; may be left on the item or its SVG view
            identifier: Item URL

        Returns:
            The ItemKind of the item
        """
        selectors = self._config.selectors
        try:
            session.goto_if_needed(identifier)
            if session.has_element(selectors.folder_content):
                return ItemKind.FOLDER

            if self._config.probe_vector_view and self._vector_view_missing(session, identifier):
                return ItemKind.FOLDER

            session.goto_if_needed(identifier)
            if session.has_element(selectors.board_canvas):
                return ItemKind.DOCUMENT
        except WhimsicalError as e:
            logger.warning(f"Could not classify {identifier}: {e}")

        return ItemKind.EMPTY_DOCUMENT

    def _vector_view_missing(self, session: CanvasSession, identifier: str) -> bool:
        session.goto_if_needed(f"{identifier}{self._config.vector_view_suffix}")
        return session.title() == self._config.not_found_title
