"""Folder listing with lazy pagination.

Whimsical renders folders in batches of 100 items and fetches the next
batch from ``api/items.sync`` when the list is scrolled to the bottom. The
loader keeps scrolling until a scroll produces no sync response within the
pagination timeout, then reads every item link in display order.
"""

import logging
from typing import List, Optional

from src.whimsical_client.errors import ElementNotFoundError, ResponseTimeoutError
from src.whimsical_client.session import CanvasSession

from .errors import InvalidIdentifierError
from .models import ExporterConfig
from .path_namer import PathNamer

logger = logging.getLogger(__name__)


class ListingLoader:
    """Collects the child item URLs of a folder.

    Example:
        >>> loader = ListingLoader()
        >>> children = loader.list_children(session, "https://whimsical.com/team-NvYx")
        >>> print(f"Folder has {len(children)} items")
    """

    def __init__(self, config: Optional[ExporterConfig] = None):
        self._config = config or ExporterConfig()
        self._namer = PathNamer(self._config.base_url)

    def list_children(self, session: CanvasSession, folder_identifier: str) -> List[str]:
        """List every child of a folder, loading all pages first.

        Args:
            session: Shared session; left on the folder page
            folder_identifier: Folder URL

        Returns:
            Child item URLs in display order, without duplicates. Links that
            do not name a single item under the base URL are dropped.

        Raises:
            NavigationError: If the folder page cannot be loaded
            PageError: If the folder page breaks while its links are read
        """
        session.goto_if_needed(folder_identifier)
        rounds = self.load_all_pages(session)
        logger.debug(f"Folder {folder_identifier} loaded after {rounds} scroll round(s)")

        children: List[str] = []
        for link in session.collect_links(self._config.selectors.folder_items):
            if not self._is_item_link(link):
                logger.debug(f"Ignoring link that is not an item: {link}")
                continue
            if link not in children:
                children.append(link)

        return children

    def load_all_pages(self, session: CanvasSession) -> int:
        """Scroll the folder list until no further page arrives.

        Each round listens for the sync response, scrolls, and waits up to
        the pagination timeout. The first round without a response ends the
        loop; it is counted.

        Returns:
            Number of scroll rounds performed, including the final one
        """
        rounds = 0
        while True:
            rounds += 1
            try:
                with session.expect_response(
                    self._is_items_sync,
                    self._config.pagination_timeout_ms,
                ):
                    session.scroll_to_bottom(self._config.selectors.scroll_container)
            except ResponseTimeoutError:
                return rounds
            except ElementNotFoundError:
                # Empty folders render no scrollable list
                logger.debug("Folder has no scrollable list")
                return rounds

    def _is_item_link(self, link: str) -> bool:
        if not link:
            return False
        try:
            self._namer.name(link)
        except InvalidIdentifierError:
            return False
        return True

    def _is_items_sync(self, response) -> bool:
        return response.url == self._config.items_sync_url and response.status == 200
