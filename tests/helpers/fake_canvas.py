"""In-memory stand-in for a logged-in Whimsical session.

FakeCanvasSession implements the CanvasSession interface over a scripted
remote tree so the export engine can be exercised without a browser. It
records every navigation, scroll and captured format so tests can assert
on remote interactions, not just on the files produced.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from src.exporter.models import Selectors
from src.whimsical_client.errors import (
    ElementDisabledError,
    ElementNotFoundError,
    ResponseTimeoutError,
)

BASE_URL = "https://whimsical.com/"
ITEMS_SYNC_URL = f"{BASE_URL}api/items.sync"


def item_url(name: str) -> str:
    return f"{BASE_URL}{name}"


@dataclass
class FakeFolder:
    """A remote folder.

    Attributes:
        children: Child item URLs in display order
        extra_pages: Lazy-loaded batches still to arrive when the folder opens
    """
    children: List[str] = field(default_factory=list)
    extra_pages: int = 0


@dataclass
class FakeBoard:
    """A remote board and how its export controls behave."""
    has_canvas: bool = True
    svg: str = "<svg><rect/></svg>"
    png: bytes = b"\x89PNG-board"
    pdf: bytes = b"%PDF-board"
    share_enabled: bool = True
    copy_image_enabled: bool = True
    print_enabled: bool = True
    blob_status: int = 200
    blob_arrives: bool = True
    has_vector_view: bool = True


@dataclass
class FakeResponse:
    url: str
    status: int = 200
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def body(self) -> bytes:
        return self.content


class _ResponseHolder:
    def __init__(self):
        self.value: Optional[FakeResponse] = None


class FakeCanvasSession:
    """Scripted session over a dict of item URL → FakeFolder/FakeBoard."""

    def __init__(
        self,
        items: Dict[str, Union[FakeFolder, FakeBoard]],
        selectors: Optional[Selectors] = None,
    ):
        self.items = items
        self.selectors = selectors or Selectors()
        self.url = "about:blank"
        self.navigations: List[str] = []
        self.scrolls: Dict[str, int] = {}
        self.clicks: List[str] = []
        self.backgrounds: List[tuple] = []
        self.pdf_renders = 0
        self.menu_open = False
        self._print_open = False
        self._replaced = False
        self._remaining_pages = {
            url: item.extra_pages
            for url, item in items.items()
            if isinstance(item, FakeFolder)
        }
        self._emitted: Optional[List[FakeResponse]] = None

    # Navigation

    def goto(self, url: str) -> FakeResponse:
        self.navigations.append(url)
        self.url = url
        self.menu_open = False
        self._print_open = False
        self._replaced = False
        return FakeResponse(url, 200 if self.title() != "Not Found" else 404)

    def goto_if_needed(self, url: str) -> Optional[FakeResponse]:
        if self._replaced or self.url != url:
            return self.goto(url)
        return None

    def _current_item(self) -> Union[FakeFolder, FakeBoard, None]:
        return self.items.get(self._current_item_url())

    def _current_item_url(self) -> str:
        if self.url.endswith("/svg"):
            return self.url[:-len("/svg")]
        return self.url

    def _on_vector_view(self) -> bool:
        return self.url.endswith("/svg")

    def _current_board(self) -> Optional[FakeBoard]:
        item = self._current_item()
        return item if isinstance(item, FakeBoard) else None

    # Page inspection

    def title(self) -> str:
        board = self._current_board()
        if self._on_vector_view() and (board is None or not board.has_vector_view):
            return "Not Found"
        return "Whimsical"

    def content(self) -> str:
        board = self._current_board()
        if self._on_vector_view() and board is not None:
            return board.svg
        return "<html><body></body></html>"

    def has_element(self, selector: str) -> bool:
        if self._on_vector_view() or self._replaced:
            return False
        item = self._current_item()
        if selector == self.selectors.folder_content:
            return isinstance(item, FakeFolder)
        if selector == self.selectors.board_canvas:
            return isinstance(item, FakeBoard) and item.has_canvas
        if selector == self.selectors.share_button:
            return isinstance(item, FakeBoard)
        if selector in (self.selectors.copy_image_action, self.selectors.print_action):
            return self.menu_open
        if selector == self.selectors.print_frame:
            return self._print_open
        if selector == self.selectors.scroll_container:
            return isinstance(item, FakeFolder) and bool(item.children)
        return False

    def wait_for(self, selector: str, timeout_ms: Optional[int] = None) -> None:
        if not self.has_element(selector):
            raise ElementNotFoundError(selector)

    def is_enabled(self, selector: str) -> bool:
        if not self.has_element(selector):
            raise ElementNotFoundError(selector)
        board = self._current_board()
        if selector == self.selectors.share_button:
            return board.share_enabled
        if selector == self.selectors.copy_image_action:
            return board.copy_image_enabled
        if selector == self.selectors.print_action:
            return board.print_enabled
        return True

    # Interaction

    def click_if_enabled(self, selector: str) -> None:
        if not self.is_enabled(selector):
            raise ElementDisabledError(selector)
        self.clicks.append(selector)
        board = self._current_board()

        if selector == self.selectors.share_button:
            self.menu_open = not self.menu_open
        elif selector == self.selectors.copy_image_action:
            if board.blob_arrives:
                self._emit(FakeResponse(
                    f"blob:{BASE_URL}0b7c5d1e",
                    board.blob_status,
                    board.png,
                ))
        elif selector == self.selectors.print_action:
            self._print_open = True

    def scroll_to_bottom(self, selector: str) -> None:
        if not self.has_element(selector):
            raise ElementNotFoundError(selector)
        url = self._current_item_url()
        self.scrolls[url] = self.scrolls.get(url, 0) + 1
        if self._remaining_pages.get(url, 0) > 0:
            self._remaining_pages[url] -= 1
            self._emit(FakeResponse(ITEMS_SYNC_URL, 200))

    def collect_links(self, selector: str) -> List[str]:
        item = self._current_item()
        if selector != self.selectors.folder_items or not isinstance(item, FakeFolder):
            return []
        return list(item.children)

    def set_background_color(self, selector: str, color: str) -> None:
        self.backgrounds.append((selector, color))

    @contextmanager
    def expect_response(self, predicate, timeout_ms: int) -> Iterator[_ResponseHolder]:
        holder = _ResponseHolder()
        self._emitted = []
        try:
            yield holder
            matches = [response for response in self._emitted if predicate(response)]
        finally:
            self._emitted = None
        if not matches:
            raise ResponseTimeoutError(timeout_ms)
        holder.value = matches[0]

    def response_body(self, response: FakeResponse) -> bytes:
        return response.body()

    def _emit(self, response: FakeResponse) -> None:
        if self._emitted is not None:
            self._emitted.append(response)

    # Print preview

    def nested_frame_content(self) -> str:
        if not self._print_open:
            raise ElementNotFoundError("iframe")
        return "<html><body><svg>preview</svg></body></html>"

    def replace_content(self, html: str) -> None:
        self._replaced = True
        self.menu_open = False

    def render_pdf(self) -> bytes:
        self.pdf_renders += 1
        return self._current_board().pdf
