"""Data models for the export engine.

This module defines all data models used by the export engine.
All models use dataclasses and enums for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from src.whimsical_client.session import CanvasSession


class ExportFormat(str, Enum):
    """Export formats offered for every board.

    The value doubles as the file extension of the exported file.
    """
    PNG = "png"
    PDF = "pdf"
    SVG = "svg"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return self.value.upper()

    @property
    def description(self) -> str:
        return _FORMAT_DESCRIPTIONS[self]


_FORMAT_DESCRIPTIONS = {
    ExportFormat.PNG: "PNG at 2x zoom (static image, shapes cannot be edited)",
    ExportFormat.PDF: "PDF (landscape, shapes can be zoomed in)",
    ExportFormat.SVG: "SVG (shapes can be zoomed in and edited)",
}


class ItemKind(Enum):
    """Classification of a remote item."""
    FOLDER = "folder"
    DOCUMENT = "document"
    EMPTY_DOCUMENT = "empty_document"


@dataclass
class Selectors:
    """CSS selectors for the parts of the Whimsical UI the engine touches.

    Attributes:
        folder_content: Marker present only on folder pages
        folder_items: Links to the children of a folder, in display order
        board_canvas: Marker present only on boards with content
        scroll_container: Scrollable folder list that lazy loads more items
        share_button: Toggle for the "Share, Export & Print" menu
        copy_image_action: "Copy as image" entry of the share menu
        print_action: "Print" entry of the share menu
        vector_root: Root element of the SVG view
        print_root: Root element of the print preview once inlined
        print_frame: Frame the print preview renders into
        email_input: Email field of the login form
        password_input: Password field of the login form
        submit_button: Submit button of the login form
    """
    folder_content: str = '[data-wc="folder-content"]'
    folder_items: str = '[data-wc="folder-content"] a.no-user-select'
    board_canvas: str = '[data-wc="board-canvas"]'
    scroll_container: str = '#content-wrapper12 > div:nth-child(1) > div:nth-child(1) > div'
    share_button: str = 'button[aria-label="Share, Export & Print"]'
    copy_image_action: str = 'div.m7.large div.mi8:nth-child(3)'
    print_action: str = 'div.m7.large div.mi8:nth-child(5)'
    vector_root: str = 'svg'
    print_root: str = 'body'
    print_frame: str = 'iframe'
    email_input: str = 'input[type="email"]'
    password_input: str = 'input[type="password"]'
    submit_button: str = 'input[type="submit"]'


@dataclass
class ExporterConfig:
    """Tunables for one export run.

    ``login_url`` and ``items_sync_url`` are derived from ``base_url`` when
    left empty.

    Attributes:
        base_url: Service root every item URL starts with
        login_url: Login form URL
        items_sync_url: Endpoint answering each lazy-loaded folder page
        vector_view_suffix: Path appended to a board URL for its SVG view
        pagination_timeout_ms: Wait for the next folder page before concluding the listing is complete
        navigation_timeout_ms: Upper bound for one page load
        capture_timeout_ms: Upper bound for an export control to respond
        login_timeout_ms: Upper bound for the post-login redirect
        background_color: Background applied to SVG and PDF exports
        not_found_title: Page title the service uses for missing pages
        probe_vector_view: Also treat items whose SVG view is missing as folders
        selectors: CSS selectors for the Whimsical UI
    """
    base_url: str = "https://whimsical.com/"
    login_url: str = ""
    items_sync_url: str = ""
    vector_view_suffix: str = "/svg"
    pagination_timeout_ms: int = 1000
    navigation_timeout_ms: int = 30000
    capture_timeout_ms: int = 30000
    login_timeout_ms: int = 30000
    background_color: str = "#f0f4f7"
    not_found_title: str = "Not Found"
    probe_vector_view: bool = False
    selectors: Selectors = field(default_factory=Selectors)

    def __post_init__(self):
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        if not self.login_url:
            self.login_url = f"{self.base_url}login"
        if not self.items_sync_url:
            self.items_sync_url = f"{self.base_url}api/items.sync"


@dataclass
class ExportContext:
    """State threaded through one recursive export run.

    Owns the single shared session and the running count of exported
    boards. Never reset mid-run.

    Attributes:
        session: Logged-in session; only one location is active at a time
        formats: Formats to produce for every board, in order
        items_downloaded: Boards for which at least one file was written
    """
    session: CanvasSession
    formats: List[ExportFormat]
    items_downloaded: int = 0
