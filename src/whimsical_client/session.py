"""Navigable Whimsical session over a Playwright page.

This module wraps a Playwright ``Page`` with the small set of primitives
the export engine needs: URL navigation, selector presence and enablement
checks, clicks, scrolling, network-response observation, content
serialization and PDF rendering. Playwright errors are translated into the
typed exceptions from ``errors`` so nothing above this layer imports
Playwright.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, Response
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import (
    ElementDisabledError,
    ElementNotFoundError,
    NavigationError,
    PageError,
    ResponseTimeoutError,
    WhimsicalError,
)

logger = logging.getLogger(__name__)

ResponsePredicate = Callable[[Response], bool]


class CanvasSession:
    """An authenticated browser page positioned at one location at a time.

    Only one location is active at once. Callers that need a specific page
    must navigate to it explicitly (``goto_if_needed``) rather than assume
    where a previous operation left the session.

    Example:
        >>> session = CanvasSession(page)
        >>> session.goto_if_needed("https://whimsical.com/my-folder")
        >>> session.has_element('[data-wc="folder-content"]')
        True
    """

    def __init__(self, page: Page, navigation_timeout_ms: int = 30000):
        """Initialize the session.

        Args:
            page: Logged-in Playwright page
            navigation_timeout_ms: Upper bound for a single navigation
        """
        self._page = page
        self._navigation_timeout_ms = navigation_timeout_ms
        # set_content keeps the URL, so the page no longer matches it
        self._content_replaced = False

    @property
    def url(self) -> str:
        """URL of the currently loaded page."""
        return self._page.url

    def goto(self, url: str) -> Optional[Response]:
        """Navigate to a URL and wait for the network to settle.

        Raises:
            NavigationError: If the page cannot be loaded in time
        """
        logger.debug(f"Navigating to {url}")
        try:
            response = self._page.goto(
                url,
                wait_until="networkidle",
                timeout=self._navigation_timeout_ms,
            )
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e
        self._content_replaced = False
        return response

    def goto_if_needed(self, url: str) -> Optional[Response]:
        """Navigate to a URL unless the session is already there.

        Returns:
            The navigation response, or None if no navigation happened
        """
        if self._content_replaced or self._page.url != url:
            return self.goto(url)
        return None

    def title(self) -> str:
        try:
            return self._page.title()
        except PlaywrightError as e:
            raise self._translate_error(e, "title()") from e

    def content(self) -> str:
        try:
            return self._page.content()
        except PlaywrightError as e:
            raise self._translate_error(e, "content()") from e

    def has_element(self, selector: str) -> bool:
        try:
            return self._page.query_selector(selector) is not None
        except PlaywrightError as e:
            raise self._translate_error(e, f"query_selector({selector})") from e

    def wait_for(self, selector: str, timeout_ms: Optional[int] = None) -> None:
        """Wait until a selector is attached and visible.

        Raises:
            ElementNotFoundError: If the element does not appear in time
        """
        try:
            self._page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightError as e:
            raise ElementNotFoundError(selector) from e

    def is_enabled(self, selector: str) -> bool:
        """Check whether a control accepts pointer events.

        Whimsical greys out unavailable menu entries with
        ``pointer-events: none`` rather than the ``disabled`` attribute.

        Raises:
            ElementNotFoundError: If the selector matches nothing
        """
        try:
            return self._page.eval_on_selector(
                selector,
                "el => el.style.pointerEvents !== 'none'",
            )
        except PlaywrightError as e:
            raise ElementNotFoundError(selector) from e

    def click_if_enabled(self, selector: str) -> None:
        """Click a control, refusing to click through a disabled one.

        Raises:
            ElementNotFoundError: If the selector matches nothing
            ElementDisabledError: If the control is not interactive
        """
        if not self.is_enabled(selector):
            raise ElementDisabledError(selector)
        try:
            self._page.click(selector)
        except PlaywrightError as e:
            raise ElementNotFoundError(selector) from e

    def scroll_to_bottom(self, selector: str) -> None:
        """Scroll a container to its end to trigger lazy loading."""
        try:
            self._page.eval_on_selector(
                selector,
                "el => { el.scrollTop = el.scrollHeight; }",
            )
        except PlaywrightError as e:
            raise ElementNotFoundError(selector) from e

    def collect_links(self, selector: str) -> List[str]:
        """Return the ``href`` of every element matching a selector, in DOM order."""
        try:
            return self._page.eval_on_selector_all(
                selector,
                "items => items.map(item => item.href)",
            )
        except PlaywrightError as e:
            raise self._translate_error(e, f"collect_links({selector})") from e

    def set_background_color(self, selector: str, color: str) -> None:
        try:
            self._page.eval_on_selector(
                selector,
                "(el, color) => { el.style.backgroundColor = color; }",
                color,
            )
        except PlaywrightError as e:
            raise ElementNotFoundError(selector) from e

    @contextmanager
    def expect_response(
        self,
        predicate: ResponsePredicate,
        timeout_ms: int,
    ) -> Iterator[Any]:
        """Listen for a matching response while the body of the block acts.

        The listener is registered before the block runs and is removed when
        the block exits, whether the response arrived, the block raised, or
        the wait timed out. After the block, ``.value`` on the yielded object
        holds the matched response.

        Raises:
            ResponseTimeoutError: If no matching response arrives in time

        Example:
            >>> with session.expect_response(is_blob, 5000) as captured:
            ...     session.click_if_enabled(button)
            >>> body = captured.value.body()
        """
        try:
            with self._page.expect_response(predicate, timeout=timeout_ms) as response_info:
                yield response_info
        except PlaywrightTimeoutError as e:
            raise ResponseTimeoutError(timeout_ms) from e
        except PlaywrightError as e:
            raise self._translate_error(e, "expect_response()") from e

    def response_body(self, response: Response) -> bytes:
        """Read the payload of a captured response.

        Raises:
            PageError: If the body is no longer available
        """
        try:
            return response.body()
        except PlaywrightError as e:
            raise self._translate_error(e, f"body({response.url})") from e

    def nested_frame_content(self) -> str:
        """Return the markup of the first frame embedded in the page.

        Raises:
            ElementNotFoundError: If the page has no nested frame
        """
        frames = self._page.frames
        if len(frames) < 2:
            raise ElementNotFoundError("iframe")
        try:
            return frames[1].content()
        except PlaywrightError as e:
            raise self._translate_error(e, "frame.content()") from e

    def replace_content(self, html: str) -> None:
        """Replace the document with the given markup and let it settle."""
        try:
            self._page.set_content(
                html,
                wait_until="networkidle",
                timeout=self._navigation_timeout_ms,
            )
        except PlaywrightError as e:
            raise NavigationError("about:blank", str(e)) from e
        self._content_replaced = True

    def render_pdf(self) -> bytes:
        """Render the current page as a landscape PDF including backgrounds."""
        try:
            return self._page.pdf(landscape=True, print_background=True)
        except PlaywrightError as e:
            raise self._translate_error(e, "pdf()") from e

    def _translate_error(self, exception: PlaywrightError, operation: str) -> WhimsicalError:
        """Translate a Playwright exception into a typed session exception.

        Args:
            exception: The original exception from Playwright
            operation: Description of the operation that failed

        Returns:
            PageError carrying the operation and the Playwright message
        """
        logger.debug(f"{operation} failed on {self._page.url}: {exception}")
        return PageError(operation, str(exception))
