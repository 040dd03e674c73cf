"""Browser lifecycle for an export run."""

import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright

logger = logging.getLogger(__name__)


@contextmanager
def launch_browser(debug: bool = False) -> Iterator[Page]:
    """Launch Chromium and yield a new page.

    Args:
        debug: Show the browser window with devtools open. PDF rendering
            only works in headless mode, so PDF exports fail while debugging.

    Yields:
        A fresh Playwright page; the browser is closed on exit
    """
    logger.info("Launching browser")
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=not debug, devtools=debug)
        try:
            logger.info("Opening new page")
            yield browser.new_page()
        finally:
            browser.close()
