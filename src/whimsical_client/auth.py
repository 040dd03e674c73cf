"""Authentication module for logging in to Whimsical.

This module loads run inputs from a .env file using python-dotenv and
performs the interactive login flow on a Playwright page. A login that
does not navigate away from the login form within the bounded wait is
interpreted as wrong credentials and raised as AuthError.
"""

import logging
from typing import NamedTuple

from dotenv import load_dotenv
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from .errors import AuthError, NavigationError
from .session import CanvasSession

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_URL = "https://whimsical.com/login"
EMAIL_SELECTOR = 'input[type="email"]'
PASSWORD_SELECTOR = 'input[type="password"]'
SUBMIT_SELECTOR = 'input[type="submit"]'


def load_environment() -> None:
    """Load EMAIL, PASSWORD, FOLDER_URL, FILE_TYPES and DEBUG from a .env file.

    Variables already present in the process environment take precedence.
    Credentials are never cached or logged.
    """
    load_dotenv()


class Credentials(NamedTuple):
    """Whimsical login credentials."""
    email: str
    password: str


class Authenticator:
    """Logs a Playwright page in to Whimsical and hands back a session.

    Example:
        >>> auth = Authenticator()
        >>> session = auth.login(page, Credentials("me@example.com", "secret"))
    """

    def __init__(
        self,
        login_url: str = DEFAULT_LOGIN_URL,
        timeout_ms: int = 30000,
        navigation_timeout_ms: int = 30000,
        email_selector: str = EMAIL_SELECTOR,
        password_selector: str = PASSWORD_SELECTOR,
        submit_selector: str = SUBMIT_SELECTOR,
    ):
        """Initialize the authenticator.

        Args:
            login_url: URL of the login form
            timeout_ms: How long to wait for the post-login navigation
            navigation_timeout_ms: Navigation bound handed to the session
            email_selector: Email field of the login form
            password_selector: Password field of the login form
            submit_selector: Submit button of the login form
        """
        self.login_url = login_url
        self.timeout_ms = timeout_ms
        self.navigation_timeout_ms = navigation_timeout_ms
        self.email_selector = email_selector
        self.password_selector = password_selector
        self.submit_selector = submit_selector

    def login(self, page: Page, credentials: Credentials) -> CanvasSession:
        """Submit the login form and wait for the redirect.

        Args:
            page: Fresh Playwright page
            credentials: Email and password to log in with

        Returns:
            CanvasSession positioned wherever the service redirected to

        Raises:
            NavigationError: If the login page itself cannot be loaded
            AuthError: If no navigation follows the submit within the wait
        """
        logger.info("Logging in")
        try:
            page.goto(self.login_url, wait_until="networkidle", timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise NavigationError(self.login_url, str(e)) from e

        try:
            page.fill(self.email_selector, credentials.email)
            page.fill(self.password_selector, credentials.password)
            with page.expect_navigation(wait_until="networkidle", timeout=self.timeout_ms):
                page.click(self.submit_selector)
        except PlaywrightError as e:
            logger.debug(f"Login did not complete: {e}")
            raise AuthError(credentials.email) from e

        logger.info("Logged in")
        return CanvasSession(page, navigation_timeout_ms=self.navigation_timeout_ms)
