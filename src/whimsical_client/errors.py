"""Typed exception hierarchy for Whimsical session errors.

This module defines all custom exceptions raised at the browser boundary.
All exceptions inherit from WhimsicalError so the export engine can treat
"the remote surface did not cooperate" as one condition, and include
descriptive messages with context to help with debugging.
"""

from typing import Optional


class ExportError(Exception):
    """Base exception for all whimsical-exporter errors.

    Use this to catch any application-level error from the export tool.
    """
    pass


class WhimsicalError(ExportError):
    """Base exception for all errors raised by the Whimsical session."""
    pass


class AuthError(WhimsicalError):
    """Raised when login does not complete (interpreted as wrong credentials)."""

    def __init__(self, email: str, message: Optional[str] = None):
        super().__init__(
            message or "Login failed, please check email and password are correct"
        )
        self.email = email


class NavigationError(WhimsicalError):
    """Raised when a page cannot be loaded."""

    def __init__(self, url: str, reason: Optional[str] = None):
        message = f"Navigation to {url} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


class ElementNotFoundError(WhimsicalError):
    """Raised when a selector matches nothing on the current page."""

    def __init__(self, selector: str):
        super().__init__(f"Element {selector} not found")
        self.selector = selector


class ElementDisabledError(WhimsicalError):
    """Raised when a control is rendered but not interactive."""

    def __init__(self, selector: str):
        super().__init__(f"Element {selector} is not enabled")
        self.selector = selector


class ResponseTimeoutError(WhimsicalError):
    """Raised when an awaited network response does not arrive in time."""

    def __init__(self, timeout_ms: int):
        super().__init__(f"No matching response within {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class ResponseStatusError(WhimsicalError):
    """Raised when a captured network response reports a non-success status."""

    def __init__(self, url: str, status: int):
        super().__init__(f"Response from {url} failed with status {status}")
        self.url = url
        self.status = status


class PageError(WhimsicalError):
    """Raised when the page fails an operation for any other reason.

    Typically the document changed underneath the call (a late redirect
    destroys the execution context) or the page was closed.
    """

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Page operation {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.operation = operation
        self.reason = reason
