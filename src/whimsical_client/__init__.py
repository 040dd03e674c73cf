"""Whimsical client library for recursive export.

This package provides the browser boundary used by the export engine:
credential loading, login, and a navigable session over a Playwright page.
"""

from .errors import (
    ExportError,
    WhimsicalError,
    AuthError,
    NavigationError,
    ElementNotFoundError,
    ElementDisabledError,
    ResponseTimeoutError,
    ResponseStatusError,
    PageError,
)

__all__ = [
    "ExportError",
    "WhimsicalError",
    "AuthError",
    "NavigationError",
    "ElementNotFoundError",
    "ElementDisabledError",
    "ResponseTimeoutError",
    "ResponseStatusError",
    "PageError",
]
