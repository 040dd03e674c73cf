"""Test helper modules for export engine testing.

This package provides utilities for unit and integration testing:
- fake_canvas: In-memory Whimsical session over a scripted remote tree
"""

from .fake_canvas import (
    BASE_URL,
    FakeBoard,
    FakeCanvasSession,
    FakeFolder,
    FakeResponse,
    item_url,
)

__all__ = [
    'BASE_URL',
    'FakeBoard',
    'FakeCanvasSession',
    'FakeFolder',
    'FakeResponse',
    'item_url',
]
