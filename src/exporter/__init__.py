"""Recursive export engine for Whimsical folder trees.

This package walks a remote folder hierarchy, classifies every item,
and writes each board's export formats into a local directory tree that
mirrors the remote one.
"""

from .traversal import FolderExporter
from .models import ExportContext, ExporterConfig, ExportFormat, ItemKind, Selectors
from .errors import (
    ExporterError,
    InvalidIdentifierError,
    FormatCaptureError,
    FilesystemError,
    ConfigError,
)
from .config_loader import ConfigLoader
from .file_store import LocalFileStore
from .format_exporter import FormatExporter
from .item_classifier import ItemClassifier
from .listing_loader import ListingLoader
from .path_namer import PathNamer

__all__ = [
    'FolderExporter',
    'ExportContext',
    'ExporterConfig',
    'ExportFormat',
    'ItemKind',
    'Selectors',
    'ExporterError',
    'InvalidIdentifierError',
    'FormatCaptureError',
    'FilesystemError',
    'ConfigError',
    'ConfigLoader',
    'LocalFileStore',
    'FormatExporter',
    'ItemClassifier',
    'ListingLoader',
    'PathNamer',
]
