"""Typed exception hierarchy for export engine errors.

This module defines all custom exceptions used by the export engine.
All exceptions inherit from ExporterError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from src.whimsical_client.errors import ExportError


class ExporterError(ExportError):
    """Base exception for all export engine errors."""
    pass


class InvalidIdentifierError(ExporterError):
    """Raised when an item URL does not live under the service base URL."""

    def __init__(self, identifier: str, base_url: str):
        super().__init__(
            f"Item URL {identifier} is not a valid item under {base_url}"
        )
        self.identifier = identifier
        self.base_url = base_url


class FormatCaptureError(ExporterError):
    """Raised when one export format could not be produced for one item."""

    def __init__(self, file_format: str, identifier: str, reason: Optional[str] = None):
        message = f"Could not export {file_format.upper()} for {identifier}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_format = file_format
        self.identifier = identifier
        self.reason = reason


class FilesystemError(ExporterError):
    """Raised when filesystem operations fail (read, write, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class ConfigError(ExporterError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
