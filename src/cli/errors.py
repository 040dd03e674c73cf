"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from src.whimsical_client.errors import ExportError


class CLIError(ExportError):
    """Base exception for all CLI-related errors."""
    pass


class InputValidationError(CLIError):
    """Raised when a run input (email, folder URL, formats...) is invalid."""

    def __init__(self, field: str, message: str):
        super().__init__(f"Invalid {field}: {message}")
        self.field = field
        self.original_message = message
