"""Command-line interface for recursive Whimsical export.

This package provides the `whimsical-export` CLI tool that collects run
inputs from options, environment variables or prompts, logs in to
Whimsical and exports a folder tree with progress output and error
handling.
"""

from .export_command import ExportCommand
from .models import ExitCode, ExportRequest
from .errors import CLIError, InputValidationError

__all__ = [
    'ExportCommand',
    'ExitCode',
    'ExportRequest',
    'CLIError',
    'InputValidationError',
]
