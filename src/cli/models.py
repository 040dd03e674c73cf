"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures,
following the patterns established in src/exporter/models.py.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from src.exporter.models import ExportFormat


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    These exit codes provide meaningful feedback about the operation result:
    - SUCCESS (0): Export completed (individual formats may have been skipped)
    - GENERAL_ERROR (1): General error (config issues, invalid input, disk failures)
    - AUTH_ERROR (3): Login failed
    - NETWORK_ERROR (4): Whimsical could not be reached or a folder failed to load

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class ExportRequest:
    """Validated inputs of one export run.

    Attributes:
        email: Whimsical account email
        password: Whimsical account password
        folder_url: URL of the folder to export recursively
        formats: Formats to produce for every board
        output_dir: Directory the exported folder tree is created in
        debug: Show the browser and keep it open until the user confirms

    Example:
        >>> request = ExportRequest(
        ...     email="me@example.com",
        ...     password="secret",
        ...     folder_url="https://whimsical.com/team-NvYx",
        ...     formats=[ExportFormat.SVG],
        ... )
    """
    email: str
    password: str = field(repr=False)
    folder_url: str
    formats: List[ExportFormat]
    output_dir: str = "downloads"
    debug: bool = False
