"""Validation of run inputs collected from options, env vars or prompts."""

import re
from typing import Iterable, List, Union
from urllib.parse import urlparse

from src.exporter.models import ExportFormat

from .errors import InputValidationError

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s.]+$')


def validate_email(value: str) -> str:
    """Check that a value looks like ``username@domain.tld``.

    Raises:
        InputValidationError: If it does not
    """
    value = (value or '').strip()
    if not EMAIL_PATTERN.match(value):
        raise InputValidationError('email', f"'{value}' is not an email address (username@domain.tld)")
    return value


def validate_password(value: str) -> str:
    if not value:
        raise InputValidationError('password', 'password cannot be empty')
    return value


def validate_url(value: str) -> str:
    """Check that a value is an absolute http(s) URL with a path.

    Raises:
        InputValidationError: If it is not
    """
    value = (value or '').strip()
    parsed = urlparse(value)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise InputValidationError('folder URL', f"'{value}' is not a URL")

    if not parsed.path.strip('/'):
        raise InputValidationError('folder URL', f"'{value}' does not point to a folder")

    return value


def validate_folder_url(value: str, base_url: str = "https://whimsical.com/") -> str:
    """Check that a value is a folder URL under the Whimsical base URL.

    Raises:
        InputValidationError: If it is not an http(s) URL under ``base_url``
            with a folder path
    """
    value = validate_url(value)

    if not value.startswith(base_url):
        raise InputValidationError('folder URL', f"'{value}' must start with {base_url}")

    if not value[len(base_url):].strip('/'):
        raise InputValidationError('folder URL', f"'{value}' does not point to a folder")

    return value.rstrip('/')


def parse_formats(value: Union[str, Iterable[str]]) -> List[ExportFormat]:
    """Parse a comma-separated list (or list of strings) of export formats.

    Duplicates are dropped, keeping the first occurrence.

    Raises:
        InputValidationError: If a format is unknown or none is given

    Examples:
        >>> parse_formats("svg, PNG")
        [<ExportFormat.SVG: 'svg'>, <ExportFormat.PNG: 'png'>]
    """
    if isinstance(value, str):
        value = [value]

    formats: List[ExportFormat] = []
    for item in value:
        for token in item.split(','):
            token = token.strip().lower()
            if not token:
                continue
            try:
                file_format = ExportFormat(token)
            except ValueError:
                choices = ', '.join(f.value for f in ExportFormat)
                raise InputValidationError('format', f"'{token}' is not one of {choices}")
            if file_format not in formats:
                formats.append(file_format)

    if not formats:
        raise InputValidationError('format', 'select at least one format')

    return formats
