"""Local names for remote items.

This module derives the name an item gets on disk from its URL: the path
after the service base URL, used as-is. Folders become directories with
that name and boards become files with that stem, so the local tree
mirrors the remote hierarchy 1:1.
"""

from .errors import InvalidIdentifierError
from .models import ExportFormat


class PathNamer:
    """Maps item URLs to local names.

    Naming rules:
    - The base URL prefix is stripped
    - A trailing slash is ignored
    - The remainder must be a single, non-empty path segment

    Examples:
        - "https://whimsical.com/roadmap-2024-7Zq3" → "roadmap-2024-7Zq3"
        - "https://whimsical.com/team-NvYx/" → "team-NvYx"
    """

    def __init__(self, base_url: str = "https://whimsical.com/"):
        self.base_url = base_url if base_url.endswith('/') else f"{base_url}/"

    def name(self, identifier: str) -> str:
        """Derive the local name of an item.

        Args:
            identifier: Absolute item URL under the base URL

        Returns:
            The local directory name or file stem

        Raises:
            InvalidIdentifierError: If the URL is not a single item under the base URL

        Examples:
            >>> PathNamer().name("https://whimsical.com/roadmap-2024-7Zq3")
            'roadmap-2024-7Zq3'
        """
        if not identifier.startswith(self.base_url):
            raise InvalidIdentifierError(identifier, self.base_url)

        name = identifier[len(self.base_url):].rstrip('/')

        if not name or name in ('.', '..') or '/' in name or '\\' in name:
            raise InvalidIdentifierError(identifier, self.base_url)

        return name

    def filename(self, identifier: str, file_format: ExportFormat) -> str:
        """Name of the file an export format produces for an item.

        Examples:
            >>> PathNamer().filename("https://whimsical.com/roadmap-7Zq3", ExportFormat.SVG)
            'roadmap-7Zq3.svg'
        """
        return f"{self.name(identifier)}.{file_format.extension}"
