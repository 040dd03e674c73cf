"""Local file store for exported boards.

Directory creation is idempotent and never fails a run. Every file is
written whole: content goes to a hidden temporary sibling first and is
moved into place, so a file with the final name is always complete.
"""

import logging
import os
from typing import Set, Union

from .errors import FilesystemError

logger = logging.getLogger(__name__)


class LocalFileStore:
    """Directory and file operations used by the export engine."""

    TEMP_PREFIX = '.'
    TEMP_SUFFIX = '.part'

    def ensure_directory(self, path: str) -> None:
        """Create a directory and its parents if missing.

        Failures are logged and ignored; a later write into the directory
        reports the real problem.
        """
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            logger.debug(f"Could not create directory {path}: {e}")

    def list_names(self, path: str) -> Set[str]:
        """Return the names of the entries in a directory (empty if it does not exist)."""
        try:
            return set(os.listdir(path))
        except FileNotFoundError:
            return set()
        except OSError as e:
            raise FilesystemError(path, 'list', str(e))

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def write_bytes(self, file_path: str, content: Union[bytes, str]) -> None:
        """Write a whole file, replacing nothing partially.

        Args:
            file_path: Final path of the file
            content: File content; text is encoded as UTF-8

        Raises:
            FilesystemError: If the file cannot be written
        """
        if isinstance(content, str):
            content = content.encode('utf-8')

        directory, basename = os.path.split(file_path)
        temp_path = os.path.join(directory, f"{self.TEMP_PREFIX}{basename}{self.TEMP_SUFFIX}")

        try:
            with open(temp_path, 'wb') as f:
                f.write(content)
            os.replace(temp_path, file_path)
        except OSError as e:
            self._cleanup_temp_file(temp_path)
            raise FilesystemError(file_path, 'write', str(e))

        logger.debug(f"Wrote {len(content)} bytes to {file_path}")

    def _cleanup_temp_file(self, temp_path: str) -> None:
        try:
            if os.path.exists(temp_path):
                os.remove(temp_path)
        except OSError as e:
            logger.warning(f"Failed to remove temp file {temp_path}: {e}")
