"""Recursive export of a Whimsical folder tree.

This module walks a folder hierarchy depth-first, mirroring every folder
as a local directory and exporting every board in the requested formats.
Existing local files are the record of earlier runs: a board whose files
all exist is skipped without touching the remote service, and a board
with some formats present only gets the missing ones. Re-running after an
interruption therefore resumes where the previous run stopped.
"""

import logging
import os
from typing import List, Optional, Set

from src.whimsical_client.errors import WhimsicalError
from src.whimsical_client.session import CanvasSession

from .errors import FilesystemError, FormatCaptureError
from .file_store import LocalFileStore
from .format_exporter import FormatExporter
from .item_classifier import ItemClassifier
from .listing_loader import ListingLoader
from .models import ExportContext, ExporterConfig, ExportFormat, ItemKind
from .path_namer import PathNamer

logger = logging.getLogger(__name__)


class FolderExporter:
    """Exports a folder and all of its descendants.

    The session is shared by every step and only one item is processed at
    a time: a sub-folder is exported completely before its parent moves on
    to the next sibling.

    Example:
        >>> exporter = FolderExporter()
        >>> context = exporter.run(session, folder_url, "./downloads", [ExportFormat.SVG])
        >>> print(f"Finished exporting {context.items_downloaded} items")
    """

    def __init__(
        self,
        config: Optional[ExporterConfig] = None,
        namer: Optional[PathNamer] = None,
        classifier: Optional[ItemClassifier] = None,
        listing_loader: Optional[ListingLoader] = None,
        format_exporter: Optional[FormatExporter] = None,
        file_store: Optional[LocalFileStore] = None,
    ):
        """Initialize with collaborators; defaults are built from ``config``.

        Args:
            config: Engine configuration
            namer: Maps item URLs to local names
            classifier: Tells folders, boards and empty boards apart
            listing_loader: Lists folder children
            format_exporter: Captures board content per format
            file_store: Local directory and file operations
        """
        self._config = config or ExporterConfig()
        self._namer = namer or PathNamer(self._config.base_url)
        self._classifier = classifier or ItemClassifier(self._config)
        self._listing_loader = listing_loader or ListingLoader(self._config)
        self._format_exporter = format_exporter or FormatExporter(self._config)
        self._file_store = file_store or LocalFileStore()

    def run(
        self,
        session: CanvasSession,
        folder_identifier: str,
        local_base_path: str,
        formats: List[ExportFormat],
    ) -> ExportContext:
        """Export a folder tree.

        Args:
            session: Logged-in session
            folder_identifier: URL of the folder to start from
            local_base_path: Directory the folder's own directory is created in
            formats: Non-empty list of formats to produce for every board

        Returns:
            The run's ExportContext, carrying the number of exported boards

        Raises:
            ValueError: If no formats are requested
            NavigationError: If the starting folder page cannot be loaded
        """
        if not formats:
            raise ValueError("At least one export format is required")

        context = ExportContext(session=session, formats=list(formats))
        self.export_folder(context, folder_identifier, local_base_path)
        return context

    def export_folder(
        self,
        context: ExportContext,
        folder_identifier: str,
        local_base_path: str,
    ) -> None:
        """Export one folder into ``local_base_path/<folder name>``, recursing into sub-folders."""
        folder_name = self._namer.name(folder_identifier)
        folder_path = os.path.join(local_base_path, folder_name)

        logger.info(f"Navigating to folder: {folder_name}")
        self._file_store.ensure_directory(folder_path)

        children = self._listing_loader.list_children(context.session, folder_identifier)
        logger.info(f"Folder has {len(children)} items")

        existing = self._file_store.list_names(folder_path)
        for child_identifier in children:
            self._export_item(context, child_identifier, folder_path, existing)

    def _export_item(
        self,
        context: ExportContext,
        identifier: str,
        folder_path: str,
        existing: Set[str],
    ) -> None:
        item_name = self._namer.name(identifier)
        logger.info(f"Processing: {item_name}")

        # A directory from an earlier run means the item is a folder
        if item_name in existing and self._file_store.is_directory(os.path.join(folder_path, item_name)):
            self._export_subfolder(context, identifier, folder_path)
            return

        pending = self._pending_formats(context.formats, identifier, existing)
        if not pending:
            return

        kind = self._classifier.classify(context.session, identifier)

        if kind is ItemKind.FOLDER:
            self._export_subfolder(context, identifier, folder_path)
        elif kind is ItemKind.EMPTY_DOCUMENT:
            logger.info("Item is empty")
        else:
            self._export_document(context, identifier, folder_path, pending)

    def _export_subfolder(
        self,
        context: ExportContext,
        identifier: str,
        folder_path: str,
    ) -> None:
        try:
            self.export_folder(context, identifier, folder_path)
        except WhimsicalError as e:
            # Missing boards of this folder are picked up by the next run
            logger.warning(f"Skipping folder {identifier}: {e}")

    def _pending_formats(
        self,
        formats: List[ExportFormat],
        identifier: str,
        existing: Set[str],
    ) -> List[ExportFormat]:
        pending = []
        for file_format in formats:
            if self._namer.filename(identifier, file_format) in existing:
                logger.info(f"{file_format.short_name} already exists, skipping")
            else:
                pending.append(file_format)
        return pending

    def _export_document(
        self,
        context: ExportContext,
        identifier: str,
        folder_path: str,
        formats: List[ExportFormat],
    ) -> None:
        """Export the missing formats of one board and count it once if any succeeded."""
        written = 0
        for file_format in formats:
            try:
                content = self._format_exporter.export(context.session, identifier, file_format)
            except FormatCaptureError as e:
                logger.warning(f"{file_format.short_name} not available, skipping: {e}")
                continue

            file_path = os.path.join(folder_path, self._namer.filename(identifier, file_format))
            try:
                self._file_store.write_bytes(file_path, content)
            except FilesystemError as e:
                logger.warning(f"Could not save {file_format.short_name}, skipping: {e}")
                continue

            logger.info(f"Downloaded {file_format.short_name}")
            written += 1

        if written:
            context.items_downloaded += 1
