"""Per-format capture of board content through the Whimsical UI.

Each format is produced by driving the board page the way a user would:

- SVG: open the board's SVG view and serialize it.
- PNG: open the share menu and click "Copy as image"; the image arrives as
  a ``blob:`` response that is captured while the click happens.
- PDF: open the share menu and click "Print"; the print preview renders
  into an iframe whose markup is inlined and printed to PDF.

Any failure of the remote surface is raised as FormatCaptureError so the
caller can skip that one format for that one board.
"""

import logging
from typing import Optional

from src.whimsical_client.errors import ResponseStatusError, WhimsicalError
from src.whimsical_client.session import CanvasSession

from .errors import FormatCaptureError
from .models import ExporterConfig, ExportFormat

logger = logging.getLogger(__name__)


class FormatExporter:
    """Produces the bytes of one export format for one board.

    Example:
        >>> exporter = FormatExporter()
        >>> content = exporter.export(session, board_url, ExportFormat.SVG)
    """

    def __init__(self, config: Optional[ExporterConfig] = None):
        self._config = config or ExporterConfig()
        self._captures = {
            ExportFormat.SVG: self.capture_vector,
            ExportFormat.PNG: self.capture_raster,
            ExportFormat.PDF: self.capture_paginated,
        }

    def export(
        self,
        session: CanvasSession,
        identifier: str,
        file_format: ExportFormat,
    ) -> bytes:
        """Capture a board in the given format.

        Args:
            session: Shared session; navigated as needed
            identifier: Board URL
            file_format: Format to produce

        Returns:
            File content

        Raises:
            FormatCaptureError: If the board yields no usable content in this format
        """
        try:
            return self._captures[file_format](session, identifier)
        except WhimsicalError as e:
            raise FormatCaptureError(file_format.value, identifier, str(e)) from e

    def capture_vector(self, session: CanvasSession, identifier: str) -> bytes:
        """Serialize the board's SVG view."""
        session.goto_if_needed(f"{identifier}{self._config.vector_view_suffix}")
        session.set_background_color(
            self._config.selectors.vector_root,
            self._config.background_color,
        )
        return session.content().encode('utf-8')

    def capture_raster(self, session: CanvasSession, identifier: str) -> bytes:
        """Capture the PNG that "Copy as image" produces.

        The share menu is closed again whatever the outcome.

        Raises:
            ResponseTimeoutError: If no image blob arrives in time
            ResponseStatusError: If the blob response is not successful
        """
        selectors = self._config.selectors
        session.goto_if_needed(identifier)
        self._open_share_menu(session)
        try:
            session.wait_for(selectors.copy_image_action, self._config.capture_timeout_ms)
            with session.expect_response(
                self._is_image_blob,
                self._config.capture_timeout_ms,
            ) as captured:
                session.click_if_enabled(selectors.copy_image_action)

            response = captured.value
            if not response.ok:
                raise ResponseStatusError(response.url, response.status)
            return session.response_body(response)
        finally:
            self._close_share_menu(session)

    def capture_paginated(self, session: CanvasSession, identifier: str) -> bytes:
        """Print the board's print preview to a landscape PDF.

        Inlining the preview replaces the board page, so the share menu is
        only closed when capture fails before that point.
        """
        selectors = self._config.selectors
        session.goto_if_needed(identifier)
        self._open_share_menu(session)
        inlined = False
        try:
            session.wait_for(selectors.print_action, self._config.capture_timeout_ms)
            session.click_if_enabled(selectors.print_action)
            session.wait_for(selectors.print_frame, self._config.capture_timeout_ms)
            preview = session.nested_frame_content()

            session.replace_content(preview)
            inlined = True
            session.set_background_color(
                selectors.print_root,
                self._config.background_color,
            )
            return session.render_pdf()
        finally:
            if not inlined:
                self._close_share_menu(session)

    def _open_share_menu(self, session: CanvasSession) -> None:
        share_button = self._config.selectors.share_button
        session.wait_for(share_button, self._config.capture_timeout_ms)
        session.click_if_enabled(share_button)

    def _close_share_menu(self, session: CanvasSession) -> None:
        try:
            session.click_if_enabled(self._config.selectors.share_button)
        except WhimsicalError as e:
            logger.warning(f"Failed to close share menu: {e}")

    def _is_image_blob(self, response) -> bool:
        return response.url.startswith(f"blob:{self._config.base_url}")
