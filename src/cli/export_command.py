"""Export command orchestration for CLI.

This module provides the ExportCommand class that runs one export: it
loads the engine configuration, launches the browser, logs in, walks the
requested folder tree and translates failures into exit codes.
"""

import logging
import os
from typing import Callable, ContextManager, Optional

from playwright.sync_api import Page

from src.cli.errors import CLIError
from src.cli.models import ExitCode, ExportRequest
from src.cli.output import OutputHandler
from src.cli.validators import validate_folder_url
from src.exporter.config_loader import ConfigLoader
from src.exporter.errors import ConfigError, FilesystemError
from src.exporter.traversal import FolderExporter
from src.whimsical_client.auth import Authenticator, Credentials
from src.whimsical_client.browser import launch_browser
from src.whimsical_client.errors import AuthError, ExportError, NavigationError

logger = logging.getLogger(__name__)

BrowserLauncher = Callable[..., ContextManager[Page]]


class ExportCommand:
    """Runs a recursive export for the CLI.

    The export workflow:
        1. Load configuration (optional YAML overrides)
        2. Launch the browser and log in
        3. Export the folder tree with FolderExporter
        4. Print the number of exported boards
        5. Return an exit code; only login and folder loading failures
           abort the run, per-format failures are skipped

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> export_cmd = ExportCommand(output_handler=output)
        >>> exit_code = export_cmd.run(request)
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config_path: str = ConfigLoader.DEFAULT_CONFIG_PATH,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
        folder_exporter: Optional[FolderExporter] = None,
        browser_launcher: BrowserLauncher = launch_browser,
    ):
        """Initialize export command with dependencies.

        Args:
            config_path: Path to the optional configuration YAML file
            output_handler: OutputHandler for terminal output (optional)
            authenticator: Authenticator for logging in (optional)
            folder_exporter: FolderExporter running the traversal (optional)
            browser_launcher: Context manager factory yielding a Playwright page

        Note:
            Dependencies left as None are built from the loaded configuration.
        """
        self.config_path = config_path
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator
        self.folder_exporter = folder_exporter
        self.browser_launcher = browser_launcher

    def run(self, request: ExportRequest) -> ExitCode:
        """Execute the export.

        Args:
            request: Validated run inputs

        Returns:
            ExitCode indicating success or specific failure type
        """
        try:
            config = ConfigLoader.load(self.config_path)
            folder_url = validate_folder_url(request.folder_url, config.base_url)

            if not self.authenticator:
                self.authenticator = Authenticator(
                    login_url=config.login_url,
                    timeout_ms=config.login_timeout_ms,
                    navigation_timeout_ms=config.navigation_timeout_ms,
                    email_selector=config.selectors.email_input,
                    password_selector=config.selectors.password_input,
                    submit_selector=config.selectors.submit_button,
                )

            if not self.folder_exporter:
                self.folder_exporter = FolderExporter(config)

            output_dir = os.path.abspath(request.output_dir)

            with self.browser_launcher(debug=request.debug) as page:
                session = self.authenticator.login(
                    page,
                    Credentials(email=request.email, password=request.password),
                )
                context = self.folder_exporter.run(
                    session,
                    folder_url,
                    output_dir,
                    request.formats,
                )

                if request.debug:
                    self.output_handler.pause("Press Enter to close the browser...")

            logger.info(f"Finished exporting {context.items_downloaded} items")
            self.output_handler.print_summary(context.items_downloaded)
            return ExitCode.SUCCESS

        except AuthError as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(f"❌ {e}")
            return ExitCode.AUTH_ERROR

        except NavigationError as e:
            logger.error(f"Navigation failed: {e}")
            self.output_handler.error(f"Could not load Whimsical: {e}")
            self.output_handler.info("Check your internet connection and the folder URL, then try again")
            return ExitCode.NETWORK_ERROR

        except ConfigError as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(f"Configuration error: {e}")
            return ExitCode.GENERAL_ERROR

        except FilesystemError as e:
            logger.error(f"Filesystem error: {e}")
            self.output_handler.error(f"Could not save export: {e}")
            return ExitCode.GENERAL_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except ExportError as e:
            logger.error(f"Export failed: {e}")
            self.output_handler.error(f"Export failed: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during export")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR
