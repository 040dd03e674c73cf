"""Main CLI entry point for the whimsical-export command.

This module provides the Typer application that serves as the entry point
for the whimsical-export command-line tool. Every input can come from an
option, from an environment variable (a .env file is honoured), or, when
neither is set, from an interactive prompt.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.errors import InputValidationError
from src.cli.export_command import ExportCommand
from src.cli.models import ExitCode, ExportRequest
from src.cli.output import OutputHandler
from src.cli.validators import (
    parse_formats,
    validate_email,
    validate_password,
    validate_url,
)
from src.exporter.config_loader import ConfigLoader
from src.exporter.models import ExportFormat
from src.whimsical_client.auth import load_environment

VERSION = "1.0.1"

app = typer.Typer(
    name="whimsical-export",
    help="""Export Whimsical boards recursively as SVG, PNG and PDF files.

QUICK START:
  whimsical-export                                      # Prompt for everything
  whimsical-export --folder-url <url> --formats svg,pdf # Export one folder tree
  whimsical-export --debug                              # Watch the browser work

Inputs can also be set with the EMAIL, PASSWORD, FOLDER_URL and FILE_TYPES
environment variables or in a .env file.""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)

FORMATS_HELP = "Formats to export, comma separated: " + "; ".join(
    f"{file_format.value} = {file_format.description}" for file_format in ExportFormat
)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"whimsical-export_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _check_email(value: str) -> str:
    try:
        return validate_email(value)
    except InputValidationError as e:
        raise typer.BadParameter(e.original_message)


def _check_password(value: str) -> str:
    try:
        return validate_password(value)
    except InputValidationError as e:
        raise typer.BadParameter(e.original_message)


def _check_folder_url(value: str) -> str:
    # The base URL is checked by ExportCommand once the config is loaded
    try:
        return validate_url(value)
    except InputValidationError as e:
        raise typer.BadParameter(e.original_message)


def _check_formats(value: str) -> str:
    try:
        return ",".join(file_format.value for file_format in parse_formats(value))
    except InputValidationError as e:
        raise typer.BadParameter(e.original_message)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"whimsical-export version {VERSION}")
        raise typer.Exit()


@app.command()
def main_command(
    email: str = typer.Option(
        ...,
        "--email",
        envvar="EMAIL",
        prompt="Your Whimsical email (username@domain.tld)",
        callback=_check_email,
        help="Whimsical account email",
    ),
    password: str = typer.Option(
        ...,
        "--password",
        envvar="PASSWORD",
        prompt="Your Whimsical password",
        hide_input=True,
        callback=_check_password,
        help="Whimsical account password",
    ),
    folder_url: str = typer.Option(
        ...,
        "--folder-url",
        envvar="FOLDER_URL",
        prompt="Whimsical folder URL to start export from",
        callback=_check_folder_url,
        help="URL of the folder to export recursively",
        metavar="URL",
    ),
    formats: str = typer.Option(
        ...,
        "--formats",
        "-f",
        envvar="FILE_TYPES",
        prompt="Select which formats to export as (png, pdf, svg; comma separated)",
        callback=_check_formats,
        help=FORMATS_HELP,
    ),
    output_dir: str = typer.Option(
        "downloads",
        "--output",
        "-o",
        envvar="DOWNLOAD_PATH",
        help="Directory the exported folder tree is written to",
    ),
    config_path: str = typer.Option(
        ConfigLoader.DEFAULT_CONFIG_PATH,
        "--config",
        help="Optional YAML file overriding timeouts and selectors",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        envvar="DEBUG",
        help="Show the browser window with devtools and keep it open at the end",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        1,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        is_eager=True,
        callback=_version_callback,
        help="Show version and exit",
    ),
) -> None:
    """Export Whimsical boards recursively as SVG, PNG and PDF files.

    \b
    Every board under the starting folder is saved as <board>.<format>
    in a local directory tree mirroring the Whimsical folders. Files that
    already exist are never downloaded again, so an interrupted export
    can simply be run again.
    """
    _configure_logging(verbosity, logdir)

    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    output.print_welcome(str(Path(output_dir).resolve()))

    request = ExportRequest(
        email=email,
        password=password,
        folder_url=folder_url,
        formats=parse_formats(formats),
        output_dir=output_dir,
        debug=debug,
    )

    export_cmd = ExportCommand(config_path=config_path, output_handler=output)
    exit_code = export_cmd.run(request)

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    load_environment()
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
