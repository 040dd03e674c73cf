"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for colored output and formatted text. Supports
verbosity levels and --no-color flag.
"""

from rich.console import Console


class OutputHandler:
    """Handles all terminal output using Rich library.

    Provides methods for displaying messages and the run summary with
    color coding and verbosity level control. Per-item progress is
    reported through logging; this handler prints what the user always
    sees.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Operation completed")
    """

    def __init__(self, verbosity: int = 1, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green.

        Args:
            message: Success message to display
        """
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2).

        Args:
            message: Debug message to display
        """
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting.

        Args:
            message: Message to display
        """
        self.console.print(message)

    def pause(self, message: str) -> None:
        """Block until the user presses Enter."""
        self.console.input(message)

    def print_welcome(self, download_path: str) -> None:
        self.console.print("[bold]👋 Welcome to whimsical-exporter[/bold]")
        self.console.print(f"ℹ  All exported files will be saved in {download_path}\n")

    def print_summary(self, items_downloaded: int) -> None:
        """Display the export summary.

        Args:
            items_downloaded: Number of boards for which at least one file was written
        """
        if items_downloaded == 0:
            self.console.print("\n[yellow]✨ Finished, nothing new to export[/yellow]")
        else:
            self.console.print(f"\n[green]✨ Finished exporting {items_downloaded} items[/green]")
