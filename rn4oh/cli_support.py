"""Shared utilities for rn4oh CLI modules."""
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rn4oh.core.logger import configure_logging

# Errors go to stderr so stdout stays usable in scripts
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Set up logging for CLI commands.

    Args:
        verbose: Enable debug output on the console
        log_file: Path to log file (optional)
    """
    configure_logging(verbose=verbose, log_file=log_file)


def handle_cli_error(
    e: Exception,
    console: Optional[Console] = None,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Report an error and exit.

    Args:
        e: Exception to handle
        console: Rich console for output (defaults to stderr)
        verbose: Show exception traceback if True
        exit_code: Exit code to use

    Raises:
        typer.Exit: Always
    """
    console = console or err_console
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")
