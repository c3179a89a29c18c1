"""Unified logging for rn4oh with console and optional file output."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER_NAME = "rn4oh"

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _package_logger() -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(logging.WARNING)
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)

    return root_logger


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Adjust console verbosity and optionally mirror logs to a file.

    Args:
        verbose: Show debug-level messages on the console
        log_file: Path of a log file to append to (optional)

    Note:
        Calling this more than once does not stack file handlers for the
        same path.
    """
    root_logger = _package_logger()
    level = logging.DEBUG if verbose else logging.INFO
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not log_file:
        return

    target_log_file = Path(log_file).expanduser().resolve()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == target_log_file:
            return

    target_log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(file_handler)

    root_logger.info(f"rn4oh logging initialized: {target_log_file}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger that reports through the shared Rich console.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger propagating to the ``rn4oh`` package logger

    Note:
        The console handler only shows warnings and errors unless
        configure_logging(verbose=True) was called.
    """
    _package_logger()
    return logging.getLogger(name)
