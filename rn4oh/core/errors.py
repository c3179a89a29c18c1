"""Exceptions raised by rn4oh operations."""
from typing import Optional, Sequence


class Rn4ohError(Exception):
    """Base class for every error the CLI reports to the user."""


class TargetExistsError(Rn4ohError):
    """Raised when the project directory is already present."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Directory {path.name} already exists")


class VersionNotFoundError(Rn4ohError):
    """Raised when the requested tag is not published on the remote."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Version {version} does not exist")


class GitError(Rn4ohError):
    """Raised when a git invocation fails."""

    def __init__(self, message: str, command: Optional[Sequence[str]] = None, stderr: str = ""):
        self.command = list(command) if command else []
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class RebrandError(Rn4ohError):
    """Raised when the cloned template cannot be rebranded."""

    PREFIX = "Failed to update project files: "

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"{self.PREFIX}{cause}")
