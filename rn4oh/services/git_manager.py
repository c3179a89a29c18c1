"""Git operations against the template repository."""
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from rn4oh.core.errors import GitError
from rn4oh.core.logger import get_logger

logger = get_logger(__name__)


class GitManager:
    """Thin wrapper over the ``git`` executable."""

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def _run(self, args: List[str], cwd: Optional[Path] = None) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitError: If git is missing or exits with a non-zero status
        """
        cmd = [self.executable] + args
        logger.debug(f"Running {' '.join(cmd)}" + (f" in {cwd}" if cwd else ""))

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True
            )
        except FileNotFoundError as e:
            raise GitError("Git not found. Please install git first.", command=cmd) from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else str(e)
            logger.debug(f"git {args[0]} failed: {stderr}")
            raise GitError(f"git {args[0]} failed", command=cmd, stderr=stderr) from e

        if result.stdout:
            logger.debug(f"Git output: {result.stdout.strip()}")
        return result.stdout

    def clone(self, url: str, path: Union[str, Path]) -> None:
        """Clone ``url`` into ``path`` (default branch)."""
        logger.info(f"Cloning {url} to {path}")
        self._run(["clone", url, str(path)])

    def checkout(self, ref: str, cwd: Union[str, Path]) -> None:
        """Check out ``ref`` inside the repository at ``cwd``."""
        logger.info(f"Checking out {ref} in {cwd}")
        self._run(["checkout", ref], cwd=Path(cwd))

    def list_remote(self, args: List[str]) -> str:
        """Return raw ``git ls-remote`` output for ``args``."""
        return self._run(["ls-remote"] + list(args))

    def list_remote_tags(self, url: str) -> str:
        """Return raw tag refs published by ``url``."""
        return self.list_remote(["--tags", url])
