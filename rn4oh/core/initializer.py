"""Create a new project from the template repository."""
import shutil
from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from rn4oh.core.config import Rn4ohConfig
from rn4oh.core.errors import Rn4ohError, TargetExistsError, VersionNotFoundError
from rn4oh.core.logger import console as default_console
from rn4oh.core.logger import get_logger
from rn4oh.core.rebrander import ProjectRebrander
from rn4oh.core.versions import VersionLister
from rn4oh.services.git_manager import GitManager

logger = get_logger(__name__)


class InitState(str, Enum):
    """Phases of a project initialization."""

    IDLE = "idle"
    CHECKING_VERSION = "checking-version"
    CLONING = "cloning"
    CHECKING_OUT = "checking-out"
    REBRANDING = "rebranding"
    CLEANING_GIT = "cleaning-git"
    DONE = "done"
    FAILED = "failed"


class ProjectInitializer:
    """Clone, rebrand and detach a new project.

    Every git and filesystem step runs to completion before the next one.
    Nothing is rolled back on failure: a partially cloned or rebranded
    directory stays on disk.
    """

    def __init__(
        self,
        config: Optional[Rn4ohConfig] = None,
        git: Optional[GitManager] = None,
        rebrander: Optional[ProjectRebrander] = None,
        console: Optional[Console] = None,
        cwd: Optional[Path] = None,
    ):
        self.config = config or Rn4ohConfig()
        self.git = git or GitManager()
        self.rebrander = rebrander or ProjectRebrander(self.config)
        self.console = console or default_console
        self.cwd = Path(cwd) if cwd else None
        self.state = InitState.IDLE

    def _transition(self, state: InitState) -> None:
        logger.debug(f"Init state: {self.state.value} -> {state.value}")
        self.state = state

    def target_path(self, project_name: str) -> Path:
        """Directory the project named ``project_name`` is created in."""
        return (self.cwd or Path.cwd()) / project_name

    def initialize(self, project_name: str, version: Optional[str] = None) -> Path:
        """Create ``<cwd>/<project_name>`` from the template.

        Args:
            project_name: Directory name and replacement for the marker token
            version: Tag to check out (defaults to the remote default branch)

        Returns:
            Path to the created project

        Raises:
            TargetExistsError: If the target directory exists (no git call made)
            VersionNotFoundError: If ``version`` is not a remote tag (no clone)
            GitError: If listing, cloning or checkout fails
            RebrandError: If the cloned template cannot be rebranded
        """
        try:
            return self._initialize(project_name, version)
        except Exception:
            self._transition(InitState.FAILED)
            raise

    def _initialize(self, project_name: str, version: Optional[str]) -> Path:
        if not project_name or not project_name.strip():
            raise Rn4ohError("Project name must not be empty")

        target = self.target_path(project_name)
        if target.exists() or target.is_symlink():
            raise TargetExistsError(target)

        label = escape(project_name)
        if version:
            self._transition(InitState.CHECKING_VERSION)
            with self.console.status("[cyan]Checking version...[/cyan]", spinner="dots"):
                lister = VersionLister(self.config, self.git)
                found = lister.has_version(version)
            if not found:
                raise VersionNotFoundError(version)
            self.console.print("[green]✓[/green] Version check passed")

            self._transition(InitState.CLONING)
            with self.console.status(f"[cyan]Cloning project ({escape(version)})...[/cyan]", spinner="dots"):
                self.git.clone(self.config.repo_url, target)
                self._transition(InitState.CHECKING_OUT)
                self.git.checkout(version, cwd=target)
            self.console.print(f"[green]✓[/green] Cloned project ({escape(version)})")
        else:
            self._transition(InitState.CLONING)
            with self.console.status("[cyan]Cloning latest version...[/cyan]", spinner="dots"):
                self.git.clone(self.config.repo_url, target)
            self.console.print("[green]✓[/green] Cloned latest version")

        self._transition(InitState.REBRANDING)
        with self.console.status(f"[cyan]Updating project files for {label}...[/cyan]", spinner="dots"):
            self.rebrander.rebrand(target, project_name)
        self.console.print("[green]✓[/green] Project files updated")

        self._transition(InitState.CLEANING_GIT)
        git_dir = target / ".git"
        if git_dir.exists():
            shutil.rmtree(git_dir)

        self._transition(InitState.DONE)
        logger.info(f"Initialized {project_name} at {target}")
        return target
