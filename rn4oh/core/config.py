"""rn4oh runtime configuration."""
from dataclasses import dataclass
from typing import Tuple

from rn4oh import __version__

# Template repository used for cloning and tag listing
REPO_URL = "git@github.com:Kayshen-X/rn4oh-template.git"

# Placeholder token baked into the template
MARKER_TOKEN = "rn4oh"

# Directory names the rebrander never enters
EXCLUDED_DIRS = ("node_modules", ".git")

MANIFEST_NAME = "package.json"


@dataclass(frozen=True)
class Rn4ohConfig:
    """Values shared by the project initializer and the version lister.

    Attributes:
        repo_url: Remote repository cloned by ``init`` and queried by ``versions``
        marker: Template token replaced by the project name
        excluded_dirs: Directory names skipped while rebranding
        manifest_name: Manifest whose ``name`` field is set to the project name
        tool_version: Version reported by ``rn4oh --version``
    """

    repo_url: str = REPO_URL
    marker: str = MARKER_TOKEN
    excluded_dirs: Tuple[str, ...] = EXCLUDED_DIRS
    manifest_name: str = MANIFEST_NAME
    tool_version: str = __version__
