"""Listing and ordering of template versions published as git tags."""
import functools
from typing import Iterable, List, Optional, Sequence

from rn4oh.core.config import Rn4ohConfig
from rn4oh.core.logger import get_logger
from rn4oh.services.git_manager import GitManager

logger = get_logger(__name__)

TAG_REF_PREFIX = "refs/tags/"
DEREF_SUFFIX = "^{}"

# Components compared when ordering versions
COMPARED_COMPONENTS = 3

_MISSING = object()


def parse_tags(raw: str) -> List[str]:
    """Extract unique tag names from ``git ls-remote --tags`` output.

    Peeled refs (``v1.0.0^{}``) collapse onto their tag; first-seen order
    is preserved.
    """
    tags: List[str] = []
    seen = set()
    for line in raw.splitlines():
        if TAG_REF_PREFIX not in line:
            continue
        tag = line.split(TAG_REF_PREFIX)[1]
        if tag.endswith(DEREF_SUFFIX):
            tag = tag[: -len(DEREF_SUFFIX)]
        if tag in seen:
            continue
        seen.add(tag)
        tags.append(tag)
    return tags


def _component(part: str) -> Optional[int]:
    part = part.strip()
    if not part:
        return 0
    if part.isascii() and part.isdigit():
        return int(part)
    return None


def version_components(tag: str) -> List[object]:
    """Return the first three components of ``tag``.

    Numeric parts become ints, non-numeric parts None and absent parts a
    private sentinel.
    """
    text = tag[1:] if tag.startswith("v") else tag
    parts: List[object] = [_component(part) for part in text.split(".")][:COMPARED_COMPONENTS]
    parts.extend([_MISSING] * (COMPARED_COMPONENTS - len(parts)))
    return parts


def compare_versions(a: str, b: str) -> int:
    """Comparator ordering newer versions first.

    Components are compared numerically left to right. Two absent components
    move on to the next one; a non-numeric or one-sided absent component ends
    the comparison as a tie.
    """
    for left, right in zip(version_components(a), version_components(b)):
        if left is _MISSING and right is _MISSING:
            continue
        if not isinstance(left, int) or not isinstance(right, int):
            return 0
        if left != right:
            return right - left
    return 0


def sort_versions(tags: Iterable[str]) -> List[str]:
    """Sort tags newest first. Ties keep their input order."""
    return sorted(tags, key=functools.cmp_to_key(compare_versions))


class VersionLister:
    """Fetches and orders the versions published by the template remote."""

    def __init__(self, config: Optional[Rn4ohConfig] = None, git: Optional[GitManager] = None):
        self.config = config or Rn4ohConfig()
        self.git = git or GitManager()

    def fetch_tags(self) -> List[str]:
        """Return unique tags in remote order.

        Raises:
            GitError: If the remote cannot be queried
        """
        raw = self.git.list_remote_tags(self.config.repo_url)
        tags = parse_tags(raw)
        logger.debug(f"Remote {self.config.repo_url} publishes {len(tags)} tags")
        return tags

    def list_versions(self) -> List[str]:
        """Return unique tags sorted newest first."""
        return sort_versions(self.fetch_tags())

    def has_version(self, version: str, tags: Optional[Sequence[str]] = None) -> bool:
        """Return True when ``version`` is exactly one of the remote tags."""
        if tags is None:
            tags = self.fetch_tags()
        return version in tags
