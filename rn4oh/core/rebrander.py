"""Rebrand a cloned template tree in place.

Rebranding runs in three phases, in this order:

1. Walk the tree, renaming matching directories (before entering them) and
   files, and collect the final path of every file.
2. Set the ``name`` field of the root ``package.json``.
3. Rewrite the contents of every collected file, ``package.json`` included.
"""
import json
import os
from pathlib import Path
from typing import List, Optional

from rn4oh.core.config import Rn4ohConfig
from rn4oh.core.errors import RebrandError
from rn4oh.core.logger import get_logger
from rn4oh.core.tokens import (
    contains_marker,
    rename_directory_name,
    rename_file_name,
    replace_in_text,
)

logger = get_logger(__name__)

# Undecodable bytes survive the read/write round trip unchanged
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class ProjectRebrander:
    """Renames paths and rewrites file contents of a cloned template."""

    def __init__(self, config: Optional[Rn4ohConfig] = None):
        self.config = config or Rn4ohConfig()

    def rebrand(self, root: Path, project_name: str) -> None:
        """Rebrand the template checked out at ``root`` as ``project_name``.

        Args:
            root: Project directory containing the cloned template
            project_name: Replacement for the marker token

        Raises:
            RebrandError: On rename collisions, a missing or malformed
                package.json, or any I/O failure. The tree is left as is.
        """
        root = Path(root)
        try:
            files = self.collect_files(root, project_name)
            logger.debug(f"Collected {len(files)} files under {root}")
            self.update_manifest(root, project_name)
            for file_path in files:
                self.rewrite_file(file_path, project_name)
        except RebrandError:
            raise
        except Exception as exc:
            raise RebrandError(exc) from exc

        logger.info(f"Rebranded {root} as {project_name}")

    def collect_files(self, directory: Path, project_name: str) -> List[Path]:
        """Rename matching entries below ``directory`` and return file paths.

        Directories are renamed before their children are visited, so every
        returned path reflects the final layout.
        """
        files: List[Path] = []
        with os.scandir(directory) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)

        for entry in entries:
            entry_path = Path(entry.path)
            if entry.is_symlink():
                logger.debug(f"Skipping symlink {entry_path}")
                continue

            if entry.is_dir():
                if entry.name in self.config.excluded_dirs:
                    continue
                if contains_marker(entry.name, self.config.marker):
                    new_name = rename_directory_name(entry.name, project_name, self.config.marker)
                    entry_path = self._rename(entry_path, new_name)
                files.extend(self.collect_files(entry_path, project_name))
            elif entry.is_file():
                new_name = rename_file_name(entry.name, project_name, self.config.marker)
                if new_name != entry.name:
                    entry_path = self._rename(entry_path, new_name)
                files.append(entry_path)

        return files

    def update_manifest(self, root: Path, project_name: str) -> None:
        """Set the manifest ``name`` field to the lowercased project name."""
        manifest_path = Path(root) / self.config.manifest_name
        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"{manifest_path} is not valid JSON: {exc}") from exc

        if not isinstance(manifest, dict):
            raise ValueError(f"{manifest_path} must contain a JSON object")

        manifest["name"] = project_name.lower()
        manifest_path.write_text(
            json.dumps(manifest, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.debug(f"Set {manifest_path.name} name to {manifest['name']}")

    def rewrite_file(self, file_path: Path, project_name: str) -> None:
        """Replace the literal lowercase/uppercase marker inside ``file_path``."""
        try:
            with open(file_path, encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as handle:
                content = handle.read()
            content = replace_in_text(content, project_name, self.config.marker)
            with open(file_path, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise RebrandError(OSError(f"Failed to replace contents of {file_path}: {exc}")) from exc

    @staticmethod
    def _rename(source: Path, new_name: str) -> Path:
        target = source.with_name(new_name)
        if target == source:
            return source
        # Case-only renames on case-insensitive filesystems resolve to the same file
        if target.exists() and not source.samefile(target):
            raise FileExistsError(f"Cannot rename {source} to {target}: target already exists")
        source.rename(target)
        logger.debug(f"Renamed {source} -> {target}")
        return target
