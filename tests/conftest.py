"""Shared test fixtures for rn4oh tests."""
import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from rn4oh.core.config import Rn4ohConfig
from rn4oh.core.errors import GitError

TAGS_OUTPUT = (
    "a1b2c3\trefs/tags/v1.9.0\n"
    "d4e5f6\trefs/tags/v1.9.0^{}\n"
    "0a0b0c\trefs/tags/v2.1.0\n"
    "1a1b1c\trefs/tags/v1.10.0\n"
)


def build_template(root: Path) -> Path:
    """Write a small copy of the template repository to ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "package.json").write_text(json.dumps({
        "name": "rn4oh",
        "version": "1.0.0",
        "description": "RN4OH rn4oh template",
        "scripts": {"oh:dev": "rn4oh-cli dev"},
    }, indent=2))
    (root / "index.js").write_text("import App from './src/Rn4ohApp';\nconst KEY = 'RN4OH';\n")

    src = root / "rn4oh"
    src.mkdir()
    (src / "Rn4ohApp.tsx").write_text("export const name = 'rn4oh';\n")

    config_dir = root / "RN4OH_rn4oh_config"
    config_dir.mkdir()
    (config_dir / "settings.json").write_text('{"app": "RN4OH"}\n')

    modules = root / "node_modules" / "rn4oh"
    modules.mkdir(parents=True)
    (modules / "index.js").write_text("module.exports = 'rn4oh';\n")

    git_dir = root / ".git"
    git_dir.mkdir()
    (git_dir / "rn4oh.txt").write_text("rn4oh\n")
    return root


class FakeGit:
    """In-memory stand-in for GitManager that records every call."""

    def __init__(self, tags_output: str = TAGS_OUTPUT):
        self.tags_output = tags_output
        self.calls = []
        self.fail_on = set()

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on:
            raise GitError(f"git {name} failed", stderr="fatal: simulated failure")

    def clone(self, url, path):
        self._record("clone", url, Path(path))
        build_template(Path(path))

    def checkout(self, ref, cwd):
        self._record("checkout", ref, Path(cwd))

    def list_remote_tags(self, url):
        self._record("list_remote_tags", url)
        return self.tags_output

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def config():
    """Default configuration."""
    return Rn4ohConfig()


@pytest.fixture
def fake_git():
    """Recording git double."""
    return FakeGit()


@pytest.fixture
def template_dir(tmp_path):
    """A cloned-looking template tree."""
    return build_template(tmp_path / "project")


@pytest.fixture
def quiet_console():
    """Console writing into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=120)
