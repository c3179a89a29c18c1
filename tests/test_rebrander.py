"""Tests for rebranding a cloned template tree."""
import json
import os

import pytest

from rn4oh.core.errors import RebrandError
from rn4oh.core.rebrander import ProjectRebrander


class TestProjectRebrander:
    """Rename and rewrite behaviour on a realistic template."""

    def test_renames_directories_and_files(self, template_dir):
        ProjectRebrander().rebrand(template_dir, "MyApp")

        assert (template_dir / "myapp" / "MyappApp.tsx").is_file()
        assert not (template_dir / "rn4oh").exists()
        assert (template_dir / "MYAPP_myapp_config" / "settings.json").is_file()

    def test_rewrites_contents_of_renamed_files(self, template_dir):
        ProjectRebrander().rebrand(template_dir, "MyApp")

        assert (template_dir / "myapp" / "MyappApp.tsx").read_text() == "export const name = 'myapp';\n"
        assert (template_dir / "MYAPP_myapp_config" / "settings.json").read_text() == '{"app": "MYAPP"}\n'

    def test_content_pass_skips_mixed_case(self, template_dir):
        ProjectRebrander().rebrand(template_dir, "MyApp")

        index = (template_dir / "index.js").read_text()
        assert index == "import App from './src/Rn4ohApp';\nconst KEY = 'MYAPP';\n"

    def test_excluded_directories_untouched(self, template_dir):
        ProjectRebrander().rebrand(template_dir, "MyApp")

        module_file = template_dir / "node_modules" / "rn4oh" / "index.js"
        assert module_file.read_text() == "module.exports = 'rn4oh';\n"
        assert (template_dir / ".git" / "rn4oh.txt").read_text() == "rn4oh\n"

    def test_package_json_name_lowercased(self, template_dir):
        ProjectRebrander().rebrand(template_dir, "My-Project")

        manifest = json.loads((template_dir / "package.json").read_text())
        assert manifest["name"] == "my-project"
        assert manifest["description"] == "MY-PROJECT my-project template"
        assert manifest["scripts"] == {"oh:dev": "my-project-cli dev"}

    def test_package_json_two_space_indent_keeps_key_order(self, template_dir):
        ProjectRebrander().rebrand(template_dir, "demo")

        expected = json.dumps({
            "name": "demo",
            "version": "1.0.0",
            "description": "DEMO demo template",
            "scripts": {"oh:dev": "demo-cli dev"},
        }, indent=2)
        assert (template_dir / "package.json").read_text() == expected

    def test_phases_run_in_order(self, template_dir):
        order = []

        class RecordingRebrander(ProjectRebrander):
            def collect_files(self, directory, project_name):
                files = super().collect_files(directory, project_name)
                if "walk" not in order:
                    order.append("walk")
                return files

            def update_manifest(self, root, project_name):
                order.append("manifest")
                super().update_manifest(root, project_name)

            def rewrite_file(self, file_path, project_name):
                if "rewrite" not in order:
                    order.append("rewrite")
                super().rewrite_file(file_path, project_name)

        RecordingRebrander().rebrand(template_dir, "demo")
        assert order == ["walk", "manifest", "rewrite"]

    def test_collected_paths_are_final(self, template_dir):
        files = ProjectRebrander().collect_files(template_dir, "demo")

        assert template_dir / "demo" / "DemoApp.tsx" in files
        assert all(path.exists() for path in files)
        assert not any("node_modules" in path.parts for path in files)


class TestRewriteFile:
    """Byte-level behaviour of the content pass."""

    def test_preserves_crlf(self, tmp_path):
        target = tmp_path / "win.txt"
        target.write_bytes(b"rn4oh\r\nRN4OH\r\n")

        ProjectRebrander().rewrite_file(target, "demo")
        assert target.read_bytes() == b"demo\r\nDEMO\r\n"

    def test_undecodable_bytes_round_trip(self, tmp_path):
        target = tmp_path / "icon.bin"
        target.write_bytes(b"\x89PNG\xff\xfe rn4oh \x00")

        ProjectRebrander().rewrite_file(target, "demo")
        assert target.read_bytes() == b"\x89PNG\xff\xfe demo \x00"

    def test_missing_file_names_path(self, tmp_path):
        target = tmp_path / "gone.txt"

        with pytest.raises(RebrandError) as excinfo:
            ProjectRebrander().rewrite_file(target, "demo")
        assert str(target) in str(excinfo.value)


class TestRebrandErrors:
    """Failures abort the whole rebrand with a prefixed message."""

    def test_missing_package_json(self, template_dir):
        (template_dir / "package.json").unlink()

        with pytest.raises(RebrandError) as excinfo:
            ProjectRebrander().rebrand(template_dir, "demo")
        assert str(excinfo.value).startswith(RebrandError.PREFIX)

    def test_malformed_package_json(self, template_dir):
        (template_dir / "package.json").write_text("{not json")

        with pytest.raises(RebrandError, match="not valid JSON"):
            ProjectRebrander().rebrand(template_dir, "demo")

    def test_non_object_package_json(self, template_dir):
        (template_dir / "package.json").write_text("[]")

        with pytest.raises(RebrandError, match="JSON object"):
            ProjectRebrander().rebrand(template_dir, "demo")

    def test_rename_collision(self, template_dir):
        (template_dir / "rn4oh.txt").write_text("one")
        (template_dir / "demo.txt").write_text("two")

        with pytest.raises(RebrandError, match="already exists"):
            ProjectRebrander().rebrand(template_dir, "demo")
        assert (template_dir / "demo.txt").read_text() == "two"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks_are_not_followed(template_dir, tmp_path):
    outside = tmp_path / "outside.txt"
    outside.write_text("rn4oh")
    link = template_dir / "rn4oh-link"
    os.symlink(outside, link)

    ProjectRebrander().rebrand(template_dir, "demo")

    assert link.is_symlink()
    assert outside.read_text() == "rn4oh"
