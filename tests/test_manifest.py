"""Tests for the run record."""

from pathlib import Path

from create_joji_app.generator.manifest import (
    CommandExecution,
    FileArtifact,
    ScaffoldManifest,
    compute_options_hash,
)
from create_joji_app.generator.options import ProjectOptions


class TestOptionsHash:
    def test_same_options_same_hash(self):
        a = ProjectOptions(name="my-app", location=Path("/tmp/a"))
        b = ProjectOptions(name="my-app", location=Path("/tmp/b"))
        assert compute_options_hash(a.to_dict()) == compute_options_hash(b.to_dict())

    def test_router_changes_hash(self):
        a = ProjectOptions(name="my-app", location=Path("/tmp"), use_router=True)
        b = ProjectOptions(name="my-app", location=Path("/tmp"), use_router=False)
        assert compute_options_hash(a.to_dict()) != compute_options_hash(b.to_dict())


class TestFileArtifact:
    def test_from_file(self, temp_workspace):
        nested = temp_workspace / "src" / "main.jsx"
        nested.parent.mkdir()
        nested.write_bytes(b"hello")

        artifact = FileArtifact.from_file(nested, temp_workspace, "src/main.jsx.j2", "source")

        assert artifact.path == "src/main.jsx"
        assert artifact.size_bytes == 5
        assert artifact.content_hash == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )


class TestScaffoldManifest:
    def test_save_and_load(self, temp_workspace):
        manifest = ScaffoldManifest(
            project_name="saved",
            project_path=str(temp_workspace / "saved"),
            options_hash="abc123",
        )
        manifest.add_directory("src")
        manifest.add_file(FileArtifact("package.json", 10, "ff", None, "manifest"))
        manifest.add_command(
            CommandExecution(command="npm install", working_dir="/x", exit_code=0, stdout="x" * 5000)
        )
        manifest.add_warning("git: not found")

        path = temp_workspace / "out" / "record.json"
        manifest.save(path)
        loaded = ScaffoldManifest.load(path)

        assert loaded.project_name == "saved"
        assert loaded.directories == ["src"]
        assert loaded.files[0].path == "package.json"
        assert loaded.commands[0].command == "npm install"
        assert len(loaded.commands[0].stdout) == 1000
        assert loaded.warnings == ["git: not found"]
        assert loaded.created_at == manifest.created_at

    def test_summary(self):
        manifest = ScaffoldManifest(project_name="s", project_path="/s", options_hash="h")
        manifest.add_file(FileArtifact("a", 3, "h1", category="config"))
        manifest.add_file(FileArtifact("b", 4, "h2", category="config"))

        data = manifest.to_dict()
        assert data["summary"]["total_files"] == 2
        assert data["summary"]["total_size_bytes"] == 7
        assert list(manifest.files_by_category()) == ["config"]
        assert manifest.get_file("missing") is None
