"""Record of what one scaffolding run created and ran.

The record lives outside the generated project; the CLI only writes it
when asked to (--manifest PATH).
"""

import hashlib
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


@dataclass
class FileArtifact:
    """A single generated file."""

    path: str  # Relative path from project root, forward slashes
    size_bytes: int
    content_hash: str  # SHA-256 of content
    template_source: str | None = None
    category: str = "source"  # manifest, config, source

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "size_bytes": self.size_bytes,
            "content_hash": self.content_hash,
            "template_source": self.template_source,
            "category": self.category,
        }

    @classmethod
    def from_file(
        cls,
        file_path: Path,
        project_root: Path,
        template_source: str | None = None,
        category: str = "source",
    ) -> "FileArtifact":
        """Create artifact from a file that was just written."""
        content = file_path.read_bytes()
        return cls(
            path=file_path.relative_to(project_root).as_posix(),
            size_bytes=len(content),
            content_hash=hashlib.sha256(content).hexdigest(),
            template_source=template_source,
            category=category,
        )


@dataclass
class CommandExecution:
    """Record of an external command."""

    command: str
    working_dir: str
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    duration_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "working_dir": self.working_dir,
            "exit_code": self.exit_code,
            "stdout": self.stdout[:1000],
            "stderr": self.stderr[:1000],
            "duration_ms": round(self.duration_ms, 2),
        }


@dataclass
class ScaffoldManifest:
    """Everything one run produced: directories, files, commands and warnings."""

    project_name: str
    project_path: str
    options_hash: str  # Hash of the answers, for reproducibility checks
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    directories: list[str] = field(default_factory=list)
    files: list[FileArtifact] = field(default_factory=list)
    commands: list[CommandExecution] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    generation_time_ms: float = 0.0

    def add_directory(self, relative_path: str) -> None:
        self.directories.append(relative_path)

    def add_file(self, artifact: FileArtifact) -> None:
        self.files.append(artifact)

    def add_command(self, execution: CommandExecution) -> None:
        self.commands.append(execution)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_size_bytes(self) -> int:
        return sum(f.size_bytes for f in self.files)

    def files_by_category(self) -> dict[str, list[FileArtifact]]:
        """Group files by category."""
        result: dict[str, list[FileArtifact]] = {}
        for f in self.files:
            result.setdefault(f.category, []).append(f)
        return result

    def get_file(self, relative_path: str) -> FileArtifact | None:
        for f in self.files:
            if f.path == relative_path:
                return f
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_name": self.project_name,
            "project_path": self.project_path,
            "options_hash": self.options_hash,
            "created_at": self.created_at.isoformat(),
            "generation_time_ms": round(self.generation_time_ms, 2),
            "summary": {
                "total_files": self.total_files,
                "total_size_bytes": self.total_size_bytes,
                "total_commands": len(self.commands),
                "warnings": len(self.warnings),
            },
            "directories": list(self.directories),
            "files": [f.to_dict() for f in self.files],
            "commands": [c.to_dict() for c in self.commands],
            "warnings": list(self.warnings),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, output_path: Path) -> None:
        """Save the record as JSON, creating parent directories."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScaffoldManifest":
        manifest = cls(
            project_name=data["project_name"],
            project_path=data["project_path"],
            options_hash=data["options_hash"],
            created_at=datetime.fromisoformat(data["created_at"]),
            generation_time_ms=data.get("generation_time_ms", 0.0),
        )
        manifest.directories.extend(data.get("directories", []))
        manifest.warnings.extend(data.get("warnings", []))

        for f_data in data.get("files", []):
            manifest.files.append(FileArtifact(**f_data))

        for c_data in data.get("commands", []):
            manifest.commands.append(CommandExecution(**c_data))

        return manifest

    @classmethod
    def load(cls, input_path: Path) -> "ScaffoldManifest":
        return cls.from_dict(json.loads(input_path.read_text(encoding="utf-8")))


def compute_options_hash(options_dict: dict[str, Any]) -> str:
    """Deterministic hash of the answers.

    The location is excluded so the same answers hash the same anywhere.
    """
    hashed = {k: v for k, v in options_dict.items() if k != "location"}
    sorted_json = json.dumps(hashed, sort_keys=True)
    return hashlib.sha256(sorted_json.encode()).hexdigest()
