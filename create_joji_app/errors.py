"""Exceptions raised while collecting answers and scaffolding a project."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from create_joji_app.generator.manifest import CommandExecution


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidProjectNameError(ScaffoldError, ValueError):
    """Project name contains characters outside [a-z0-9-_]."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Project name can only contain lowercase letters, numbers, "
            "hyphens, and underscores"
        )


class LocationNotFoundError(ScaffoldError):
    """Target location is not an existing directory."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__("That directory does not exist. Please enter a valid path.")


class ProjectExistsError(ScaffoldError):
    """Something already exists where the project would be created."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(
            f'Directory "{name}" already exists! Please choose another name.'
        )


class CommandNotFoundError(ScaffoldError):
    """Executable is not on PATH."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(
            f"Command not found: {executable}. Is it installed and in your PATH?"
        )


class CommandError(ScaffoldError):
    """External command exited with a non-zero status."""

    def __init__(self, execution: "CommandExecution") -> None:
        self.execution = execution
        detail = execution.stderr.strip() or execution.stdout.strip()
        message = f"Command failed ({execution.exit_code}): {execution.command}"
        if detail:
            message += f"\n{detail[-1000:]}"
        super().__init__(message)
