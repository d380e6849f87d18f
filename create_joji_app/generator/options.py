"""Answers that fully determine a generated project.

Same options always produce identical file contents.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from create_joji_app.errors import (
    InvalidProjectNameError,
    LocationNotFoundError,
    ProjectExistsError,
)

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9\-_]+$")


def validate_project_name(name: str) -> str:
    """Return the name unchanged if it only uses lowercase letters, digits, '-' and '_'."""
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        raise InvalidProjectNameError(name)
    return name


def normalize_location(raw: str) -> str:
    """Turn Windows-style backslashes into forward slashes."""
    return raw.replace("\\", "/")


def validate_location(raw: str | Path) -> Path:
    """Resolve a user-supplied location and require an existing directory."""
    normalized = normalize_location(str(raw)).strip()
    if not normalized:
        raise LocationNotFoundError(str(raw))

    location = Path(normalized).expanduser()
    if not location.is_dir():
        raise LocationNotFoundError(str(raw))
    return location


def check_project_available(location: Path, name: str) -> Path:
    """Return location/name, or raise if anything is already there."""
    project_path = Path(location) / name
    if project_path.exists():
        raise ProjectExistsError(name, str(project_path))
    return project_path


@dataclass
class ProjectOptions:
    """Everything the generator needs to know about one project."""

    name: str
    location: Path

    use_router: bool = True
    install_deps: bool = True
    init_git: bool = True

    package_manager: str = "npm"

    def __post_init__(self) -> None:
        if isinstance(self.location, str):
            self.location = Path(normalize_location(self.location))
        validate_project_name(self.name)

    @property
    def project_path(self) -> Path:
        """Full path to the project directory."""
        return self.location / self.name

    def to_template_context(self) -> dict[str, Any]:
        """Values the Jinja2 templates render with."""
        return {
            "project_name": self.name,
            "use_router": self.use_router,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "location": str(self.location),
            "use_router": self.use_router,
            "install_deps": self.install_deps,
            "init_git": self.init_git,
            "package_manager": self.package_manager,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectOptions":
        """Create options from a dict (e.g. a saved run record)."""
        data = dict(data)
        data["location"] = Path(normalize_location(str(data["location"])))
        return cls(**data)
