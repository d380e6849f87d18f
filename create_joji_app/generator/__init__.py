"""Template-based generation of a React + Vite + Tailwind project."""

from create_joji_app.generator.generator import ProjectGenerator, generate_project
from create_joji_app.generator.manifest import (
    CommandExecution,
    FileArtifact,
    ScaffoldManifest,
)
from create_joji_app.generator.options import (
    ProjectOptions,
    check_project_available,
    normalize_location,
    validate_location,
    validate_project_name,
)
from create_joji_app.generator.reporter import NullReporter, StepReporter

__all__ = [
    # Options
    "ProjectOptions",
    "check_project_available",
    "normalize_location",
    "validate_location",
    "validate_project_name",
    # Generator
    "ProjectGenerator",
    "generate_project",
    "NullReporter",
    "StepReporter",
    # Manifest
    "CommandExecution",
    "FileArtifact",
    "ScaffoldManifest",
]
