"""Project generator using deterministic templates.

Renders a React + Vite + Tailwind project from Jinja2 templates, then
optionally installs dependencies and creates the first git commit.
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from create_joji_app.config import Settings, get_settings
from create_joji_app.errors import CommandError
from create_joji_app.generator.commands import (
    GitOperations,
    install_command,
    run_command,
)
from create_joji_app.generator.manifest import (
    FileArtifact,
    ScaffoldManifest,
    compute_options_hash,
)
from create_joji_app.generator.options import ProjectOptions
from create_joji_app.generator.package_json import render_package_json
from create_joji_app.generator.reporter import NullReporter, StepReporter

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

BASE_DIRECTORIES = [
    "src",
    "src/components",
    "src/assets",
    "src/styles",
    "public",
]
ROUTER_DIRECTORIES = ["src/pages"]

# (template, output path relative to the project root)
CONFIG_TEMPLATES = [
    ("vite.config.js.j2", "vite.config.js"),
    ("tailwind.config.js.j2", "tailwind.config.js"),
    ("postcss.config.js.j2", "postcss.config.js"),
    ("gitignore.j2", ".gitignore"),
]
SOURCE_TEMPLATES = [
    ("index.html.j2", "index.html"),
    ("src/main.jsx.j2", "src/main.jsx"),
    ("src/App.jsx.j2", "src/App.jsx"),
    ("src/styles/index.css.j2", "src/styles/index.css"),
]

GIT_WARNING = "Could not initialize git (this is okay!)"


class ProjectGenerator:
    """Deterministic project generator.

    Each step is a public coroutine so callers can run them one at a time;
    generate() runs them all in order. A failing step is reported and
    re-raised. Files already written are left in place.
    """

    def __init__(
        self,
        options: ProjectOptions,
        settings: Settings | None = None,
        reporter: StepReporter | None = None,
    ) -> None:
        self.options = options
        self.settings = settings or get_settings()
        self.reporter: StepReporter = reporter or NullReporter()
        self.manifest = ScaffoldManifest(
            project_name=options.name,
            project_path=str(options.project_path),
            options_hash=compute_options_hash(options.to_dict()),
        )
        self._env: Environment | None = None

    @property
    def env(self) -> Environment:
        """Get or create Jinja2 environment."""
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader(str(TEMPLATE_DIR)),
                autoescape=select_autoescape(["html", "xml"]),
                undefined=StrictUndefined,
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
            )
        return self._env

    @property
    def project_path(self) -> Path:
        return self.options.project_path

    async def generate(self) -> ScaffoldManifest:
        """Generate the complete project.

        Returns:
            ScaffoldManifest with every directory, file and command of the run
        """
        start_time = time.time()
        log_extra = {"project": self.options.name}
        logger.info("Generating project", extra=log_extra)

        await self.create_structure()
        await self.write_package_json()
        await self.write_config_files()
        await self.write_source_files()

        if self.options.install_deps:
            await self.install_dependencies()

        if self.options.init_git:
            await self.initialize_git()

        self.manifest.generation_time_ms = (time.time() - start_time) * 1000

        logger.info(
            f"Project generated: {self.manifest.total_files} files",
            extra={**log_extra, "duration_ms": self.manifest.generation_time_ms},
        )
        return self.manifest

    @asynccontextmanager
    async def _step(
        self,
        name: str,
        start: str,
        done: str,
        failed: str,
        spinner: str = "dots",
        color: str = "cyan",
    ) -> AsyncIterator[None]:
        self.reporter.start(start, spinner=spinner, color=color)
        try:
            yield
        except BaseException as e:
            self.reporter.fail(failed)
            logger.error(
                f"{failed}: {e}",
                extra={"project": self.options.name, "step": name},
            )
            raise
        self.reporter.succeed(done)
        logger.debug(done, extra={"project": self.options.name, "step": name})

    async def create_structure(self) -> None:
        """Create the project directory and its fixed subdirectories."""
        async with self._step(
            "structure",
            "Creating project structure...",
            "Project structure created",
            "Failed to create project structure",
        ):
            directories = list(BASE_DIRECTORIES)
            if self.options.use_router:
                directories.extend(ROUTER_DIRECTORIES)

            self.project_path.mkdir(parents=True, exist_ok=True)
            for relative in directories:
                (self.project_path / relative).mkdir(parents=True, exist_ok=True)
                self.manifest.add_directory(relative)

    async def write_package_json(self) -> None:
        async with self._step(
            "package_json",
            "Creating package.json...",
            "package.json created",
            "Failed to create package.json",
        ):
            artifact = await self._write_file(
                "package.json",
                render_package_json(self.options),
                template_source=None,
                category="manifest",
            )
            self.manifest.add_file(artifact)

    async def write_config_files(self) -> None:
        """Bundler, Tailwind, PostCSS and .gitignore."""
        async with self._step(
            "config_files",
            "Creating configuration files...",
            "Configuration files created",
            "Failed to create configuration files",
        ):
            await self._render_all(CONFIG_TEMPLATES, category="config")

    async def write_source_files(self) -> None:
        """HTML entry point, entry script, root component and stylesheet."""
        async with self._step(
            "source_files",
            "Creating source files...",
            "Source files created",
            "Failed to create source files",
        ):
            await self._render_all(SOURCE_TEMPLATES, category="source")

    async def install_dependencies(self) -> None:
        """Run `<package manager> install` inside the project."""
        async with self._step(
            "install",
            "Installing dependencies (this may take a minute)...",
            "Dependencies installed",
            "Failed to install dependencies",
            spinner="pong",
            color="magenta",
        ):
            execution = await run_command(
                install_command(self.options.package_manager),
                self.project_path,
                timeout_seconds=self.settings.install_timeout,
            )
            self.manifest.add_command(execution)
            if not execution.succeeded:
                raise CommandError(execution)

    async def initialize_git(self) -> bool:
        """git init, add, commit. Failure is only a warning.

        Returns:
            True when the initial commit was created
        """
        self.reporter.start("Initializing git repository...")

        if not GitOperations.is_available():
            return self._git_failed("git executable not found on PATH")

        git = GitOperations(self.project_path, timeout_seconds=self.settings.git_timeout)
        for operation in (git.init, git.add_all):
            result = await operation()
            if result.execution:
                self.manifest.add_command(result.execution)
            if not result.success:
                return self._git_failed(result.error or "git command failed")

        result = await git.commit(self.settings.git_commit_message)
        if result.execution:
            self.manifest.add_command(result.execution)
        if not result.success:
            return self._git_failed(result.error or "git commit failed")

        self.reporter.succeed("Git repository initialized")
        return True

    def _git_failed(self, detail: str) -> bool:
        self.reporter.warn(GIT_WARNING)
        self.manifest.add_warning(f"git: {detail}")
        logger.warning(
            f"Git initialization skipped: {detail}",
            extra={"project": self.options.name, "step": "git"},
        )
        return False

    async def _render_all(self, templates: list[tuple[str, str]], category: str) -> None:
        ctx = self.options.to_template_context()
        artifacts = await asyncio.gather(
            *[
                self._write_file(
                    output_path,
                    self.render_template(template_name, ctx),
                    template_source=template_name,
                    category=category,
                )
                for template_name, output_path in templates
            ]
        )
        for artifact in artifacts:
            self.manifest.add_file(artifact)

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a single template to a string."""
        try:
            return self.env.get_template(template_name).render(**context)
        except Exception as e:
            logger.error(f"Failed to render template {template_name}: {e}")
            raise

    async def _write_file(
        self,
        relative_path: str,
        content: str,
        template_source: str | None,
        category: str,
    ) -> FileArtifact:
        output_path = self.project_path / relative_path
        await asyncio.to_thread(_write_text, output_path, content)
        logger.debug(f"Generated: {output_path}")
        return FileArtifact.from_file(
            output_path,
            self.project_path,
            template_source,
            category,
        )


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="\n" keeps output byte-identical on Windows
    path.write_text(content, encoding="utf-8", newline="\n")


async def generate_project(
    options: ProjectOptions,
    settings: Settings | None = None,
    reporter: StepReporter | None = None,
) -> ScaffoldManifest:
    """Convenience function to generate a project."""
    generator = ProjectGenerator(options, settings=settings, reporter=reporter)
    return await generator.generate()
