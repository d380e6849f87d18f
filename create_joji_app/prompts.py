"""Interactive questions that produce ProjectOptions.

Order matters: location first (the name check needs it), then the
name, then the two yes/no questions.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_joji_app.config import Settings
from create_joji_app.errors import (
    InvalidProjectNameError,
    LocationNotFoundError,
    ProjectExistsError,
)
from create_joji_app.generator.options import (
    ProjectOptions,
    check_project_available,
    validate_location,
    validate_project_name,
)

logger = logging.getLogger(__name__)


class ProjectPrompter:
    """Asks the questions and re-asks until each answer is usable."""

    def __init__(self, console: Console, settings: Settings) -> None:
        self.console = console
        self.settings = settings

    def _ask(self, question: str, default: str) -> str:
        answer = Prompt.ask(question, console=self.console, default=default)
        return answer or default

    def ask_location(self, default: str | None = None) -> Path:
        """Where the project directory will be created; must already exist."""
        default = default or str(self.settings.default_location)
        while True:
            raw = self._ask("Where should we create this project?", default).strip() or default
            try:
                return validate_location(raw)
            except LocationNotFoundError as e:
                self.console.print(f"[red]>> {e}[/red]")

    def ask_project_name(self, location: Path, default: str | None = None) -> str:
        """Ask until the name is valid and nothing exists at location/name."""
        default = default or self.settings.default_project_name
        while True:
            name = self._ask("What is your project name?", default)
            try:
                validate_project_name(name)
                check_project_available(location, name)
            except InvalidProjectNameError as e:
                self.console.print(f"[red]>> {e}[/red]")
                continue
            except ProjectExistsError as e:
                logger.debug(f"Project path taken: {e.path}")
                self.console.print(f"\n[red]❌ {e}[/red]\n")
                continue
            return name

    def ask_use_router(self) -> bool:
        return Confirm.ask("Include React Router?", console=self.console, default=True)

    def ask_install_now(self) -> bool:
        return Confirm.ask("Install dependencies now?", console=self.console, default=True)

    def collect_options(self, project_name: str | None = None) -> ProjectOptions:
        """Run every question and build the options.

        Args:
            project_name: Suggested name (the CLI's positional argument)
        """
        location = self.ask_location()
        name = self.ask_project_name(location, default=project_name)
        use_router = self.ask_use_router()
        install_deps = self.ask_install_now()

        return ProjectOptions(
            name=name,
            location=location,
            use_router=use_router,
            install_deps=install_deps,
            init_git=self.settings.git_init,
            package_manager=self.settings.package_manager,
        )
