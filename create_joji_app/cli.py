#!/usr/bin/env python3
"""create-joji-app: scaffold a React + Vite + Tailwind project.

Usage:
    create-joji-app
    create-joji-app my-app
    create-joji-app my-app --manifest ./my-app-run.json
    python -m create_joji_app --debug
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from create_joji_app import __version__
from create_joji_app.config import Settings, get_config_dict, get_settings
from create_joji_app.console import ConsoleReporter, rainbow
from create_joji_app.errors import ScaffoldError
from create_joji_app.generator import ProjectGenerator, ProjectOptions, ScaffoldManifest
from create_joji_app.logging_config import setup_logging
from create_joji_app.prompts import ProjectPrompter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-joji-app",
        description="Scaffold a React + Vite + Tailwind project",
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        metavar="project-name",
        help="Name of your project",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        help="Write a JSON record of created files and commands to this path",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def print_next_steps(console: Console, options: ProjectOptions) -> None:
    """Success banner and the commands to run next."""
    pm = options.package_manager
    console.print("\n[bold green]✨ Success! Your project is ready![/bold green]\n")
    console.print("[cyan]To get started:[/cyan]\n")
    console.print(f"  cd {options.name}", style="white", highlight=False)
    if not options.install_deps:
        console.print(f"  {pm} install", style="white", highlight=False)
    console.print(f"  {pm} run dev\n", style="white", highlight=False)
    console.print(rainbow("Happy coding!!!", style="bold italic"))


async def scaffold(
    options: ProjectOptions, settings: Settings, reporter: ConsoleReporter
) -> ScaffoldManifest:
    generator = ProjectGenerator(options, settings=settings, reporter=reporter)
    return await generator.generate()


def run(
    project_name: str | None,
    settings: Settings,
    console: Console,
    manifest_path: Path | None = None,
) -> int:
    """Ask the questions, generate the project and print next steps."""
    console.print(rainbow("Welcome to Joji App Creator!", style="bold italic"))

    prompter = ProjectPrompter(console, settings)
    try:
        options = prompter.collect_options(project_name)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Aborted.[/yellow]")
        return EXIT_INTERRUPTED

    logger.debug(f"Options: {options.to_dict()}", extra={"project": options.name})

    reporter = ConsoleReporter(console)
    try:
        manifest = asyncio.run(scaffold(options, settings, reporter))
    except KeyboardInterrupt:
        reporter.stop()
        console.print("\n[yellow]Aborted.[/yellow]")
        return EXIT_INTERRUPTED
    except (ScaffoldError, OSError) as e:
        console.print(Text.assemble("\n", ("Error:", "red"), " ", str(e)))
        return EXIT_FAILED

    if manifest_path is not None:
        try:
            manifest.save(manifest_path)
            logger.info(f"Run record written to {manifest_path}")
        except OSError as e:
            logger.warning(f"Could not write run record to {manifest_path}: {e}")
            console.print(
                Text.assemble(("Warning:", "yellow"), f" could not write run record: {e}")
            )

    print_next_steps(console, options)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        Console(stderr=True).print(Text.assemble(("Invalid configuration:", "red"), "\n", str(e)))
        return EXIT_FAILED

    setup_logging(
        debug=args.debug or settings.debug,
        json_logs=args.json_logs or settings.json_logs,
    )
    logger.debug(f"Settings: {get_config_dict()}")

    console = Console()
    return run(args.project_name, settings, console, manifest_path=args.manifest)


if __name__ == "__main__":
    sys.exit(main())
