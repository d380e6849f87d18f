"""External commands: package manager install and git."""

import asyncio
import logging
import shutil
import subprocess
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from create_joji_app.errors import CommandNotFoundError
from create_joji_app.generator.manifest import CommandExecution

logger = logging.getLogger(__name__)


def resolve_executable(name: str) -> str:
    """Find an executable on PATH (picks up npm.cmd and friends on Windows)."""
    resolved = shutil.which(name)
    if resolved is None:
        raise CommandNotFoundError(name)
    return resolved


async def run_command(
    args: Sequence[str],
    working_dir: Path,
    timeout_seconds: int = 300,
) -> CommandExecution:
    """Run a command without a shell and record the outcome.

    Raises CommandNotFoundError if the executable is missing. A timeout
    kills the process and is reported as exit code -1.
    """
    if not args:
        raise ValueError("run_command needs at least an executable")

    executable = resolve_executable(args[0])
    command_str = subprocess.list2cmdline(list(args))
    start_time = time.time()

    logger.debug("Running command", extra={"command": command_str})

    process = await asyncio.create_subprocess_exec(
        executable,
        *args[1:],
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=working_dir,
    )

    try:
        stdout, stderr = await asyncio.wait_for(
            process.communicate(),
            timeout=timeout_seconds,
        )
        exit_code = process.returncode or 0
        out_text = stdout.decode("utf-8", errors="replace")
        err_text = stderr.decode("utf-8", errors="replace")
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        exit_code = -1
        out_text = ""
        err_text = f"Command timed out after {timeout_seconds} seconds"

    execution = CommandExecution(
        command=command_str,
        working_dir=str(working_dir),
        exit_code=exit_code,
        stdout=out_text,
        stderr=err_text,
        duration_ms=(time.time() - start_time) * 1000,
    )

    logger.debug(
        "Command finished",
        extra={
            "command": command_str,
            "exit_code": exit_code,
            "duration_ms": execution.duration_ms,
        },
    )
    return execution


def install_command(package_manager: str) -> list[str]:
    return [package_manager, "install"]


@dataclass
class GitResult:
    """Result of a git operation."""
    success: bool
    output: str
    error: str | None = None
    execution: CommandExecution | None = None


class GitOperations:
    """The three git commands a fresh project needs."""

    def __init__(self, workdir: str | Path, timeout_seconds: int = 60) -> None:
        self.workdir = Path(workdir)
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def is_available() -> bool:
        """Whether a git executable is on PATH."""
        return shutil.which("git") is not None

    async def _run_command(self, *args: str) -> GitResult:
        """Run a git command."""
        try:
            execution = await run_command(
                ["git", *args],
                self.workdir,
                timeout_seconds=self.timeout_seconds,
            )
        except (CommandNotFoundError, OSError) as e:
            logger.warning(f"Git command failed: {e}")
            return GitResult(success=False, output="", error=str(e))

        if execution.succeeded:
            return GitResult(
                success=True,
                output=execution.stdout.strip(),
                execution=execution,
            )
        return GitResult(
            success=False,
            output=execution.stdout.strip(),
            error=execution.stderr.strip() or execution.stdout.strip(),
            execution=execution,
        )

    async def init(self) -> GitResult:
        """Initialize a git repository."""
        return await self._run_command("init")

    async def add_all(self) -> GitResult:
        """Stage everything in the working tree."""
        return await self._run_command("add", ".")

    async def commit(self, message: str) -> GitResult:
        return await self._run_command("commit", "-m", message)
