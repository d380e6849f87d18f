"""Pytest fixtures for create-joji-app tests."""

import io
import shutil
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from create_joji_app.config import Settings


# Register the asyncio marker so strict mode does not warn about it
def pytest_configure(config):
    """Configure pytest-asyncio mode."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


class RecordingReporter:
    """Reporter that keeps (event, message) pairs in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def start(self, message: str, spinner: str = "dots", color: str = "cyan") -> None:
        self.events.append(("start", message))

    def succeed(self, message: str) -> None:
        self.events.append(("succeed", message))

    def fail(self, message: str) -> None:
        self.events.append(("fail", message))

    def warn(self, message: str) -> None:
        self.events.append(("warn", message))

    def stop(self) -> None:
        self.events.append(("stop", ""))


@pytest.fixture
def temp_workspace():
    """Create a temporary workspace for tests."""
    workspace = tempfile.mkdtemp()
    yield Path(workspace)
    shutil.rmtree(workspace, ignore_errors=True)


@pytest.fixture
def test_settings(temp_workspace):
    """Settings pointing at the temp workspace, git disabled."""
    return Settings(
        default_location=temp_workspace,
        git_init=False,
        _env_file=None,
    )


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def console():
    """Non-terminal console that writes into a buffer."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)
