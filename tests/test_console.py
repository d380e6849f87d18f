"""Tests for terminal output helpers."""

import asyncio
import io

import pytest
from rich.console import Console
from rich.text import Span

from create_joji_app.console import ConsoleReporter, rainbow
from create_joji_app.generator import ProjectGenerator, ProjectOptions
from create_joji_app.generator import generator as generator_module


class TestRainbow:
    def test_colors_cycle(self):
        text = rainbow("abcdefg")
        assert text.plain == "abcdefg"
        assert [span.style for span in text.spans] == [
            "red", "yellow", "green", "cyan", "blue", "magenta", "red",
        ]

    def test_whitespace_plain_but_counted(self):
        text = rainbow("ab c")
        assert text.spans == [
            Span(0, 1, "red"),
            Span(1, 2, "yellow"),
            Span(3, 4, "cyan"),
        ]

    def test_base_style(self):
        assert str(rainbow("hi", style="bold italic").style) == "bold italic"


class TestConsoleReporter:
    def test_status_lines(self, console):
        reporter = ConsoleReporter(console)
        reporter.start("Working...")
        reporter.succeed("Done")
        reporter.start("Installing...", spinner="pong", color="magenta")
        reporter.fail("Broke")
        reporter.warn("Careful")

        output = console.file.getvalue()
        assert "✔ Done" in output
        assert "✖ Broke" in output
        assert "⚠ Careful" in output
        assert reporter._status is None

    def test_stop_clears_live_spinner(self):
        console = Console(file=io.StringIO(), force_terminal=True, width=80)
        reporter = ConsoleReporter(console)
        reporter.start("Installing...", spinner="pong", color="magenta")

        reporter.stop()

        assert reporter._status is None
        reporter.stop()  # already stopped

    @pytest.mark.asyncio
    async def test_cancelled_step_stops_spinner(self, temp_workspace, test_settings, monkeypatch):
        async def _cancelled(args, working_dir, timeout_seconds=300):
            raise asyncio.CancelledError

        monkeypatch.setattr(generator_module, "run_command", _cancelled)
        console = Console(file=io.StringIO(), force_terminal=True, width=80)
        reporter = ConsoleReporter(console)
        options = ProjectOptions(name="spin", location=temp_workspace, install_deps=True, init_git=False)

        with pytest.raises(asyncio.CancelledError):
            await ProjectGenerator(
                options, settings=test_settings, reporter=reporter
            ).install_dependencies()

        assert reporter._status is None
        assert "Failed to install dependencies" in console.file.getvalue()
