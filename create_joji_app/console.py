"""Terminal output: banner colors and step spinners."""

from rich.console import Console
from rich.status import Status
from rich.text import Text

RAINBOW_COLORS = ("red", "yellow", "green", "cyan", "blue", "magenta")


def rainbow(text: str, style: str = "") -> Text:
    """Color each character in turn; whitespace stays plain but still uses up a color."""
    result = Text(style=style)
    for i, char in enumerate(text):
        if char in (" ", "\n", "\t"):
            result.append(char)
        else:
            result.append(char, style=RAINBOW_COLORS[i % len(RAINBOW_COLORS)])
    return result


class ConsoleReporter:
    """Shows a spinner while a step runs and a status line when it ends."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._status: Status | None = None

    def start(self, message: str, spinner: str = "dots", color: str = "cyan") -> None:
        self.stop()
        self._status = self.console.status(
            Text(message, style=color),
            spinner=spinner,
            spinner_style=color,
        )
        self._status.start()

    def succeed(self, message: str) -> None:
        self.stop()
        self.console.print(f"[green]✔[/green] {message}")

    def fail(self, message: str) -> None:
        self.stop()
        self.console.print(f"[red]✖[/red] {message}")

    def warn(self, message: str) -> None:
        self.stop()
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def stop(self) -> None:
        """Clear a running spinner without printing a status line."""
        if self._status is not None:
            self._status.stop()
            self._status = None
