"""Progress reporting for generator steps.

The generator talks to a reporter; the CLI passes one that drives a
spinner, library callers get the silent default.
"""

from typing import Protocol


class StepReporter(Protocol):
    """Receives start / finish events for each generator step."""

    def start(self, message: str, spinner: str = "dots", color: str = "cyan") -> None: ...

    def succeed(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def stop(self) -> None: ...


class NullReporter:
    """Reporter that ignores every event."""

    def start(self, message: str, spinner: str = "dots", color: str = "cyan") -> None:
        pass

    def succeed(self, message: str) -> None:
        pass

    def fail(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def stop(self) -> None:
        pass

