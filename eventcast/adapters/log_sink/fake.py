"""Fake log sink for testing."""

from dataclasses import dataclass


@dataclass
class LoggedLine:
    """Single recorded sink write."""

    level: str
    message: str


class FakeLogSink:
    """In-memory test double for LogSink.

    Records every line for assertions.

    Usage:
        sink = FakeLogSink()
        adapter = GoogleAnalyticsAdapter("UA-1", "cid", log_sink=sink)
        adapter.create_event(event)
        assert sink.has_error("Type: HttpError")
    """

    def __init__(self) -> None:
        """Initialize with no recorded lines."""
        self.lines: list[LoggedLine] = []

    def debug(self, message: str) -> None:
        """Record a debug line."""
        self.lines.append(LoggedLine("debug", message))

    def info(self, message: str) -> None:
        """Record an info line."""
        self.lines.append(LoggedLine("info", message))

    def warning(self, message: str) -> None:
        """Record a warning line."""
        self.lines.append(LoggedLine("warning", message))

    def error(self, message: str) -> None:
        """Record an error line."""
        self.lines.append(LoggedLine("error", message))

    # Test helpers

    @property
    def errors(self) -> list[str]:
        """Messages of all error lines, in order."""
        return [line.message for line in self.lines if line.level == "error"]

    def has_error(self, fragment: str) -> bool:
        """Return True if any error line contains ``fragment``."""
        return any(fragment in message for message in self.errors)

    def clear(self) -> None:
        """Reset recorded lines."""
        self.lines.clear()
