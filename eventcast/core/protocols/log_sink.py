"""LogSink protocol for adapter diagnostics.

Adapters never talk to a global logger directly when reporting a failed
delivery. They receive a sink at construction and write leveled text lines
to it. ``logging.Logger`` already satisfies this protocol, so the default
sink is just a thin wrapper around the package logger.

Usage:
    sink = FakeLogSink()
    adapter = PlausibleAdapter(..., log_sink=sink)
    adapter.create_event(event)
    assert sink.has_error("Plausible Error")
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Accepts leveled, pre-formatted text lines."""

    def debug(self, message: str) -> None:
        """Write a debug line."""
        ...

    def info(self, message: str) -> None:
        """Write an info line."""
        ...

    def warning(self, message: str) -> None:
        """Write a warning line."""
        ...

    def error(self, message: str) -> None:
        """Write an error line.

        Implementations must not raise; the error bridge treats every write
        as best-effort.
        """
        ...
