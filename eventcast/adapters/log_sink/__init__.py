"""Log sink adapters."""

from eventcast.adapters.log_sink.fake import FakeLogSink
from eventcast.adapters.log_sink.logger import LoggerLogSink

__all__ = ["FakeLogSink", "LoggerLogSink"]
