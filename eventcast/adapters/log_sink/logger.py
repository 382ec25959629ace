"""LogSink backed by a standard library logger."""

import logging
from typing import Optional

from eventcast.core.logging import get_logger


class LoggerLogSink:
    """Writes sink lines to a ``logging.Logger``.

    Defaults to the ``eventcast.adapters`` logger so output follows whatever
    ``configure_logging`` (or the host application) set up.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        """Wrap the given logger, or the adapters logger if omitted."""
        self._logger = logger or get_logger("eventcast.adapters")

    @property
    def logger(self) -> logging.Logger:
        """The wrapped logger."""
        return self._logger

    def debug(self, message: str) -> None:
        """Write a debug line."""
        self._logger.debug(message)

    def info(self, message: str) -> None:
        """Write an info line."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Write a warning line."""
        self._logger.warning(message)

    def error(self, message: str) -> None:
        """Write an error line."""
        self._logger.error(message)
