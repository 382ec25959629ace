"""Logging utilities.

We use Python's standard ``logging`` module. Library code logs through
``logger`` (or a child from ``get_logger``) and never installs handlers on its
own; applications call ``configure_logging`` once at startup.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

logger = logging.getLogger("eventcast")


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger.

    Names outside the ``eventcast`` namespace are nested under it so a single
    ``configure_logging`` call controls every eventcast logger.
    """
    if name == "eventcast" or name.startswith("eventcast."):
        return logging.getLogger(name)
    return logger.getChild(name)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just update the level.

    Args:
        level: Level name; defaults to ``settings.LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    if level is None:
        from eventcast.core.config import settings

        level = settings.LOG_LEVEL

    logger.setLevel(level.upper())

    if not any(getattr(h, "_eventcast_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._eventcast_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
