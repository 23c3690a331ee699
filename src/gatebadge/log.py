"""Logging setup for gatebadge.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by applications, for example the command line.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler


LOG_LEVEL_ENV = "GATEBADGE_LOG_LEVEL"

_NAME_TO_LEVEL = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors GATEBADGE_LOG_LEVEL (e.g., "DEBUG", "info", numeric "10").
    """
    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return _NAME_TO_LEVEL.get(value)


def setup_logging(level: int | None = None) -> None:
    """Send gatebadge log records to stderr through a rich handler.

    If ``level`` is None, GATEBADGE_LOG_LEVEL is consulted, then WARNING.
    Calling this again replaces the handler installed by a previous call.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    logger = logging.getLogger("gatebadge")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=level <= logging.DEBUG,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
