"""
Logging for funkit.

The package logger only carries a NullHandler, so importing funkit never
prints anything. Applications that want the combinators' DEBUG trace call
`setup_logger()` once, which attaches a stdout handler at LOG_LEVEL.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

LOGGER_NAME = "funkit"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _resolve_level(level: str | int | None) -> int:
    """Turn a level name or number into a logging level, INFO when unknown."""
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


class StdoutHandler(logging.StreamHandler):
    """Stream handler installed by setup_logger; writes to stdout."""
    def __init__(self):
        super().__init__(sys.stdout)


def setup_logger(
    name: str = LOGGER_NAME,
    level: str | int | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to a funkit logger and set its level.

    Args:
        name: Logger name
        level: Level name or number. Falls back to the LOG_LEVEL environment
            variable; unknown names mean INFO.
        format_string: Custom format string

    Returns:
        The configured logger. Calling again does not add a second handler.
    """
    log = logging.getLogger(name)
    log.setLevel(_resolve_level(level))
    if not any(isinstance(h, StdoutHandler) for h in log.handlers):
        handler = StdoutHandler()
        handler.setFormatter(logging.Formatter(fmt=format_string or DEFAULT_FORMAT,
                                               datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)
        log.propagate = False
    return log
