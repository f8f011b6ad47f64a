"""Logging setup shared by the command line and the solvers."""

import logging
import sys

from mathpuzzles.config import load_settings

LOGGER_NAME = "mathpuzzles"
"""Parent of every logger in the package."""


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Send the package's diagnostics to stderr.

    A handler is only installed once; repeated calls change the level and point
    the handler at the current `sys.stderr`.  Invalid settings are reported as a
    warning and replaced by the defaults.

    Args:
        level: Logging level.  Defaults to the `log_level` setting.

    Returns:
        The package logger.
    """
    settings, error = load_settings()
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            # Not setStream: it flushes the old stream, which may already be closed.
            handler.stream = sys.stderr
            handler.setFormatter(logging.Formatter(settings.log_format))

    logger.setLevel(level if level is not None else settings.log_level)
    if error is not None:
        logger.warning(
            "Ignoring invalid logging settings: %s",
            "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in error.errors()),
        )
    return logger
