"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow optional verbose mode for progress messages.

Inputs/Outputs:
    - Inputs: module name and verbosity settings.
    - Outputs: configured `logging.Logger` instances.

Public contracts:
    - `get_logger(name)`: Return a logger below the ``fakedata`` namespace.
    - `configure_logging(verbose)`: Attach a single stderr handler.

Notes/Edge cases:
    - Logging configuration is idempotent; calling `configure_logging` again
      replaces the handler installed by a previous call so the current
      ``sys.stderr`` is always used.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "fakedata"
_HANDLER_NAME = "fakedata-stderr"
_FORMAT = "%(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install the package stderr handler and set the verbosity level."""

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
