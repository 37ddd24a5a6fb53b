# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging configuration for EER Studio."""

import logging
import sys

# ###############
# Public Interface
# ###############

ROOT_LOGGER_NAME = "eerstudio"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", format_string: str | None = None) -> None:
    """Configure the ``eerstudio`` logger with a single stderr handler.

    Calling it again replaces the previous handler, so the CLI can apply
    ``--log-level`` after the library has logged with defaults.

    Raises:
        ValueError: If *level* is not a known logging level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger below ``eerstudio`` for a module.

    Args:
        name: Logger name, typically ``__name__``.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
