"""Verbose logging configuration for CLI debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "assertkit",
) -> logging.Logger:
    """
    Configure and return a logger for debug output.

    Writes to debug_file when given, and to stderr when verbose=True.

    Args:
        debug_file: Path to debug log file (created with its parent directories)
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance. Must not already have handlers.

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: If a logger with this name was already configured.
    """
    logger = logging.getLogger(logger_name)

    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached. "
            "Use a unique logger name per invocation."
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger


def close_logger(logger: logging.Logger) -> None:
    """Detach and close the handlers added by :func:`setup_logger`."""
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()
