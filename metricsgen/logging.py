"""Logging setup for generator runs invoked by a host build."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "metricsgen"
_CONSOLE_FORMAT = "[metricsgen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger under the metricsgen hierarchy."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send generator logs to stderr and, when ``log_file`` is given, to that file.

    stdout is left alone: the host build reads ``cargo:`` directives from it.
    Handlers from an earlier call are closed and replaced.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), _CONSOLE_FORMAT, level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), _FILE_FORMAT, level)

    return logger


__all__ = ["configure_logging", "get_logger"]
