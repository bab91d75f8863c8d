"""Logging setup for the docrender command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "docrender"

_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route docrender log records to stderr and an optional file.

    The requested level applies to the ``docrender`` package logger. Other
    libraries (bs4, Jinja2, Pygments, bleach) stay at WARNING unless
    ``trace_mode`` is set, in which case they log at the requested level too.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        File that receives a copy of the log output.
    trace_mode : bool, default False
        Add timestamps and logger names and lift the WARNING floor on
        third-party loggers.

    Returns
    -------
    logging.Logger
        The ``docrender`` package logger.

    """
    level = _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level if trace_mode else max(level, logging.WARNING))
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _CONSOLE_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if len(handlers) > 1:
        package_logger.info("Logging to file: %s", log_file)

    return package_logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
