#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/utils/decorators.py
"""Timing helpers for DEBUG logging."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from contextlib import contextmanager


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (html)")

    Examples
    --------
        >>> with debug_timer(logger, "Footnote collection"):
        ...     footnotes = collect_footnotes(document)
        ... # Logs: "Footnote collection completed in 0.01s" at DEBUG level

    Notes
    -----
    Time is only measured when the logger has DEBUG enabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
