# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Logging for article markup.

All modules log through the helpers below so messages carry the
``[markup]`` prefix. Package records are disabled when this module is
imported; call :func:`setup_logger` to see them.

Example:
    >>> from article_markup.logger import setup_logger
    >>> setup_logger(level='DEBUG')
"""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

CONTEXT_PREFIX = "[markup]"
PACKAGE_NAME = "article_markup"

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

logger.disable(PACKAGE_NAME)


def setup_logger(level: str = "INFO", sink: Any = None) -> int:
    """Enable package logging and route it to sink.

    Every previously added loguru handler, the default stderr one
    included, is removed first, so level applies to all output.

    Args:
        level: Minimum level to emit.
        sink: Any loguru sink (stream, path, callable). Defaults to stderr.

    Returns:
        The loguru handler id, usable with ``logger.remove()``.
    """
    # Remove default logger
    logger.remove()
    logger.enable(PACKAGE_NAME)
    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        format=_FORMAT,
        level=level,
        filter=PACKAGE_NAME,
    )
    _log_info(f"Logging enabled at level {level}")
    return handler_id


def _log_info(message: str) -> None:
    """Log info message with [markup] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [markup] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [markup] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
