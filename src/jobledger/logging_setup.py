"""Centralized logging configuration for the ``jobledger`` package.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached once by ``configure_logging`` from an entry point such as the CLI.
"""

from __future__ import annotations

import logging
import os
from typing import IO

_PKG_LOGGER_NAME = "jobledger"
_CONFIGURED = False

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv("JOBLEDGER_LOG_LEVEL")
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Attach a single ``StreamHandler`` to the package logger.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level name. If ``None``, the
        ``JOBLEDGER_LOG_LEVEL`` environment variable is used, otherwise
        ``logging.WARNING``.
    fmt:
        Optional format string, defaults to ``DEFAULT_FORMAT``.
    stream:
        Output stream for the handler, ``sys.stderr`` when omitted.

    Later calls only adjust the level.
    """
    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    numeric_level = _parse_level(level)

    if _CONFIGURED:
        logger.setLevel(numeric_level)
        return

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)

    _CONFIGURED = True
