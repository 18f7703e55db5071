"""Logging setup for iodocs-generator using Loguru.

Library logging is disabled until ``configure_logging`` is called, so
importing the engine never writes to a host application's stderr.

>>> from iodocs_generator.logging import configure_logging, get_logger
>>> configure_logging(level="DEBUG")
>>> logger = get_logger(__name__)
>>> logger.debug("Dropped parameter")
"""

import sys
from contextlib import suppress
from functools import lru_cache
from typing import Literal

from loguru import logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_PACKAGE = "iodocs_generator"
_CURRENT_LEVEL: str | None = None
_HANDLER_IDS: list[int] = []

logger.disable(_PACKAGE)


def configure_logging(level: LogLevel = "WARNING", force_reconfigure: bool = False) -> None:
    """Route the package's log records to stderr at ``level``.

    Idempotent: calling it again with the same level leaves handlers alone.
    """
    global _CURRENT_LEVEL

    if not force_reconfigure and level == _CURRENT_LEVEL:
        return

    # Loguru's default handler logs everything at DEBUG
    with suppress(ValueError):
        logger.remove(0)
    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    handler_id = logger.add(
        sink=sys.stderr,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} {level: <8} | {name} | {message}",
        colorize=False,
    )
    _HANDLER_IDS.append(handler_id)
    logger.enable(_PACKAGE)
    _CURRENT_LEVEL = level


@lru_cache(maxsize=64)
def get_logger(name: str):
    """Logger bound with the calling module's name (cached)."""
    return logger.bind(module=name)
