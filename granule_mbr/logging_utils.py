"""Mini README: Logging helpers shared by the bounding engine.

Structure:
    * configure_root_logger - one-time root logger setup.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

Usage:
    The core is a pure computation library, so logging is limited to DEBUG
    traces of intermediate boxes and WARNING records for rejected input. The
    root level is read from ``MbrSettings.log_level`` unless a level is passed
    explicitly.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Attach a stream handler to the root logger exactly once."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    if level is None:
        from .configuration import get_settings

        level = get_settings().log_level

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
