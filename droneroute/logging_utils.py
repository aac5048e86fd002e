"""Mini README: Logging setup shared by every droneroute module.

Structure:
    * get_logger - named logger for a module, installing the console handler
      on first use.
    * configure_root_logger - attach the console handler and set the level.
    * level_for_environment - DEBUG for development runs, INFO elsewhere.

Usage:
    Each module keeps ``LOGGER = get_logger(__name__)``. The planner only
    emits DEBUG records, so search traces appear when
    ``DRONEROUTE_ENVIRONMENT=development`` and stay quiet in batch runs.
    The handler is installed once per process.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
_handler_installed = False


def level_for_environment(environment: str) -> int:
    """Map a ``DRONEROUTE_ENVIRONMENT`` value to a logging level."""

    return logging.DEBUG if environment.strip().lower() in {"development", "dev"} else logging.INFO


def configure_root_logger(level: int = logging.INFO) -> None:
    """Install the droneroute console handler on the root logger.

    Later calls are ignored; callers that need a different level after start
    up set it on the root logger directly.
    """

    global _handler_installed
    if _handler_installed:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler_installed = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name``."""

    configure_root_logger()
    return logging.getLogger(name)
