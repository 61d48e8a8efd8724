"""Logging utilities for the fx_cur package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "fx_cur") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter.

    The CLI prints its result on stdout, so records go to stderr and only
    warnings are shown until :func:`set_level` is called. The environment is
    not consulted here; the CLI applies ``FX_CUR_LOG_LEVEL`` once its settings
    have been validated.
    """
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        _LOGGER = logging.getLogger("fx_cur")
    return logging.getLogger(name)


def set_level(level: int | str) -> None:
    """Change the level of every ``fx_cur`` logger at once."""

    get_logger().setLevel(level.upper() if isinstance(level, str) else level)
