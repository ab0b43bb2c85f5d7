"""Logging bootstrap for scripts. Library modules only call `logging.getLogger`."""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach one stderr handler to the package logger (idempotent)."""
    logger = logging.getLogger("opportunity_radar")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(getattr(h, "_radar_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._radar_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
