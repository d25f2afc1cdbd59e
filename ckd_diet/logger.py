# -*- coding: utf-8 -*-
"""Logging configuration."""

from __future__ import annotations

import logging
import sys

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the package logger once."""
    logger = logging.getLogger("ckd_diet")
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(resolved)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(resolved)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger
