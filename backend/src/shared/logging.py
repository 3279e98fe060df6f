"""Logging configuration for the model mirror."""

import logging
import sys
from typing import TextIO

from shared.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(stream: TextIO | None = None) -> None:
    """Configure process-wide logging.

    Level comes from settings.LOG_LEVEL; unknown names fall back to INFO.
    Output goes to ``stream``, stdout when omitted.
    """
    level_name = get_settings().LOG_LEVEL.upper()
    level = logging.getLevelNamesMapping().get(level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
