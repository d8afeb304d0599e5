"""Minimal logging helpers for the project."""

from __future__ import annotations

import logging
from typing import IO, Optional

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def get_logger(
    name: str = "ringcalc",
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Return a configured :class:`logging.Logger` instance.

    Only one ``StreamHandler`` is attached per logger, so repeated calls
    merely adjust the level.  ``level`` may be given as a name such as
    ``"DEBUG"``.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown logging level: {level!r}")
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
