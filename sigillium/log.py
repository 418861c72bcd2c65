"""Logging setup for the command-line front end."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

__all__ = ["configure_logging"]


def configure_logging(level: Union[int, str] = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach one stream handler to the ``sigillium`` logger. Calling it again
    replaces the handler instead of stacking another one.

    Nothing in the package logs phrases, seeds or secret keys.
    """
    logger = logging.getLogger("sigillium")
    for handler in list(logger.handlers):
        if getattr(handler, "_sigillium", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._sigillium = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
