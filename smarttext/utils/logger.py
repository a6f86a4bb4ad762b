from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Marks handlers installed here so a later call can replace them.
_HANDLER_TAG = "_smarttext_handler"


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(
    log_file: str = "", log_level: str = "INFO", verbose: bool = False
) -> logging.Logger:
    """Configure the ``smarttext`` logger.

    Warnings go to stderr (everything, with *verbose*); *log_file*, when
    set, receives records at *log_level*.  Calling again replaces the
    handlers from the previous call and leaves foreign handlers alone.
    """
    logger = logging.getLogger("smarttext")
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    stderr_handler = _tagged(logging.StreamHandler(sys.stderr))
    stderr_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(stderr_handler)

    if log_file:
        expanded = Path(os.path.expanduser(log_file))
        expanded.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _tagged(logging.FileHandler(expanded, encoding="utf-8"))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger
