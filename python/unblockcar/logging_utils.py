"""Process-wide logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import os


def setup_script_logger(name: str, level: str | None = None) -> logging.Logger:
    """Configure the root logger and return the logger called *name*.

    *level* wins over the ``LOGLEVEL`` environment variable; the default is
    ``WARNING`` so solver summaries only show up when asked for.
    """
    loglevel = (level or os.getenv("LOGLEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, loglevel, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger(name)
