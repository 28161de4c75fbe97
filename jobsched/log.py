"""Logging setup.

The terminal belongs to Textual while the app runs, so records go to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "jobsched-file"


def setup_logging(level: str | int, path: Path) -> logging.Handler:
    """Attach a single file handler to the ``jobsched`` logger.

    Calling it again replaces the previous handler, so the level and path
    can be changed after the CLI has parsed its options.
    """
    logger = logging.getLogger("jobsched")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
