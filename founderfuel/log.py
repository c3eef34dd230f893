"""Logging setup for the FounderFuel backend.

Modules log through ``logging.getLogger(__name__)``; every logger under the
``founderfuel`` namespace inherits the handler installed here.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Install a stdout handler on the ``founderfuel`` logger and return it.

    Safe to call more than once: the handler is only added the first time,
    later calls just adjust the level.
    """
    logger = logging.getLogger("founderfuel")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)

    return logger
