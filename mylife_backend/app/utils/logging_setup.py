# mylife_backend/app/utils/logging_setup.py
from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Attach a single stdout handler to the "mylife" logger.
    Safe to call more than once (e.g. app reloads); handlers are not duplicated.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logger = logging.getLogger("mylife")
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    for h in logger.handlers:
        h.setLevel(numeric_level)

    logger.debug("logging initialized at %s", log_level)
    return logger
