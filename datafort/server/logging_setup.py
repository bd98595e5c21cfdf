from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(process)d [%(name)s] %(message)s"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure the root logger with a single stderr handler and return it.

    Any previously installed root handlers are removed, so calling this twice does not
    duplicate output.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["LOG_FORMAT", "setup_logging"]
