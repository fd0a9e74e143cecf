# ecorevive/utils/logging.py
import logging
import sys

from ecorevive.utils.settings import LOG_LEVEL

logger = logging.getLogger("ecorevive")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger podpiety pod wspolny handler 'ecorevive'."""
    if not name:
        return logger
    if name.startswith("ecorevive"):
        return logging.getLogger(name)
    return logging.getLogger(f"ecorevive.{name}")
