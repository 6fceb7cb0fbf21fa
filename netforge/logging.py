import logging
from typing import Optional

LOGGER_NAME = "netforge"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger (or a child of it).

    A NullHandler is attached so the library stays silent unless the
    application configures logging.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    if name:
        return logger.getChild(name)
    return logger
