"""Logger factory for modules that may run outside the FastAPI app (client, store)."""

import logging
from typing import Optional

from .. import settings

PACKAGE_LOGGER = "modelhub"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``name``'s logger, giving it its own stream handler the first time.

    The handler is attached once per logger and propagation is switched off,
    so records are not printed twice when the app also configures the root
    logger.
    """
    logger = logging.getLogger(name or PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(settings.LOG_LEVEL)
    return logger
