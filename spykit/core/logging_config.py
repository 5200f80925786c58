import logging
from typing import Optional

from spykit.core.config import SpyKitSettings, settings as default_settings

LOGGER_NAME = "spykit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[SpyKitSettings] = None) -> logging.Logger:
    """Set the package logger level from settings and attach a single stream handler."""
    active = settings or default_settings
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(active.LOG_LEVEL.value)

    if not any(getattr(h, "_spykit_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._spykit_handler = True
        logger.addHandler(handler)

    return logger
