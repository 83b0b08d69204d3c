# /app/core/logging_config.py

import logging

from . import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = None) -> None:
    """Attaches a single console handler to the `app` logger hierarchy."""
    app_logger = logging.getLogger("app")
    app_logger.setLevel(level or config.LOG_LEVEL)
    app_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    app_logger.addHandler(console_handler)
    app_logger.propagate = False
