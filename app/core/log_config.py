# app/core/log_config.py
import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = settings.log_level) -> logging.Logger:
    """
    Configure root logging on stdout and return the application logger.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)
    return logging.getLogger("app")


logger = setup_logging()
