"""Logging configuration for the API."""
import logging

from flashdrill.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure the root logger from settings.log_level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())

    # uvicorn installs its own handlers; only add ours when nothing is configured
    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
