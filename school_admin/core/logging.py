"""Logging configuration."""
import logging
import sys
from typing import Optional

from .config import Settings, settings as default_settings

logger = logging.getLogger(default_settings.app_name)


def setup_logging(settings: Optional[Settings] = None):
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger.debug(f"Logging configured at {settings.log_level.upper()} ({settings.environment})")
