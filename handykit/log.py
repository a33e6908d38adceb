"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; nothing is configured on
import. Applications that want handykit's output call configure_logging().
"""

import logging

from .config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the configured level and format.

    Args:
        level: Optional level name overriding settings.log_level
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format
    )
