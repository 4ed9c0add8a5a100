"""
Logging Setup

Applies the same format to every logger in the process. Modules log through
``logging.getLogger(__name__)``.
"""

import logging

from authkeys.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging.

    Args:
        level: Log level to use. Defaults to the configured settings level.
    """
    if level is None:
        level = get_settings().effective_log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("authkeys").setLevel(level)
