"""
Logging setup for MockMate.

Modules log through ``logging.getLogger(__name__)``; the host process calls
``configure_logging`` once at startup.
"""

import logging

from src.config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()

    level = logging.DEBUG if settings.debug else settings.log_level.upper()

    logging.basicConfig(
        level=level,
        format=settings.log_format,
    )
    logging.getLogger(__name__).debug(
        f"Logging configured for {settings.app_name} at level {level}"
    )
