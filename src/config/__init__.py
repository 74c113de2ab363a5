"""
Configuration for MockMate

Contains:
- Settings: environment-driven application settings
- Logging: root logger configuration
"""

from src.config.settings import Settings, get_settings
from src.config.logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
]
