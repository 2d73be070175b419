"""Configuration management for opal-downloader.

Usage:
    >>> from opal_downloader.config import get_settings
    >>> settings = get_settings()
    >>> settings.timezone
    'Australia/Sydney'
"""

from opal_downloader.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
