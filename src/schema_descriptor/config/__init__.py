"""Configuration management for schema-descriptor.

Usage:
    >>> from schema_descriptor.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from schema_descriptor.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
