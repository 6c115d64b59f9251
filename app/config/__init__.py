"""
Configuration package for the Simile Board service.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    SecuritySettings,
    settings,
    get_settings,
    load_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "SecuritySettings",
    "settings",
    "get_settings",
    "load_settings",
]
