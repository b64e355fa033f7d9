"""
Configuration Module

soapkit settings and utilities.
"""

from soapkit.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
