"""
Configuration management for the product code library.
"""

from productcode.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
