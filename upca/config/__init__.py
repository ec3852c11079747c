"""
Configuration management for the UPC-A codec.
"""

from upca.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
