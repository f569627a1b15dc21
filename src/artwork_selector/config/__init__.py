"""Configuration module for the artwork selector."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
