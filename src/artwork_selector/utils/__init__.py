"""Utility helpers for the artwork selector."""

from .logging import setup_logging

__all__ = ["setup_logging"]
