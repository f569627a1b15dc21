"""Data models for the artwork selector."""

from .records import Artwork, RecordPage

__all__ = ["Artwork", "RecordPage"]
