"""API client module for the artworks collection."""

from .client import ArtworkAPIClient

__all__ = ["ArtworkAPIClient"]
