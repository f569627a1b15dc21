"""
Artwork Selector - paginated browsing and cross-page selection of artworks.

This package lets a user page through a server-paginated artworks collection and
build a selection that spans pages, including a "select N rows" shortcut that
pulls in records from pages that have not been displayed yet.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
