"""Service layer for the artwork selector."""

from .session import PageView, SelectionSession

__all__ = ["PageView", "SelectionSession"]
