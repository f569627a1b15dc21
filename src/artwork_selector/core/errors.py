"""Exceptions raised by the selection core and its record sources."""

from typing import Optional


class SelectionError(Exception):
    """Base class for selection errors."""


class FetchFailure(SelectionError):
    """A page request to the record source did not complete successfully."""

    def __init__(self, page_index: int, message: str, status_code: Optional[int] = None):
        self.page_index = page_index
        self.message = message
        self.status_code = status_code
        super().__init__(f"Failed to fetch page {page_index}: {message}")


class AccumulationInProgress(SelectionError):
    """A target accumulation was started while another one is still running."""

    def __init__(self) -> None:
        super().__init__("A row selection run is already in progress")
