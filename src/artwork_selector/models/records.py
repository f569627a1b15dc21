"""
Pydantic models for records and pages returned by a record source.

The selection logic only ever reads ``Artwork.id``; every other attribute is
carried verbatim from the API for display purposes.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, Field


class Artwork(BaseModel):
    """A single selectable artwork record."""
    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    model_config = {"frozen": True}


class RecordPage(BaseModel):
    """
    One fetched page of records plus its position in the whole collection.

    ``page_size`` and ``total_count`` are whatever the source reported for this
    fetch; ``total_pages`` is derived from them rather than from any widget
    configuration.
    """
    records: List[Artwork] = Field(default_factory=list)
    page_index: int = Field(ge=1)
    page_size: int = Field(gt=0)
    total_count: int = Field(default=0, ge=0)

    @property
    def total_pages(self) -> int:
        """Number of pages in the collection, 0 for an empty collection."""
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages

    @property
    def ids(self) -> List[int]:
        return [record.id for record in self.records]

    def __len__(self) -> int:
        return len(self.records)
