"""In-memory fakes shared by the test-suite."""

import math
from typing import List, Optional

from artwork_selector.core import FetchFailure
from artwork_selector.models import Artwork, RecordPage


def make_artworks(count: int, start_id: int = 1) -> List[Artwork]:
    return [
        Artwork(
            id=i,
            title=f"Artwork {i}",
            artist_display=f"Artist {i}",
            place_of_origin="France",
            date_start=1800 + i,
            date_end=1810 + i,
        )
        for i in range(start_id, start_id + count)
    ]


class FakeRecordSource:
    """In-memory record source that counts fetches and can fail on chosen pages."""

    def __init__(self, records: List[Artwork], page_size: int = 10, fail_on: Optional[set] = None):
        self.records = records
        self.page_size = page_size
        self.fail_on = fail_on or set()
        self.fetched: List[int] = []
        self.closed = False

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.records) / self.page_size)

    def page(self, page_index: int) -> RecordPage:
        start = (page_index - 1) * self.page_size
        return RecordPage(
            records=self.records[start:start + self.page_size],
            page_index=page_index,
            page_size=self.page_size,
            total_count=len(self.records),
        )

    async def fetch_page(self, page_index: int) -> RecordPage:
        self.fetched.append(page_index)
        if page_index in self.fail_on:
            raise FetchFailure(page_index, "HTTP 503: unavailable", 503)
        return self.page(page_index)

    async def __aenter__(self) -> "FakeRecordSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.closed = True


