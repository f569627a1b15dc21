"""Record source contract used by the selection core."""

from typing import Protocol, runtime_checkable

from ..models import RecordPage


@runtime_checkable
class RecordSource(Protocol):
    """
    Anything that can fetch one page of a paginated record collection.

    Implementations raise ``FetchFailure`` when a page cannot be retrieved.
    The returned page reports its own page size and the total record count.
    """

    async def fetch_page(self, page_index: int) -> RecordPage:
        ...
