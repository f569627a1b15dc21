"""
Browsing session service.

Owns the currently displayed page and the selection, routes row toggles, page
toggles and "select N rows" runs to the core, and publishes a ``PageView`` to
observers after every mutation.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from loguru import logger

from ..core import (
    AccumulationResult,
    RecordSource,
    SelectionError,
    SelectionSet,
    TargetAccumulator,
    apply_page_toggle,
    is_fully_covered,
)
from ..models import Artwork, RecordPage


@dataclass(frozen=True)
class PageView:
    """What the presentation layer needs to render the table."""
    records: List[Artwork] = field(default_factory=list)
    selected_ids: List[int] = field(default_factory=list)
    page_fully_selected: bool = False
    page_index: Optional[int] = None
    total_pages: int = 0
    total_count: int = 0

    @property
    def selected_count(self) -> int:
        return len(self.selected_ids)

    def is_selected(self, record: Artwork) -> bool:
        return record.id in self.selected_ids


ViewObserver = Callable[[PageView], None]


class SelectionSession:
    """
    Single-owner session around a record source and a selection.

    All methods must be called from one event loop. Row and page toggles are
    synchronous; ``select_rows`` suspends while pages are fetched and refuses
    to start while a previous run is still in flight.
    """

    def __init__(self, source: RecordSource, selection: Optional[SelectionSet] = None):
        self.source = source
        self.selection = selection if selection is not None else SelectionSet()
        self.current_page: Optional[RecordPage] = None
        self._observers: List[ViewObserver] = []
        self._accumulator = TargetAccumulator(
            source, self.selection, on_publish=self._on_accumulated
        )

    @property
    def busy(self) -> bool:
        return self._accumulator.running

    @property
    def page_fully_selected(self) -> bool:
        if self.current_page is None:
            return False
        return is_fully_covered(self.current_page, self.selection)

    def subscribe(self, observer: ViewObserver) -> Callable[[], None]:
        """
        Register an observer for page views.

        Returns:
            Callable: Unsubscribe function
        """
        self._observers.append(observer)
        return lambda: self._observers.remove(observer)

    def view(self, selection: Optional[SelectionSet] = None) -> PageView:
        selection = selection if selection is not None else self.selection
        page = self.current_page
        if page is None:
            return PageView(selected_ids=selection.ids())
        return PageView(
            records=list(page.records),
            selected_ids=selection.ids(),
            page_fully_selected=is_fully_covered(page, selection),
            page_index=page.page_index,
            total_pages=page.total_pages,
            total_count=page.total_count,
        )

    async def load_page(self, page_index: int) -> RecordPage:
        """
        Fetch and display a page. The selection is left untouched.

        Raises:
            FetchFailure: If the page could not be fetched
        """
        page = await self.source.fetch_page(page_index)
        self.current_page = page
        logger.debug(f"Displaying page {page.page_index} of {page.total_pages}")
        self._publish()
        return page

    def toggle_row(self, record: Union[Artwork, int]) -> bool:
        """
        Flip the selection of one record on the displayed page.

        Returns:
            bool: New selection state of the record

        Raises:
            SelectionError: If the record is not on the displayed page
        """
        target = self._find_on_page(record)
        state = self.selection.toggle(target)
        self._publish()
        return state

    def toggle_page(self, checked: bool) -> None:
        """Apply the header "select all" checkbox to the displayed page."""
        page = self._require_page()
        apply_page_toggle(page, self.selection, checked)
        self._publish()

    async def select_rows(self, target: int) -> AccumulationResult:
        """
        Grow the selection to ``target`` records, fetching later pages as needed.

        Raises:
            AccumulationInProgress: If a previous run has not finished
            FetchFailure: If a page fetch fails; earlier additions are kept
        """
        page = self._require_page()
        try:
            return await self._accumulator.accumulate(target, page)
        finally:
            self._publish()

    def reset(self) -> None:
        """Clear the selection."""
        self.selection.clear()
        logger.info("Selection cleared")
        self._publish()

    def _find_on_page(self, record: Union[Artwork, int]) -> Artwork:
        page = self._require_page()
        record_id = record.id if isinstance(record, Artwork) else record
        for candidate in page.records:
            if candidate.id == record_id:
                return candidate
        raise SelectionError(f"Record {record_id} is not on page {page.page_index}")

    def _require_page(self) -> RecordPage:
        if self.current_page is None:
            raise SelectionError("No page has been loaded yet")
        return self.current_page

    def _on_accumulated(self, snapshot: SelectionSet) -> None:
        self._publish(snapshot)

    def _publish(self, selection: Optional[SelectionSet] = None) -> None:
        view = self.view(selection)
        for observer in list(self._observers):
            observer(view)
