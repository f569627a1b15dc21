"""
Target accumulator for "select N rows".

Grows a selection towards a requested total, taking unselected records from the
loaded page first and then fetching following pages one at a time until the
total is reached or the collection runs out. The selection is published after
every page so observers can show progress while later pages are in flight.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from loguru import logger

from ..models import Artwork, RecordPage
from .errors import AccumulationInProgress, FetchFailure
from .selection_set import SelectionSet
from .source import RecordSource

SelectionObserver = Callable[[SelectionSet], None]


@dataclass
class AccumulationResult:
    """Outcome of one accumulation run."""
    target: int
    selected_count: int
    added: int = 0
    pages_fetched: List[int] = field(default_factory=list)
    exhausted: bool = False
    selected_ids: List[int] = field(default_factory=list)

    @property
    def reached_target(self) -> bool:
        return self.selected_count >= self.target


class TargetAccumulator:
    """
    Drives a record source page by page until a selection reaches a target size.

    Runs must be serialized: starting a run while another is in flight raises
    ``AccumulationInProgress``. A fetch failure stops the run and propagates
    as ``FetchFailure``; records added before the failure stay selected.
    """

    def __init__(
        self,
        source: RecordSource,
        selection: SelectionSet,
        on_publish: Optional[SelectionObserver] = None,
    ):
        """
        Initialize the accumulator.

        Args:
            source: Record source used to fetch pages after the loaded one
            selection: Selection to grow in place
            on_publish: Called with a snapshot of the selection after each page
        """
        self.source = source
        self.selection = selection
        self.on_publish = on_publish
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def accumulate(self, target: int, current_page: RecordPage) -> AccumulationResult:
        """
        Grow the selection to at least ``target`` members.

        Args:
            target: Desired total selection size; non-positive values are a no-op
            current_page: The page currently loaded, scanned before any fetch

        Returns:
            AccumulationResult: What the run added and which pages it fetched

        Raises:
            AccumulationInProgress: If another run is still in flight
            FetchFailure: If a page could not be fetched
        """
        if self._running:
            raise AccumulationInProgress()

        self._running = True
        try:
            return await self._run(target, current_page)
        finally:
            self._running = False

    async def _run(self, target: int, current_page: RecordPage) -> AccumulationResult:
        result = AccumulationResult(target=target, selected_count=len(self.selection))
        needed = target - len(self.selection)
        if needed <= 0:
            logger.debug(
                f"Target {target} already met by {len(self.selection)} selected records"
            )
            result.selected_ids = self.selection.ids()
            return result

        taken = self._take(current_page.records, needed)
        needed -= taken
        result.added += taken
        if taken:
            self._publish()

        page = current_page
        next_index = current_page.page_index + 1

        while needed > 0:
            if next_index > page.total_pages:
                result.exhausted = True
                break

            logger.debug(f"Fetching page {next_index} for {needed} more records")
            try:
                page = await self.source.fetch_page(next_index)
            except FetchFailure as e:
                logger.error(
                    f"Row selection stopped at page {next_index} with "
                    f"{len(self.selection)}/{target} selected: {e.message}"
                )
                raise

            result.pages_fetched.append(next_index)
            taken = self._take(page.records, needed)
            needed -= taken
            result.added += taken
            self._publish()

            if not page.records:
                result.exhausted = True
                break
            next_index += 1

        result.selected_count = len(self.selection)
        result.selected_ids = self.selection.ids()
        if result.exhausted:
            logger.warning(
                f"Collection exhausted with {result.selected_count}/{target} records selected"
            )
        logger.info(
            f"Selected {result.added} records towards target {target} "
            f"({len(result.pages_fetched)} extra pages fetched)"
        )
        return result

    def _take(self, records: Iterable[Artwork], needed: int) -> int:
        """Add unselected records in order until ``needed`` have been added."""
        taken = 0
        for record in records:
            if taken >= needed:
                break
            if self.selection.add(record):
                taken += 1
        return taken

    def _publish(self) -> None:
        if self.on_publish is not None:
            self.on_publish(self.selection.copy())
