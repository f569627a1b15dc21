"""
Page-scoped "select all" toggle.

Reconciles a single header checkbox for the displayed page with a selection
that may already hold some, all or none of that page, plus records from other
pages. Nothing here fetches; only the loaded page is touched.
"""

from loguru import logger

from ..models import RecordPage
from .selection_set import SelectionSet


def is_fully_covered(page: RecordPage, selection: SelectionSet) -> bool:
    """
    Check whether every record on ``page`` is selected.

    An empty page is never fully covered, so the header checkbox renders
    unchecked when there is nothing to check.
    """
    if not page.records:
        return False
    return all(selection.contains(record) for record in page.records)


def set_checked(page: RecordPage, selection: SelectionSet) -> SelectionSet:
    added = selection.add_all_missing(page.records)
    logger.debug(f"Selected {added} records from page {page.page_index}")
    return selection


def set_unchecked(page: RecordPage, selection: SelectionSet) -> SelectionSet:
    removed = selection.remove_all_present(page.records)
    logger.debug(f"Deselected {removed} records from page {page.page_index}")
    return selection


def apply_page_toggle(page: RecordPage, selection: SelectionSet, checked: bool) -> SelectionSet:
    """
    Apply the header checkbox state to the displayed page.

    Args:
        page: Currently displayed page
        selection: Selection to mutate in place
        checked: New checkbox state

    Returns:
        SelectionSet: The same selection, for chaining
    """
    if checked:
        return set_checked(page, selection)
    return set_unchecked(page, selection)
